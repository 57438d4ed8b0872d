"""Test line rasterizers.

Tests for rasterpen.raster.lines:
    - Zero-length line sets exactly one pixel
    - Endpoint order does not change the pixel set
    - Bresenham output is 8-connected, endpoint-inclusive, max(|dx|, |dy|) + 1 long
    - Axis-aligned fast paths match the stepping path
    - Per-pixel clipping for off-canvas segments
    - thick_line keeps its width at every slope and has round caps
    - Every thick_* primitive draws nothing for width <= 0

Run:
    pytest tests/test_lines.py -v
"""

import numpy as np
import pytest

from rasterpen import Canvas, Color
from rasterpen.raster.conics import thick_outline_circle, thick_outline_ellipse
from rasterpen.raster.lines import (
    bresenham,
    hline,
    line,
    thick_hline,
    thick_line,
    thick_vline,
    vline,
)
from rasterpen.raster.rects import thick_outline_rect
from rasterpen.raster.triangles import thick_outline_triangle

SEGMENTS = [
    (0, 0, 10, 3),
    (2, 17, 15, 1),
    (5, 5, 5, 18),
    (19, 4, 1, 4),
    (3, 3, 16, 16),
    (18, 2, 2, 18),
    (0, 10, 7, 0),
    (4, 9, 5, 19),
]


def painted(canvas: Canvas, color: Color) -> set:
    ys, xs = np.nonzero(canvas.grid == color.value)
    return {(int(x), int(y)) for x, y in zip(xs, ys)}


@pytest.fixture
def canvas():
    return Canvas.blank(20, 20, Color.BLACK)


def test_zero_length_line_single_pixel(canvas):
    line(canvas, 7, 9, 7, 9, Color.RED)
    assert painted(canvas, Color.RED) == {(7, 9)}


@pytest.mark.parametrize("seg", SEGMENTS)
def test_endpoint_order_symmetric(seg):
    x0, y0, x1, y1 = seg
    a = Canvas.blank(20, 20)
    b = Canvas.blank(20, 20)
    line(a, x0, y0, x1, y1, Color.WHITE)
    line(b, x1, y1, x0, y0, Color.WHITE)
    np.testing.assert_array_equal(a.grid, b.grid)


@pytest.mark.parametrize("seg", SEGMENTS)
def test_bresenham_properties(seg):
    x0, y0, x1, y1 = seg
    pts = list(bresenham(x0, y0, x1, y1))

    assert len(pts) == max(abs(x1 - x0), abs(y1 - y0)) + 1
    assert len(set(pts)) == len(pts)
    assert {(x0, y0), (x1, y1)} <= set(pts)
    for (ax, ay), (bx, by) in zip(pts, pts[1:]):
        assert max(abs(ax - bx), abs(ay - by)) == 1


def test_line_pixels_match_bresenham(canvas):
    line(canvas, 1, 2, 17, 11, Color.GREEN)
    assert painted(canvas, Color.GREEN) == set(bresenham(1, 2, 17, 11))


def test_axis_fast_paths(canvas):
    line(canvas, 9, 3, 2, 3, Color.RED)
    assert painted(canvas, Color.RED) == {(x, 3) for x in range(2, 10)}

    line(canvas, 5, 12, 5, 6, Color.BLUE)
    assert painted(canvas, Color.BLUE) == {(5, y) for y in range(6, 13)}

    other = Canvas.blank(20, 20)
    hline(other, 2, 9, 3, Color.RED)
    vline(other, 5, 6, 12, Color.BLUE)
    np.testing.assert_array_equal(canvas.grid, other.grid)


def test_line_clipped_per_pixel():
    canvas = Canvas.blank(8, 8)
    line(canvas, -10, -10, 20, 20, Color.WHITE)
    assert painted(canvas, Color.WHITE) == {(i, i) for i in range(8)}

    canvas.clear(Color.BLACK)
    line(canvas, -5, 3, -1, 7, Color.WHITE)
    assert painted(canvas, Color.WHITE) == set()


def test_line_center_origin():
    canvas = Canvas.blank(9, 9, origin="center")
    line(canvas, -4, 0, 4, 0, Color.RED)
    assert painted(canvas, Color.RED) == {(x, 4) for x in range(9)}


def test_thick_line_width_one_is_line(canvas):
    other = Canvas.blank(20, 20)
    thick_line(canvas, 1, 1, 18, 7, 1, Color.WHITE)
    line(other, 1, 1, 18, 7, Color.WHITE)
    np.testing.assert_array_equal(canvas.grid, other.grid)


def test_thick_line_horizontal_cross_section():
    canvas = Canvas.blank(40, 40)
    thick_line(canvas, 5, 10, 25, 10, 5, Color.RED)
    pts = painted(canvas, Color.RED)

    # width 5 → disc radius 2 → 5 rows at every interior column
    assert {y for x, y in pts if x == 15} == {8, 9, 10, 11, 12}
    # round caps: the corner of the bounding box stays empty
    assert (3, 8) not in pts
    assert (3, 10) in pts and (27, 10) in pts


def test_thick_line_diagonal_has_no_holes():
    canvas = Canvas.blank(50, 50)
    thick_line(canvas, 10, 10, 40, 40, 5, Color.RED)
    pts = painted(canvas, Color.RED)

    for x, y in pts:
        assert abs(x - y) <= 2
    for x in range(12, 39):
        for d in range(-2, 3):
            assert (x, x + d) in pts


def test_thick_axis_bands(canvas):
    thick_hline(canvas, 2, 10, 5, 4, Color.RED)
    assert painted(canvas, Color.RED) == {(x, y) for x in range(2, 11) for y in range(3, 8)}

    canvas.clear(Color.BLACK)
    thick_vline(canvas, 6, 12, 4, 3, Color.BLUE)
    assert painted(canvas, Color.BLUE) == {(x, y) for x in range(5, 8) for y in range(4, 13)}


@pytest.mark.parametrize("width", [0, -3])
@pytest.mark.parametrize("draw", [
    lambda c, w: thick_line(c, 2, 3, 15, 11, w, Color.RED),
    lambda c, w: thick_hline(c, 2, 15, 8, w, Color.RED),
    lambda c, w: thick_vline(c, 8, 2, 15, w, Color.RED),
    lambda c, w: thick_outline_rect(c, 3, 3, 10, 8, w, Color.RED),
    lambda c, w: thick_outline_circle(c, 10, 10, 6, w, Color.RED),
    lambda c, w: thick_outline_ellipse(c, 10, 10, 7, 4, w, Color.RED),
    lambda c, w: thick_outline_triangle(c, 2, 2, 17, 5, 9, 16, w, Color.RED),
])
def test_non_positive_width_draws_nothing(canvas, draw, width):
    draw(canvas, width)
    assert painted(canvas, Color.RED) == set()
