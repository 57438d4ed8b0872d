"""Test scanline flood fill.

Tests for rasterpen.raster.fill:
    - Enclosed region filled exactly; return value is the pixel count
    - No-op (returns 0) when the target equals the seed color
    - Off-canvas seed is ignored
    - 4-connectivity: a diagonal 1-px line is a barrier
    - Agreement with a brute-force BFS on a random two-color pattern
    - Large regions do not recurse (300x300 blank canvas)
    - Seeds in center-origin coordinates

Run:
    pytest tests/test_flood_fill.py -v
"""

from collections import deque

import numpy as np
import pytest

from rasterpen import Canvas, Color
from rasterpen.raster.fill import flood_fill
from rasterpen.raster.lines import line
from rasterpen.raster.rects import outline_rect


def reference_fill(grid: np.ndarray, px: int, py: int, word: int) -> np.ndarray:
    """Plain 4-connected BFS used as the oracle."""
    out = grid.copy()
    seed = out[py, px]
    if seed == word:
        return out
    h, w = out.shape
    queue = deque([(px, py)])
    out[py, px] = word
    while queue:
        x, y = queue.popleft()
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if 0 <= nx < w and 0 <= ny < h and out[ny, nx] == seed:
                out[ny, nx] = word
                queue.append((nx, ny))
    return out


@pytest.fixture
def boxed():
    """10x10 black canvas with a white box outline from (2, 2) to (7, 7)."""
    canvas = Canvas.blank(10, 10, Color.BLACK)
    outline_rect(canvas, 2, 2, 6, 6, Color.WHITE)
    return canvas


def test_fill_enclosed_region(boxed):
    before = boxed.grid.copy()
    count = flood_fill(boxed, 4, 4, Color.RED)

    assert count == 16
    inside = np.zeros((10, 10), dtype=bool)
    inside[3:7, 3:7] = True
    assert np.all(boxed.grid[inside] == Color.RED.value)
    np.testing.assert_array_equal(boxed.grid[~inside], before[~inside])


def test_fill_outside_region(boxed):
    count = flood_fill(boxed, 0, 0, Color.BLUE)
    assert count == 100 - 36
    assert boxed.get_pixel(4, 4) == Color.BLACK
    assert boxed.get_pixel(9, 9) == Color.BLUE


def test_same_color_is_noop(boxed):
    before = boxed.grid.copy()
    assert flood_fill(boxed, 4, 4, Color.BLACK) == 0
    assert flood_fill(boxed, 2, 2, (255, 255, 255)) == 0
    np.testing.assert_array_equal(boxed.grid, before)


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (10, 3), (3, 10)])
def test_off_canvas_seed(boxed, x, y):
    before = boxed.grid.copy()
    assert flood_fill(boxed, x, y, Color.RED) == 0
    np.testing.assert_array_equal(boxed.grid, before)


def test_diagonal_line_blocks_4_connected_fill():
    canvas = Canvas.blank(10, 10, Color.BLACK)
    line(canvas, 0, 0, 9, 9, Color.WHITE)

    count = flood_fill(canvas, 9, 0, Color.RED)

    assert count == 45
    ys, xs = np.nonzero(canvas.grid == Color.RED.value)
    assert np.all(xs > ys)
    assert np.all(canvas.grid[np.tril_indices(10, -1)] == Color.BLACK.value)


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_matches_reference_bfs(seed):
    rng = np.random.default_rng(seed)
    words = np.where(rng.random((30, 40)) < 0.6, Color.BLACK.value, Color.WHITE.value).astype(np.uint32)
    canvas = Canvas(words.copy(), 40, 30)

    for px, py in ((0, 0), (20, 15), (39, 29)):
        expected = reference_fill(canvas.grid, px, py, Color.RED.value)
        changed = int((expected != canvas.grid).sum())
        count = flood_fill(canvas, px, py, Color.RED)
        np.testing.assert_array_equal(canvas.grid, expected)
        assert count == changed


def test_large_region_no_recursion():
    canvas = Canvas.blank(300, 300, Color.BLACK)
    assert flood_fill(canvas, 150, 150, Color.GREEN) == 300 * 300
    assert np.all(canvas.grid == Color.GREEN.value)


def test_center_origin_seed():
    canvas = Canvas.blank(9, 9, Color.BLACK, origin="center")
    line(canvas, 0, -4, 0, 4, Color.WHITE)

    count = flood_fill(canvas, -2, 0, Color.RED)

    assert count == 4 * 9
    assert canvas.get_pixel(-4, -4) == Color.RED
    assert canvas.get_pixel(1, 0) == Color.BLACK
