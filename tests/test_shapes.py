"""Test drawable shape objects.

Tests for rasterpen.scene.shapes:
    - Each shape draws exactly what the matching rasterizer calls draw
    - Outline is painted over the fill
    - Rectangle.from_points covers both corners inclusively
    - Shapes with neither color draw nothing
    - draw() applies shapes in order and returns the canvas

Run:
    pytest tests/test_shapes.py -v
"""

import numpy as np
import pytest

from rasterpen import Canvas, Color
from rasterpen.raster import conics, lines, rects, triangles
from rasterpen.scene.shapes import Circle, Ellipse, Rectangle, Segment, Triangle, draw


@pytest.fixture
def pair():
    return Canvas.blank(40, 40), Canvas.blank(40, 40)


def test_rectangle_fill_and_outline(pair):
    a, b = pair
    Rectangle(5, 6, 20, 10, fill_color=Color.GREEN, outline_color=Color.RED, outline_thickness=3).draw_to(a)
    rects.fill_rect(b, 5, 6, 20, 10, Color.GREEN)
    rects.thick_outline_rect(b, 5, 6, 20, 10, 3, Color.RED)
    np.testing.assert_array_equal(a.grid, b.grid)
    assert a.get_pixel(5, 6) == Color.RED
    assert a.get_pixel(15, 11) == Color.GREEN


def test_rectangle_from_points():
    rect = Rectangle.from_points(12, 3, 4, 9, fill_color=Color.BLUE)
    assert (rect.x, rect.y, rect.w, rect.h) == (4, 3, 9, 7)

    canvas = Canvas.blank(20, 20)
    rect.draw_to(canvas)
    assert canvas.get_pixel(4, 3) == Color.BLUE
    assert canvas.get_pixel(12, 9) == Color.BLUE
    assert canvas.get_pixel(13, 9) == Color.BLACK


def test_circle_matches_rasterizers(pair):
    a, b = pair
    Circle(20, 20, 9, fill_color=Color.BLUE, outline_color=Color.WHITE).draw_to(a)
    conics.fill_circle(b, 20, 20, 9, Color.BLUE)
    conics.outline_circle(b, 20, 20, 9, Color.WHITE)
    np.testing.assert_array_equal(a.grid, b.grid)


def test_ellipse_matches_rasterizers(pair):
    a, b = pair
    Ellipse(20, 20, 15, 6, fill_color="gold", outline_color="indigo", outline_thickness=2).draw_to(a)
    conics.fill_ellipse(b, 20, 20, 15, 6, Color.GOLD)
    conics.thick_outline_ellipse(b, 20, 20, 15, 6, 2, Color.INDIGO)
    np.testing.assert_array_equal(a.grid, b.grid)


def test_triangle_matches_rasterizers(pair):
    a, b = pair
    Triangle((2, 30), (20, 3), (36, 33), fill_color=Color.CYAN, outline_color=Color.RED).draw_to(a)
    triangles.fill_triangle(b, 2, 30, 20, 3, 36, 33, Color.CYAN)
    triangles.outline_triangle(b, 2, 30, 20, 3, 36, 33, Color.RED)
    np.testing.assert_array_equal(a.grid, b.grid)


def test_segment(pair):
    a, b = pair
    Segment(1, 2, 30, 20, color=Color.YELLOW).draw_to(a)
    lines.line(b, 1, 2, 30, 20, Color.YELLOW)
    np.testing.assert_array_equal(a.grid, b.grid)

    a.clear(Color.BLACK)
    b.clear(Color.BLACK)
    Segment(1, 2, 30, 20, color=Color.YELLOW, thickness=4).draw_to(a)
    lines.thick_line(b, 1, 2, 30, 20, 4, Color.YELLOW)
    np.testing.assert_array_equal(a.grid, b.grid)


def test_colorless_shape_draws_nothing():
    canvas = Canvas.blank(10, 10)
    draw(canvas, Rectangle(0, 0, 5, 5), Circle(5, 5, 3), Triangle((0, 0), (9, 0), (0, 9)))
    assert not canvas.buffer.any()


def test_draw_order_and_return():
    canvas = Canvas.blank(10, 10)
    result = draw(
        canvas,
        Rectangle(0, 0, 10, 10, fill_color=Color.RED),
        Rectangle(2, 2, 3, 3, fill_color=Color.BLUE),
    )
    assert result is canvas
    assert canvas.get_pixel(3, 3) == Color.BLUE
    assert canvas.get_pixel(8, 8) == Color.RED
