"""Triangle rasterizers.

fill_triangle collects, per scanline, the leftmost and rightmost Bresenham
pixel of the three edges and fills the span between them. The filled area
therefore always contains outline_triangle() exactly, and a degenerate
(collinear) triangle collapses to its edges instead of vanishing.
"""

from typing import Dict, List

from ..utils.color import ColorLike, to_word
from .canvas import Canvas
from .lines import bresenham, line, thick_line


def _edge_spans(x0: int, y0: int, x1: int, y1: int, x2: int, y2: int) -> Dict[int, List[int]]:
    spans: Dict[int, List[int]] = {}
    for ax, ay, bx, by in ((x0, y0, x1, y1), (x1, y1, x2, y2), (x2, y2, x0, y0)):
        for x, y in bresenham(ax, ay, bx, by):
            span = spans.get(y)
            if span is None:
                spans[y] = [x, x]
            elif x < span[0]:
                span[0] = x
            elif x > span[1]:
                span[1] = x
    return spans


def fill_triangle(
    canvas: Canvas,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    color: ColorLike
) -> None:
    """Solid triangle, edges included, one span per scanline."""
    word = to_word(color)
    for y, (left, right) in _edge_spans(x0, y0, x1, y1, x2, y2).items():
        canvas.fill_hspan(y, left, right, word)


def outline_triangle(
    canvas: Canvas,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    color: ColorLike
) -> None:
    """Three 1-px edges."""
    word = to_word(color)
    line(canvas, x0, y0, x1, y1, word)
    line(canvas, x1, y1, x2, y2, word)
    line(canvas, x2, y2, x0, y0, word)


def thick_outline_triangle(
    canvas: Canvas,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    width: int,
    color: ColorLike
) -> None:
    """Three thick_line() edges; the disc brush rounds the joints.

    width 1 draws outline_triangle(); width <= 0 draws nothing.
    """
    word = to_word(color)
    thick_line(canvas, x0, y0, x1, y1, width, word)
    thick_line(canvas, x1, y1, x2, y2, width, word)
    thick_line(canvas, x2, y2, x0, y0, width, word)
