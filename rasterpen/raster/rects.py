"""Axis-aligned rectangle rasterizers.

Rectangles use the (x, y, w, h) convention with half-open extents: the
filled area is columns [x, x + w) and rows [y, y + h). Negative w or h is
flipped to the other side of the anchor (x += w; w = -w), so
fill_rect(10, 10, -4, 3) == fill_rect(6, 10, 4, 3). A rectangle with zero
width or height has no pixels and draws nothing.

Outlines trace the boundary pixels of the filled area, i.e. the edges at
x, x + w - 1, y and y + h - 1.
"""

from ..utils.color import ColorLike, to_word
from ..utils.compute import normalize_rect
from .canvas import Canvas
from .lines import hline, thick_hline, thick_vline, vline


def fill_rect(canvas: Canvas, x: int, y: int, w: int, h: int, color: ColorLike) -> None:
    """Fill [x, x + w) x [y, y + h), clipped to the canvas."""
    x, y, w, h = normalize_rect(x, y, w, h)
    if w == 0 or h == 0:
        return
    canvas.fill_block(x, y, x + w - 1, y + h - 1, to_word(color))


def outline_rect(canvas: Canvas, x: int, y: int, w: int, h: int, color: ColorLike) -> None:
    """1-px border of the rectangle fill_rect() would cover."""
    x, y, w, h = normalize_rect(x, y, w, h)
    if w == 0 or h == 0:
        return
    word = to_word(color)
    right, bottom = x + w - 1, y + h - 1
    hline(canvas, x, right, y, word)
    hline(canvas, x, right, bottom, word)
    vline(canvas, x, y, bottom, word)
    vline(canvas, right, y, bottom, word)


def thick_outline_rect(
    canvas: Canvas,
    x: int,
    y: int,
    w: int,
    h: int,
    width: int,
    color: ColorLike
) -> None:
    """Border bands of 2 * (width // 2) + 1 px centred on the outline edges.

    Bands overlap at the corners; width 1 draws outline_rect(), width <= 0
    draws nothing.
    """
    if width <= 0:
        return
    if width == 1:
        outline_rect(canvas, x, y, w, h, color)
        return

    x, y, w, h = normalize_rect(x, y, w, h)
    if w == 0 or h == 0:
        return
    word = to_word(color)
    right, bottom = x + w - 1, y + h - 1
    thick_hline(canvas, x, right, y, width, word)
    thick_hline(canvas, x, right, bottom, width, word)
    thick_vline(canvas, x, y, bottom, width, word)
    thick_vline(canvas, right, y, bottom, width, word)
