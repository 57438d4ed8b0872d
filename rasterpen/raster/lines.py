"""Line rasterizers: Bresenham lines, axis fast paths and thick strokes.

Provides:
    - bresenham(): integer points of a segment (pure generator)
    - line(): 1-px line, endpoints inclusive
    - hline() / vline(): O(length) axis-aligned spans
    - thick_line(): disc brush swept along the Bresenham path
    - thick_hline() / thick_vline(): square-capped axis bands

Invariants:
    - Integer arithmetic only (additions and comparisons in the stepping loop)
    - line(a, b) and line(b, a) touch identical pixels: endpoints are put in
      canonical (lexicographic) order before stepping
    - A zero-length segment touches exactly its one pixel
    - Clipping is per pixel through the Canvas; nothing here raises

Stroke width:
    thick_line stamps a filled disc of radius width // 2, so the stroke is
    2 * (width // 2) + 1 pixels across at every slope (even widths round up)
    and has round caps. width 1 falls back to line(); width <= 0 draws
    nothing, like every other thick_* primitive.
"""

from typing import Iterator, Tuple

from ..utils.color import ColorLike, to_word
from .canvas import Canvas
from .conics import circle_halves


def bresenham(x0: int, y0: int, x1: int, y1: int) -> Iterator[Tuple[int, int]]:
    """Yield every pixel of the segment, both endpoints included.

    Parameters
    ----------
    x0, y0, x1, y1 : int
        Endpoints; order does not affect the resulting pixel set

    Yields
    ------
    Tuple[int, int]
        (x, y) pixels from the lexicographically smaller endpoint onwards
    """
    if (x1, y1) < (x0, y0):
        x0, y0, x1, y1 = x1, y1, x0, y0

    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    x, y = x0, y0
    while True:
        yield x, y
        if x == x1 and y == y1:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy


def hline(canvas: Canvas, x0: int, x1: int, y: int, color: ColorLike) -> None:
    """Horizontal run on row y from x0 to x1 inclusive (either order)."""
    canvas.fill_hspan(y, x0, x1, to_word(color))


def vline(canvas: Canvas, x: int, y0: int, y1: int, color: ColorLike) -> None:
    """Vertical run on column x from y0 to y1 inclusive (either order)."""
    canvas.fill_vspan(x, y0, y1, to_word(color))


def line(canvas: Canvas, x0: int, y0: int, x1: int, y1: int, color: ColorLike) -> None:
    """Draw a 1-px Bresenham line, both endpoints inclusive.

    Axis-aligned segments are routed to hline()/vline(), which touch the
    same pixels without per-pixel stepping.
    """
    word = to_word(color)
    if y0 == y1:
        canvas.fill_hspan(y0, x0, x1, word)
        return
    if x0 == x1:
        canvas.fill_vspan(x0, y0, y1, word)
        return
    put = canvas.put_word
    for x, y in bresenham(x0, y0, x1, y1):
        put(x, y, word)


def thick_line(
    canvas: Canvas,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    width: int,
    color: ColorLike
) -> None:
    """Draw a stroke of constant width by stamping a disc along the path.

    Parameters
    ----------
    canvas : Canvas
        Target canvas
    x0, y0, x1, y1 : int
        Centerline endpoints (inclusive)
    width : int
        Stroke width in pixels; 1 draws a 1-px line, <= 0 draws nothing
    color : ColorLike
        Stroke color

    Notes
    -----
    Parallel-offset lines thin out near 45° and leave holes; a swept disc
    keeps the perpendicular width the same at every slope.
    """
    if width <= 0:
        return
    if width == 1:
        line(canvas, x0, y0, x1, y1, color)
        return

    word = to_word(color)
    halves = circle_halves(width // 2)
    fill = canvas.fill_hspan

    for x, y in bresenham(x0, y0, x1, y1):
        fill(y, x - halves[0], x + halves[0], word)
        for dy in range(1, len(halves)):
            h = halves[dy]
            fill(y - dy, x - h, x + h, word)
            fill(y + dy, x - h, x + h, word)


def thick_hline(canvas: Canvas, x0: int, x1: int, y: int, width: int, color: ColorLike) -> None:
    """Horizontal band of 2 * (width // 2) + 1 rows centred on row y."""
    if width <= 0:
        return
    half = width // 2
    canvas.fill_block(x0, y - half, x1, y + half, to_word(color))


def thick_vline(canvas: Canvas, x: int, y0: int, y1: int, width: int, color: ColorLike) -> None:
    """Vertical band of 2 * (width // 2) + 1 columns centred on column x."""
    if width <= 0:
        return
    half = width // 2
    canvas.fill_block(x - half, y0, x + half, y1, to_word(color))
