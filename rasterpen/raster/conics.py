"""Circle and ellipse rasterizers (midpoint family).

Provides:
    - circle_halves() / ellipse_halves(): per-row half-widths of a disc or
      filled ellipse, computed incrementally (pure, integer-only)
    - fill_circle(), outline_circle(), thick_outline_circle()
    - fill_ellipse(), outline_ellipse(), thick_outline_ellipse()

Exact pixel sets:
    fill_circle     {(dx, dy) : dx² + dy² <= r²}
    fill_ellipse    {(dx, dy) : ry²·dx² + rx²·dy² <= rx²·ry²}
    thick circle    (r - h)² <= dx² + dy² <= (r + h)²,  h = width // 2
    thick ellipse   inside (rx + h, ry + h) and not strictly inside (rx - h, ry - h)

Fills are emitted one horizontal span per scanline, so a filled shape never
has interior gaps. Outlines use midpoint stepping: the circle computes one
octant and reflects it 8 ways, the ellipse walks one quadrant and reflects
it 4 ways. Radius 0 touches the center pixel; negative radii use abs().
"""

from typing import List, Optional

from ..utils.color import ColorLike, to_word
from .canvas import Canvas


# ============================================================================
# SPAN TABLES
# ============================================================================

def circle_halves(r: int, limit: Optional[int] = None) -> List[int]:
    """Half-width of each row of a disc.

    Parameters
    ----------
    r : int
        Radius (rows 0..r are returned)
    limit : int, optional
        Squared-distance bound, default r * r. Pass r * r - 1 for the
        open disc (strict interior).

    Returns
    -------
    List[int]
        halves[dy] = largest dx >= 0 with dx² + dy² <= limit, or -1 if the
        row is empty
    """
    r = abs(r)
    if limit is None:
        limit = r * r

    halves = []
    x = r
    err = limit - x * x  # limit - x² - dy², kept incrementally
    for dy in range(r + 1):
        if dy:
            err -= 2 * dy - 1
        while x >= 0 and err < 0:
            err += 2 * x - 1
            x -= 1
        halves.append(x)
    return halves


def ellipse_halves(rx: int, ry: int, strict: bool = False) -> List[int]:
    """Half-width of each row of a filled axis-aligned ellipse.

    Parameters
    ----------
    rx, ry : int
        Radii (rows 0..ry are returned)
    strict : bool
        Exclude the boundary (ry²·dx² + rx²·dy² < rx²·ry²), default False

    Returns
    -------
    List[int]
        halves[dy] = largest dx >= 0 inside the ellipse, or -1 if none

    Notes
    -----
    A zero radius degenerates to the axis segment along the other radius.
    """
    a, b = abs(rx), abs(ry)
    a2, b2 = a * a, b * b
    limit = a2 * b2 - (1 if strict else 0)

    halves = []
    x = a
    err = limit - b2 * x * x  # limit - b²x² - a²dy²
    for dy in range(b + 1):
        if dy:
            err -= a2 * (2 * dy - 1)
        while x >= 0 and err < 0:
            err += b2 * (2 * x - 1)
            x -= 1
        halves.append(x)
    return halves


def _fill_rows(canvas: Canvas, cx: int, cy: int, halves: List[int], word: int) -> None:
    fill = canvas.fill_hspan
    for dy, h in enumerate(halves):
        if h < 0:
            break
        fill(cy + dy, cx - h, cx + h, word)
        if dy:
            fill(cy - dy, cx - h, cx + h, word)


def _fill_band(
    canvas: Canvas,
    cx: int,
    cy: int,
    outer: List[int],
    inner: List[int],
    word: int
) -> None:
    """Fill rows of outer minus inner (both symmetric about the center)."""
    fill = canvas.fill_hspan
    for dy, o in enumerate(outer):
        if o < 0:
            break
        i = inner[dy] if dy < len(inner) else -1
        rows = (cy + dy, cy - dy) if dy else (cy,)
        for y in rows:
            if i < 0:
                fill(y, cx - o, cx + o, word)
            elif i < o:
                fill(y, cx - o, cx - i - 1, word)
                fill(y, cx + i + 1, cx + o, word)


# ============================================================================
# CIRCLES
# ============================================================================

def fill_circle(canvas: Canvas, cx: int, cy: int, r: int, color: ColorLike) -> None:
    """Solid disc of radius r centred on (cx, cy), one span per scanline."""
    _fill_rows(canvas, cx, cy, circle_halves(r), to_word(color))


def outline_circle(canvas: Canvas, cx: int, cy: int, r: int, color: ColorLike) -> None:
    """1-px midpoint circle; each octant point is plotted in all 8 octants."""
    word = to_word(color)
    put = canvas.put_word

    x, y = abs(r), 0
    d = 1 - x
    while x >= y:
        put(cx + x, cy + y, word)
        put(cx - x, cy + y, word)
        put(cx + x, cy - y, word)
        put(cx - x, cy - y, word)
        put(cx + y, cy + x, word)
        put(cx - y, cy + x, word)
        put(cx + y, cy - x, word)
        put(cx - y, cy - x, word)

        y += 1
        if d < 0:
            d += 2 * y + 1
        else:
            x -= 1
            d += 2 * (y - x) + 1


def thick_outline_circle(
    canvas: Canvas,
    cx: int,
    cy: int,
    r: int,
    width: int,
    color: ColorLike
) -> None:
    """Ring covering radii r - width//2 .. r + width//2 (both inclusive).

    width 1 draws outline_circle(); width <= 0 draws nothing.
    """
    if width <= 0:
        return
    if width == 1:
        outline_circle(canvas, cx, cy, r, color)
        return

    r = abs(r)
    half = width // 2
    outer = circle_halves(r + half)
    ri = r - half
    inner = circle_halves(ri, ri * ri - 1) if ri > 0 else []
    _fill_band(canvas, cx, cy, outer, inner, to_word(color))


# ============================================================================
# ELLIPSES
# ============================================================================

def fill_ellipse(canvas: Canvas, cx: int, cy: int, rx: int, ry: int, color: ColorLike) -> None:
    """Solid axis-aligned ellipse, one span per scanline."""
    _fill_rows(canvas, cx, cy, ellipse_halves(rx, ry), to_word(color))


def outline_ellipse(canvas: Canvas, cx: int, cy: int, rx: int, ry: int, color: ColorLike) -> None:
    """1-px midpoint ellipse walked over one quadrant, reflected 4 ways.

    Both radii are stepped with a single error term so steep and shallow
    parts stay 8-connected. Flat ellipses get their vertical tips completed
    after the main loop.
    """
    word = to_word(color)
    put = canvas.put_word
    a, b = abs(rx), abs(ry)
    a2, b2 = a * a, b * b

    x, y = -a, 0
    err = x * (2 * b2 + x) + b2
    while x <= 0:
        put(cx - x, cy + y, word)
        put(cx + x, cy + y, word)
        put(cx + x, cy - y, word)
        put(cx - x, cy - y, word)

        e2 = 2 * err
        if e2 >= (2 * x + 1) * b2:
            x += 1
            err += (2 * x + 1) * b2
        if e2 <= (2 * y + 1) * a2:
            y += 1
            err += (2 * y + 1) * a2

    while y < b:
        y += 1
        put(cx, cy + y, word)
        put(cx, cy - y, word)


def thick_outline_ellipse(
    canvas: Canvas,
    cx: int,
    cy: int,
    rx: int,
    ry: int,
    width: int,
    color: ColorLike
) -> None:
    """Elliptic band between radii (rx ± width//2, ry ± width//2).

    width 1 draws outline_ellipse(); width <= 0 draws nothing.
    """
    if width <= 0:
        return
    if width == 1:
        outline_ellipse(canvas, cx, cy, rx, ry, color)
        return

    a, b = abs(rx), abs(ry)
    half = width // 2
    outer = ellipse_halves(a + half, b + half)
    ia, ib = a - half, b - half
    inner = ellipse_halves(ia, ib, strict=True) if ia > 0 and ib > 0 else []
    _fill_band(canvas, cx, cy, outer, inner, to_word(color))
