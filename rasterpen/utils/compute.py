"""Coordinate mapping, span clipping and geometry normalisation.

Core utilities:
    - resolve_origin(): origin value ("top_left", "center", (ox, oy)) → offset
    - logical_to_index(): logical (x, y) → physical store index or None
    - clip_span(): inclusive logical range → clipped half-open physical range
    - normalize_rect(): negative width/height → equivalent positive rectangle
    - floor_point(): float position → integer pixel, total for inf/NaN

Invariants:
    - Physical pixel (px, py) lives at index py * width + px (row-major)
    - Logical (x, y) maps to physical (x + ox, y + oy); nothing else
    - Every rasterizer reaches the store through these functions, so the
      coordinate semantics are defined exactly once

All functions here are pure: no canvas, no I/O, no logging.
"""

import math
from typing import Optional, Tuple, Union

Origin = Union[str, Tuple[int, int]]


def resolve_origin(origin: Origin, width: int, height: int) -> Tuple[int, int]:
    """Convert an origin value into a physical offset.

    Parameters
    ----------
    origin : str or Tuple[int, int]
        "top_left" (logical (0, 0) is the top-left pixel), "center"
        (logical (0, 0) is pixel (width // 2, height // 2), so negative
        coordinates address the upper/left half), or an explicit (ox, oy)
    width, height : int
        Canvas dimensions in pixels

    Returns
    -------
    Tuple[int, int]
        Offset (ox, oy) added to logical coordinates

    Raises
    ------
    ValueError
        If the origin string is unknown or the tuple is malformed
    """
    if isinstance(origin, str):
        if origin == "top_left":
            return 0, 0
        if origin == "center":
            return width // 2, height // 2
        raise ValueError(f"Unknown origin: {origin}. Use 'top_left', 'center' or (ox, oy).")
    try:
        ox, oy = origin
    except (TypeError, ValueError) as e:
        raise ValueError(f"Origin must be a string or an (ox, oy) pair, got {origin!r}") from e
    return int(ox), int(oy)


def logical_to_index(
    x: int,
    y: int,
    width: int,
    height: int,
    origin: Tuple[int, int] = (0, 0)
) -> Optional[int]:
    """Map a logical coordinate to a physical store index.

    Parameters
    ----------
    x, y : int
        Logical coordinates (may be negative or beyond the canvas)
    width, height : int
        Canvas dimensions in pixels
    origin : Tuple[int, int]
        Offset from resolve_origin(), default (0, 0)

    Returns
    -------
    int or None
        Row-major index into the store, or None when the mapped pixel is
        outside the canvas

    Examples
    --------
    >>> logical_to_index(1, 2, 4, 4)
    9
    >>> logical_to_index(-1, 0, 4, 4) is None
    True
    >>> logical_to_index(-1, -1, 4, 4, origin=(2, 2))
    5
    """
    px = x + origin[0]
    py = y + origin[1]
    if 0 <= px < width and 0 <= py < height:
        return py * width + px
    return None


def clip_span(a: int, b: int, offset: int, limit: int) -> Optional[Tuple[int, int]]:
    """Clip an inclusive logical range to physical bounds.

    Parameters
    ----------
    a, b : int
        Inclusive logical endpoints, either order
    offset : int
        Origin offset along this axis
    limit : int
        Physical extent along this axis (width or height)

    Returns
    -------
    Tuple[int, int] or None
        Half-open physical range [start, stop), or None if nothing is visible
    """
    if a > b:
        a, b = b, a
    start = max(a + offset, 0)
    stop = min(b + offset + 1, limit)
    if start >= stop:
        return None
    return start, stop


def normalize_rect(x: int, y: int, w: int, h: int) -> Tuple[int, int, int, int]:
    """Flip negative extents so the rectangle has w, h >= 0.

    A width of -5 at x=10 covers the same half-open columns [5, 10) as a
    width of 5 at x=5.
    """
    if w < 0:
        x, w = x + w, -w
    if h < 0:
        y, h = y + h, -h
    return x, y, w, h


PIXEL_MIN = -2 ** 31
PIXEL_MAX = 2 ** 31 - 1


def floor_coord(v: float) -> int:
    """floor() saturated to the 32-bit pixel range; NaN maps to 0.

    Examples
    --------
    >>> floor_coord(-0.5)
    -1
    >>> floor_coord(float("inf")) == PIXEL_MAX
    True
    >>> floor_coord(float("nan"))
    0
    """
    if math.isnan(v):
        return 0
    if v >= PIXEL_MAX:
        return PIXEL_MAX
    if v <= PIXEL_MIN:
        return PIXEL_MIN
    return int(math.floor(v))


def floor_point(x: float, y: float) -> Tuple[int, int]:
    """Pixel containing a continuous position (floor on both axes, saturated)."""
    return floor_coord(x), floor_coord(y)


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value into [lo, hi]."""
    return max(lo, min(hi, value))
