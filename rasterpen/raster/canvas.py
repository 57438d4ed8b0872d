"""Canvas: bounds-checked access to a packed pixel store.

A Canvas wraps a one-dimensional numpy uint32 store (one 0x00RRGGBB word
per pixel, row-major, top row first) together with its width, height and a
logical origin offset. It is the only object the rasterizers write through.

Ownership:
    - A buffer-protocol object (numpy array, array('I'), memoryview) is
      borrowed without copying: every draw is visible to the caller. If it
      is not C-contiguous, writable, native uint32 data, CanvasError is
      raised rather than drawing into a private copy
    - A plain Python sequence is copied into a store the Canvas owns
    - The store is never resized or rebound after construction

Invariants:
    - store.size == width * height, checked in __init__
    - Logical (x, y) → physical index only via compute.logical_to_index
    - Out-of-range writes are dropped silently; reads return None

Usage:
    import numpy as np
    from rasterpen import Canvas, Color

    buf = np.zeros(64 * 64, dtype=np.uint32)
    canvas = Canvas(buf, 64, 64)
    canvas.set_pixel(3, 4, Color.RED)
    assert buf[4 * 64 + 3] == Color.RED.value
"""

import logging
from typing import Iterator, Optional, Tuple

import numpy as np

from ..utils import compute
from ..utils.color import Color, ColorLike, to_word, unpack_rgb

logger = logging.getLogger(__name__)


class CanvasError(ValueError):
    """Canvas construction failed; no Canvas was produced."""


class CanvasSizeError(CanvasError):
    """Buffer length does not match width * height."""


class Canvas:
    """Drawing surface over a borrowed or owned pixel store.

    Parameters
    ----------
    buffer : array-like
        width * height packed words. Buffer-protocol objects are borrowed
        and must hold C-contiguous native uint32 data; lists are copied.
    width, height : int
        Dimensions in pixels (>= 0)
    origin : str or Tuple[int, int]
        "top_left" (default), "center" or an explicit (ox, oy) offset

    Raises
    ------
    CanvasSizeError
        If the buffer length differs from width * height or a dimension is
        negative
    CanvasError
        If the buffer cannot be drawn in place (wrong dtype, strided,
        read-only) or a sequence holds non-numeric values
    """

    def __init__(self, buffer, width: int, height: int, origin: compute.Origin = "top_left"):
        width = int(width)
        height = int(height)
        if width < 0 or height < 0:
            raise CanvasSizeError(f"Canvas dimensions must be non-negative, got {width}x{height}")

        borrowed = _exports_buffer(buffer)
        if borrowed:
            store = _borrow(np.asarray(buffer))
        else:
            try:
                store = np.array(buffer, dtype=np.uint32).reshape(-1)
            except (TypeError, ValueError, OverflowError) as e:
                raise CanvasError(f"Buffer cannot be used as packed uint32 pixels: {e}") from e

        if store.size != width * height:
            raise CanvasSizeError(
                f"Buffer has {store.size} pixels, expected {width}x{height}={width * height}"
            )

        self._store = store
        self._width = width
        self._height = height
        self._origin = compute.resolve_origin(origin, width, height)
        self._grid = store.reshape(height, width)
        self._borrowed = borrowed

        logger.debug(
            f"Canvas {width}x{height} origin={self._origin} "
            f"({'borrowed' if borrowed else 'owned'} store)"
        )

    @classmethod
    def blank(
        cls,
        width: int,
        height: int,
        color: ColorLike = Color.BLACK,
        origin: compute.Origin = "top_left"
    ) -> "Canvas":
        """Create a Canvas over a fresh store filled with ``color``."""
        if width < 0 or height < 0:
            raise CanvasSizeError(f"Canvas dimensions must be non-negative, got {width}x{height}")
        store = np.full(width * height, to_word(color), dtype=np.uint32)
        return cls(store, width, height, origin=origin)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def origin(self) -> Tuple[int, int]:
        """Physical offset (ox, oy) added to logical coordinates."""
        return self._origin

    @property
    def buffer(self) -> np.ndarray:
        """The flat uint32 store (shared, not a copy)."""
        return self._store

    @property
    def grid(self) -> np.ndarray:
        """(height, width) view of the store, indexed [py, px]."""
        return self._grid

    @property
    def is_borrowed(self) -> bool:
        return self._borrowed

    def __len__(self) -> int:
        return self._store.size

    def __repr__(self) -> str:
        return f"Canvas({self._width}x{self._height}, origin={self._origin})"

    # ------------------------------------------------------------------
    # Coordinate mapping
    # ------------------------------------------------------------------

    def index_of(self, x: int, y: int) -> Optional[int]:
        """Physical store index of logical (x, y), or None if off-canvas."""
        return compute.logical_to_index(x, y, self._width, self._height, self._origin)

    def contains(self, x: int, y: int) -> bool:
        return self.index_of(x, y) is not None

    def to_physical(self, x: int, y: int) -> Tuple[int, int]:
        """Logical → physical (px, py), without bounds checks."""
        return x + self._origin[0], y + self._origin[1]

    def to_logical(self, px: int, py: int) -> Tuple[int, int]:
        """Physical → logical (x, y)."""
        return px - self._origin[0], py - self._origin[1]

    def logical_bounds(self) -> Tuple[int, int, int, int]:
        """Inclusive logical (xmin, xmax, ymin, ymax) of the visible area."""
        ox, oy = self._origin
        return -ox, self._width - 1 - ox, -oy, self._height - 1 - oy

    # ------------------------------------------------------------------
    # Pixel access
    # ------------------------------------------------------------------

    def set_pixel(self, x: int, y: int, color: ColorLike) -> None:
        """Write one pixel; silently ignored when (x, y) is off-canvas."""
        idx = self.index_of(x, y)
        if idx is not None:
            self._store[idx] = to_word(color)

    def put_word(self, x: int, y: int, word: int) -> None:
        """set_pixel for an already-packed word (rasterizer inner loops)."""
        idx = compute.logical_to_index(x, y, self._width, self._height, self._origin)
        if idx is not None:
            self._store[idx] = word

    def get_pixel(self, x: int, y: int) -> Optional[Color]:
        """Read one pixel; None when (x, y) is off-canvas."""
        idx = self.index_of(x, y)
        if idx is None:
            return None
        return Color(int(self._store[idx]))

    def get_word(self, x: int, y: int) -> Optional[int]:
        idx = self.index_of(x, y)
        if idx is None:
            return None
        return int(self._store[idx])

    def clear(self, color: ColorLike) -> None:
        """Overwrite every pixel with ``color``."""
        self._store.fill(to_word(color))

    # ------------------------------------------------------------------
    # Span writers (clipped, inclusive logical ranges)
    # ------------------------------------------------------------------

    def fill_hspan(self, y: int, x0: int, x1: int, word: int) -> None:
        """Fill row y from x0 to x1 inclusive (either order)."""
        py = y + self._origin[1]
        if not 0 <= py < self._height:
            return
        span = compute.clip_span(x0, x1, self._origin[0], self._width)
        if span is not None:
            self._grid[py, span[0]:span[1]] = word

    def fill_vspan(self, x: int, y0: int, y1: int, word: int) -> None:
        """Fill column x from y0 to y1 inclusive (either order)."""
        px = x + self._origin[0]
        if not 0 <= px < self._width:
            return
        span = compute.clip_span(y0, y1, self._origin[1], self._height)
        if span is not None:
            self._grid[span[0]:span[1], px] = word

    def fill_block(self, x0: int, y0: int, x1: int, y1: int, word: int) -> None:
        """Fill the inclusive logical box [x0, x1] x [y0, y1]."""
        cols = compute.clip_span(x0, x1, self._origin[0], self._width)
        rows = compute.clip_span(y0, y1, self._origin[1], self._height)
        if cols is not None and rows is not None:
            self._grid[rows[0]:rows[1], cols[0]:cols[1]] = word

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def pixels(self) -> Iterator[Tuple[int, int, int]]:
        """Yield (px, py, word) for every pixel in physical row-major order."""
        w = self._width
        for i, word in enumerate(self._store.tolist()):
            yield i % w, i // w, word

    def to_rgb(self) -> np.ndarray:
        """(height, width, 3) uint8 copy of the pixels, channels R, G, B."""
        return unpack_rgb(self._grid)

    def copy(self) -> "Canvas":
        """Canvas over an owned copy of this store (same origin)."""
        return Canvas(self._store.copy(), self._width, self._height, origin=self._origin)


def _exports_buffer(buffer) -> bool:
    """True for ndarrays and other buffer-protocol objects (array, memoryview)."""
    if isinstance(buffer, np.ndarray):
        return True
    try:
        memoryview(buffer)
    except TypeError:
        return False
    return True


def _borrow(arr: np.ndarray) -> np.ndarray:
    """Flat uint32 view of ``arr``; raises instead of copying."""
    if arr.dtype != np.dtype(np.uint32):
        raise CanvasError(
            f"Buffer dtype {arr.dtype} cannot be drawn in place; pass native uint32 words"
        )
    if not arr.flags.c_contiguous:
        raise CanvasError("Buffer must be C-contiguous to be drawn in place")
    if not arr.flags.writeable:
        raise CanvasError("Buffer is read-only")
    return arr.reshape(-1)
