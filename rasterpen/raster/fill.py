"""Scanline flood fill.

Replaces the 4-connected region of pixels equal to the seed's original
color with a new color.

Invariants:
    - Worklist is an explicit stack; no recursion, so region size is bounded
      only by the canvas
    - Each pixel is written at most once: a run is filled as soon as it is
      popped, after which it no longer matches the seed color
    - Seed off-canvas or seed already equal to the target: no-op, returns 0

Algorithm:
    Pop a seed, grow it left and right into a maximal run of seed-colored
    pixels, fill the run, then push one seed per seed-colored run found
    directly above and below it. Work is done on the physical grid so the
    canvas origin only matters for locating the initial seed.
"""

import logging

import numpy as np

from ..utils.color import ColorLike, to_word
from .canvas import Canvas

logger = logging.getLogger(__name__)


def _run_starts(mask: np.ndarray) -> np.ndarray:
    """Indices where a run of True values begins."""
    prev = np.concatenate(([False], mask[:-1]))
    return np.flatnonzero(mask & ~prev)


def flood_fill(canvas: Canvas, x: int, y: int, color: ColorLike) -> int:
    """Fill the region connected to logical (x, y).

    Parameters
    ----------
    canvas : Canvas
        Target canvas
    x, y : int
        Logical seed coordinate
    color : ColorLike
        Replacement color

    Returns
    -------
    int
        Number of pixels changed (0 when nothing was filled)
    """
    idx = canvas.index_of(x, y)
    if idx is None:
        return 0

    word = to_word(color)
    width, height = canvas.width, canvas.height
    grid = canvas.grid
    px, py = idx % width, idx // width
    seed = int(grid[py, px])
    if seed == word:
        return 0

    filled = 0
    stack = [(px, py)]
    while stack:
        sx, sy = stack.pop()
        row = grid[sy]
        if row[sx] != seed:
            continue

        left = sx
        while left > 0 and row[left - 1] == seed:
            left -= 1
        right = sx
        while right < width - 1 and row[right + 1] == seed:
            right += 1

        row[left:right + 1] = word
        filled += right - left + 1

        for ny in (sy - 1, sy + 1):
            if 0 <= ny < height:
                mask = grid[ny, left:right + 1] == seed
                for start in _run_starts(mask):
                    stack.append((left + int(start), ny))

    logger.debug(f"flood_fill at ({x}, {y}): {filled} pixels")
    return filled
