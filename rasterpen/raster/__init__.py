"""Canvas and stateless primitive rasterizers.

Modules:
    - canvas: Canvas over a borrowed or owned uint32 store
    - lines: Bresenham line, axis spans, thick strokes
    - rects: filled/outlined/thick rectangles
    - conics: circles and ellipses (midpoint family)
    - triangles: filled/outlined/thick triangles
    - fill: scanline flood fill

Invariants:
    - Every write goes through Canvas (set_pixel/put_word or span writers)
    - Colors accepted as Color, packed int, (r, g, b) or a name
    - Nothing here raises for degenerate or off-canvas geometry
"""

from .canvas import Canvas, CanvasError, CanvasSizeError
from .conics import (
    fill_circle,
    fill_ellipse,
    outline_circle,
    outline_ellipse,
    thick_outline_circle,
    thick_outline_ellipse,
)
from .fill import flood_fill
from .lines import hline, line, thick_hline, thick_line, thick_vline, vline
from .rects import fill_rect, outline_rect, thick_outline_rect
from .triangles import fill_triangle, outline_triangle, thick_outline_triangle

__all__ = [
    'Canvas',
    'CanvasError',
    'CanvasSizeError',
    'fill_circle',
    'fill_ellipse',
    'fill_rect',
    'fill_triangle',
    'flood_fill',
    'hline',
    'line',
    'outline_circle',
    'outline_ellipse',
    'outline_rect',
    'outline_triangle',
    'thick_hline',
    'thick_line',
    'thick_outline_circle',
    'thick_outline_ellipse',
    'thick_outline_rect',
    'thick_outline_triangle',
    'thick_vline',
    'vline',
]
