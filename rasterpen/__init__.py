"""rasterpen: software rasterizer with a turtle-graphics pen.

Draws 2D primitives (lines, rectangles, circles, ellipses, triangles,
thick strokes, flood fill) straight into an in-memory pixel buffer. No GPU,
no window system: the buffer can be written to PPM/PNG or handed to a host
application's own display loop.

Architecture layers (strict one-way dependency):
    scripts/ → rasterpen/scene/ → rasterpen/pen/ → rasterpen/raster/ → rasterpen/utils/

Key invariants:
    - One packed 0x00RRGGBB word per pixel, row-major, top row first
    - Logical → physical mapping lives in utils.compute.logical_to_index only
    - Rasterizers and Pen operations never raise for geometry; off-canvas
      pixels are clipped individually
    - YAML-only scene files, validated with pydantic
"""

from .pen.turtle import Pen, PenState
from .raster.canvas import Canvas, CanvasError, CanvasSizeError
from .utils.color import Color

__version__ = "0.3.0"

__all__ = [
    'Canvas',
    'CanvasError',
    'CanvasSizeError',
    'Color',
    'Pen',
    'PenState',
]
