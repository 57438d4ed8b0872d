"""Shape objects and YAML scene rendering.

Modules:
    - shapes: Rectangle, Circle, Ellipse, Triangle, Segment + draw()
    - render: SceneV1 → Canvas, including turtle programs

Only calls into rasterpen.raster and rasterpen.pen; adds no geometry of
its own.
"""

from .render import render_scene, render_scene_file
from .shapes import Circle, Ellipse, Rectangle, Segment, Triangle, draw

__all__ = [
    'Circle',
    'Ellipse',
    'Rectangle',
    'Segment',
    'Triangle',
    'draw',
    'render_scene',
    'render_scene_file',
]
