"""Drawable shape objects over the primitive rasterizers.

Each shape is a frozen dataclass with optional ``fill_color`` and
``outline_color`` plus an ``outline_thickness``. draw_to() fills first, then
strokes the outline on top; a shape with neither color draws nothing.

Usage:
    from rasterpen import Canvas, Color
    from rasterpen.scene.shapes import Circle, Rectangle, draw

    canvas = Canvas.blank(256, 256)
    draw(
        canvas,
        Rectangle(80, 40, 128, 192, fill_color=Color.GREEN),
        Circle(0, 0, 128, outline_color=Color.RED, outline_thickness=3),
    )
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..raster import conics, lines, rects, triangles
from ..raster.canvas import Canvas
from ..utils.color import ColorLike

Point = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Half-open [x, x + w) x [y, y + h); negative extents are flipped."""

    x: int
    y: int
    w: int
    h: int
    fill_color: Optional[ColorLike] = None
    outline_color: Optional[ColorLike] = None
    outline_thickness: int = 1

    @classmethod
    def from_points(
        cls,
        x0: int,
        y0: int,
        x1: int,
        y1: int,
        fill_color: Optional[ColorLike] = None,
        outline_color: Optional[ColorLike] = None,
        outline_thickness: int = 1
    ) -> "Rectangle":
        """Smallest rectangle containing both corner pixels (inclusive)."""
        x, y = min(x0, x1), min(y0, y1)
        return cls(
            x, y, abs(x1 - x0) + 1, abs(y1 - y0) + 1,
            fill_color=fill_color,
            outline_color=outline_color,
            outline_thickness=outline_thickness,
        )

    def draw_to(self, canvas: Canvas) -> None:
        if self.fill_color is not None:
            rects.fill_rect(canvas, self.x, self.y, self.w, self.h, self.fill_color)
        if self.outline_color is not None:
            rects.thick_outline_rect(
                canvas, self.x, self.y, self.w, self.h, self.outline_thickness, self.outline_color
            )


@dataclass(frozen=True, slots=True)
class Circle:
    cx: int
    cy: int
    r: int
    fill_color: Optional[ColorLike] = None
    outline_color: Optional[ColorLike] = None
    outline_thickness: int = 1

    def draw_to(self, canvas: Canvas) -> None:
        if self.fill_color is not None:
            conics.fill_circle(canvas, self.cx, self.cy, self.r, self.fill_color)
        if self.outline_color is not None:
            conics.thick_outline_circle(
                canvas, self.cx, self.cy, self.r, self.outline_thickness, self.outline_color
            )


@dataclass(frozen=True, slots=True)
class Ellipse:
    cx: int
    cy: int
    rx: int
    ry: int
    fill_color: Optional[ColorLike] = None
    outline_color: Optional[ColorLike] = None
    outline_thickness: int = 1

    def draw_to(self, canvas: Canvas) -> None:
        if self.fill_color is not None:
            conics.fill_ellipse(canvas, self.cx, self.cy, self.rx, self.ry, self.fill_color)
        if self.outline_color is not None:
            conics.thick_outline_ellipse(
                canvas, self.cx, self.cy, self.rx, self.ry,
                self.outline_thickness, self.outline_color,
            )


@dataclass(frozen=True, slots=True)
class Triangle:
    p0: Point
    p1: Point
    p2: Point
    fill_color: Optional[ColorLike] = None
    outline_color: Optional[ColorLike] = None
    outline_thickness: int = 1

    def draw_to(self, canvas: Canvas) -> None:
        (x0, y0), (x1, y1), (x2, y2) = self.p0, self.p1, self.p2
        if self.fill_color is not None:
            triangles.fill_triangle(canvas, x0, y0, x1, y1, x2, y2, self.fill_color)
        if self.outline_color is not None:
            triangles.thick_outline_triangle(
                canvas, x0, y0, x1, y1, x2, y2, self.outline_thickness, self.outline_color
            )


@dataclass(frozen=True, slots=True)
class Segment:
    """Line segment; thickness > 1 uses the round disc brush."""

    x0: int
    y0: int
    x1: int
    y1: int
    color: ColorLike = 0xFFFFFF
    thickness: int = 1

    def draw_to(self, canvas: Canvas) -> None:
        lines.thick_line(canvas, self.x0, self.y0, self.x1, self.y1, self.thickness, self.color)


def draw(canvas: Canvas, *shapes) -> Canvas:
    """Draw shapes in order (later shapes paint over earlier ones)."""
    for shape in shapes:
        shape.draw_to(canvas)
    return canvas
