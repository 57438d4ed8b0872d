"""Turtle-graphics Pen and its immutable PenState snapshot.

A Pen borrows a Canvas and keeps a continuous-valued state: position
(float x, y), heading, color, pen-down flag, stroke thickness and optional
clamping bounds. Movement commands translate into line/thick_line calls.

Conventions:
    - Heading is in degrees. 0° points along +x, 90° along +y, which is
      DOWN on the image, so turn_right() is clockwise as seen on screen
    - Stroke endpoints are math.floor() of the float positions; a move
      to or from a non-finite position updates the state but draws nothing
    - Bounds (xmin, xmax, ymin, ymax) clamp every new position, including
      positions restored by set_state()

Branch isolation:
    Recursive drawings snapshot with get_state() and restore with
    set_state(); siblings never inherit each other's drift. saved() wraps
    the pair in a context manager.

Usage:
    from rasterpen import Canvas, Pen

    canvas = Canvas.blank(128, 128)
    pen = Pen(canvas).set_position(45, 32).set_thickness(2)
    pen.repeat(6, lambda p: p.forward(45).turn_right(60))  # hexagon
"""

import logging
import math
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Callable, Iterator, Optional, Tuple

from ..raster.canvas import Canvas
from ..raster.fill import flood_fill
from ..raster.lines import line, thick_line
from ..utils.color import Color, ColorLike, to_color
from ..utils.compute import clamp, floor_point

logger = logging.getLogger(__name__)

Bounds = Tuple[float, float, float, float]


@dataclass(frozen=True, slots=True)
class PenState:
    """Snapshot of every Pen field.

    Parameters
    ----------
    position : Tuple[float, float]
        Logical (x, y)
    heading : float
        Degrees, 0 = +x, 90 = +y
    color : Color
        Stroke and fill color
    is_down : bool
        Whether movement draws
    thickness : int
        Stroke width in pixels (1 = plain line)
    bounds : Tuple[float, float, float, float], optional
        (xmin, xmax, ymin, ymax) clamping box, None for unbounded
    """

    position: Tuple[float, float] = (0.0, 0.0)
    heading: float = 0.0
    color: Color = Color.WHITE
    is_down: bool = True
    thickness: int = 1
    bounds: Optional[Bounds] = None


class Pen:
    """Stateful turtle drawing into a borrowed Canvas.

    Every mutator returns ``self`` so calls chain.

    Parameters
    ----------
    canvas : Canvas
        Drawing target (not owned)
    state : PenState, optional
        Initial state, default PenState()
    """

    def __init__(self, canvas: Canvas, state: Optional[PenState] = None):
        self._canvas = canvas
        self._state = self._bounded(state if state is not None else PenState())

    def __repr__(self) -> str:
        s = self._state
        return (
            f"Pen(position={s.position}, heading={s.heading}, color={s.color!r}, "
            f"is_down={s.is_down}, thickness={s.thickness})"
        )

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def canvas(self) -> Canvas:
        return self._canvas

    @property
    def position(self) -> Tuple[float, float]:
        return self._state.position

    @property
    def heading(self) -> float:
        """Heading in degrees."""
        return self._state.heading

    @property
    def heading_rad(self) -> float:
        return math.radians(self._state.heading)

    @property
    def color(self) -> Color:
        return self._state.color

    @property
    def is_down(self) -> bool:
        return self._state.is_down

    @property
    def thickness(self) -> int:
        return self._state.thickness

    @property
    def bounds(self) -> Optional[Bounds]:
        return self._state.bounds

    # ------------------------------------------------------------------
    # State snapshot / restore
    # ------------------------------------------------------------------

    def get_state(self) -> PenState:
        """Immutable snapshot of the current state."""
        return self._state

    def set_state(self, state: PenState) -> "Pen":
        """Restore a snapshot exactly. Never draws."""
        self._state = self._bounded(state)
        return self

    def reset(self) -> "Pen":
        """Back to PenState() defaults (bounds are cleared too)."""
        self._state = PenState()
        return self

    @contextmanager
    def saved(self) -> Iterator["Pen"]:
        """Restore the current state when the block exits.

        Example
        -------
        >>> with pen.saved():
        ...     pen.turn_left(30).forward(10)
        """
        state = self._state
        try:
            yield self
        finally:
            self._state = state

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------

    def forward(self, distance: float) -> "Pen":
        """Advance along the heading, drawing if the pen is down."""
        rad = math.radians(self._state.heading)
        x, y = self._state.position
        return self._move(x + math.cos(rad) * distance, y + math.sin(rad) * distance)

    def backward(self, distance: float) -> "Pen":
        """Move against the heading, drawing if the pen is down."""
        return self.forward(-distance)

    def move_to(self, x: float, y: float) -> "Pen":
        """Go to an absolute position, drawing if the pen is down."""
        return self._move(x, y)

    def set_position(self, x: float, y: float) -> "Pen":
        """Jump to an absolute position without drawing."""
        self._state = replace(self._state, position=self._clamp(x, y, self._state.bounds))
        return self

    def _move(self, x: float, y: float) -> "Pen":
        target = self._clamp(x, y, self._state.bounds)
        if self._state.is_down:
            self._stroke(self._state.position, target)
        self._state = replace(self._state, position=target)
        return self

    def _stroke(self, start: Tuple[float, float], end: Tuple[float, float]) -> None:
        if not all(math.isfinite(v) for v in (*start, *end)):
            logger.debug(f"Skipping stroke with non-finite endpoint {start} -> {end}")
            return
        x0, y0 = floor_point(*start)
        x1, y1 = floor_point(*end)
        if self._state.thickness > 1:
            thick_line(self._canvas, x0, y0, x1, y1, self._state.thickness, self._state.color)
        else:
            line(self._canvas, x0, y0, x1, y1, self._state.color)

    # ------------------------------------------------------------------
    # Heading
    # ------------------------------------------------------------------

    def turn_left(self, degrees: float) -> "Pen":
        """Counter-clockwise on screen (heading decreases)."""
        self._state = replace(self._state, heading=self._state.heading - degrees)
        return self

    def turn_right(self, degrees: float) -> "Pen":
        """Clockwise on screen (heading increases)."""
        self._state = replace(self._state, heading=self._state.heading + degrees)
        return self

    def set_direction(self, degrees: float) -> "Pen":
        self._state = replace(self._state, heading=float(degrees))
        return self

    def turn_left_rad(self, radians: float) -> "Pen":
        return self.turn_left(math.degrees(radians))

    def turn_right_rad(self, radians: float) -> "Pen":
        return self.turn_right(math.degrees(radians))

    def set_direction_rad(self, radians: float) -> "Pen":
        return self.set_direction(math.degrees(radians))

    # ------------------------------------------------------------------
    # Style and pen state
    # ------------------------------------------------------------------

    def set_color(self, color: ColorLike) -> "Pen":
        self._state = replace(self._state, color=to_color(color))
        return self

    def set_thickness(self, thickness: int) -> "Pen":
        """Stroke width in pixels; values below 1 draw 1-px lines."""
        self._state = replace(self._state, thickness=int(thickness))
        return self

    def pen_up(self) -> "Pen":
        self._state = replace(self._state, is_down=False)
        return self

    def pen_down(self) -> "Pen":
        self._state = replace(self._state, is_down=True)
        return self

    def pen_toggle(self) -> "Pen":
        self._state = replace(self._state, is_down=not self._state.is_down)
        return self

    # ------------------------------------------------------------------
    # Bounds
    # ------------------------------------------------------------------

    def set_bounds(self, xmin: float, xmax: float, ymin: float, ymax: float) -> "Pen":
        """Confine the pen to [xmin, xmax] x [ymin, ymax] (logical units).

        The current position is clamped immediately.
        """
        if xmin > xmax:
            xmin, xmax = xmax, xmin
        if ymin > ymax:
            ymin, ymax = ymax, ymin
        self._state = self._bounded(replace(self._state, bounds=(xmin, xmax, ymin, ymax)))
        return self

    def set_bounds_to_canvas(self) -> "Pen":
        """Confine the pen to the canvas's visible logical area."""
        xmin, xmax, ymin, ymax = self._canvas.logical_bounds()
        return self.set_bounds(xmin, xmax, ymin, ymax)

    def clear_bounds(self) -> "Pen":
        self._state = replace(self._state, bounds=None)
        return self

    @staticmethod
    def _clamp(x: float, y: float, bounds: Optional[Bounds]) -> Tuple[float, float]:
        if bounds is None:
            return float(x), float(y)
        xmin, xmax, ymin, ymax = bounds
        return float(clamp(x, xmin, xmax)), float(clamp(y, ymin, ymax))

    def _bounded(self, state: PenState) -> PenState:
        position = self._clamp(*state.position, state.bounds)
        if position == state.position:
            return state
        return replace(state, position=position)

    # ------------------------------------------------------------------
    # Canvas operations
    # ------------------------------------------------------------------

    def flood_fill(self) -> "Pen":
        """Flood fill at the current position with the current color."""
        x, y = floor_point(*self._state.position)
        flood_fill(self._canvas, x, y, self._state.color)
        return self

    def repeat(self, times: int, block: Callable[["Pen"], object]) -> "Pen":
        """Call ``block(self)`` ``times`` times (no-op for times <= 0)."""
        for _ in range(times):
            block(self)
        return self
