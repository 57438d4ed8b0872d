"""Render validated scene.v1 descriptions onto a Canvas.

Pipeline:
    YAML → validators.load_scene() → SceneV1 → render_scene() → Canvas

Operations run in file order on a single canvas created from the scene's
canvas block. Shape ops are converted to rasterpen.scene.shapes objects;
turtle ops drive a Pen through a small interpreter:

    forward/backward/left/right/heading   movement and heading (degrees)
    goto / move_to                        jump / draw to an absolute position
    pen_up / pen_down / color / thickness pen state
    fill                                  flood fill at the pen position
    repeat                                run nested steps ``times`` times
    push / pop                            save / restore the full pen state

Invariants:
    - A pop with an empty stack is ignored (logged at WARNING)
    - Each turtle op starts from its own ``start`` state; pens do not leak
      between ops
"""

import logging
from pathlib import Path
from typing import List, Union

from ..pen.turtle import Pen, PenState
from ..raster.canvas import Canvas
from ..raster.fill import flood_fill
from ..utils import validators
from ..utils.color import to_color
from ..utils.logging_config import log_context
from .shapes import Circle, Ellipse, Rectangle, Segment, Triangle

logger = logging.getLogger(__name__)


def render_scene(scene: validators.SceneV1) -> Canvas:
    """Render a validated scene.

    Parameters
    ----------
    scene : SceneV1
        Output of validators.load_scene() / parse_scene()

    Returns
    -------
    Canvas
        New canvas owning its pixel store
    """
    cfg = scene.canvas
    canvas = Canvas.blank(cfg.width, cfg.height, to_color(cfg.background), origin=cfg.origin)

    name = scene.name or "<unnamed>"
    with log_context(scene=name):
        logger.info(f"Rendering scene {name}: {cfg.width}x{cfg.height}, {len(scene.ops)} ops")
        for i, op in enumerate(scene.ops):
            logger.debug(f"op[{i}] {op.op}")
            apply_op(canvas, op)
    return canvas


def render_scene_file(path: Union[str, Path]) -> Canvas:
    """Load, validate and render a scene YAML file.

    Raises
    ------
    FileNotFoundError
        If path doesn't exist
    ValueError
        If the scene fails validation
    """
    return render_scene(validators.load_scene(path))


def apply_op(canvas: Canvas, op) -> None:
    """Draw one validated scene operation onto canvas."""
    if op.op == "clear":
        canvas.clear(to_color(op.color))
    elif op.op == "rect":
        Rectangle(op.x, op.y, op.w, op.h, **_style(op)).draw_to(canvas)
    elif op.op == "circle":
        Circle(op.cx, op.cy, op.r, **_style(op)).draw_to(canvas)
    elif op.op == "ellipse":
        Ellipse(op.cx, op.cy, op.rx, op.ry, **_style(op)).draw_to(canvas)
    elif op.op == "triangle":
        p0, p1, p2 = (tuple(p) for p in op.points)
        Triangle(p0, p1, p2, **_style(op)).draw_to(canvas)
    elif op.op == "line":
        Segment(op.x0, op.y0, op.x1, op.y1, to_color(op.color), op.thickness).draw_to(canvas)
    elif op.op == "flood_fill":
        count = flood_fill(canvas, op.x, op.y, to_color(op.color))
        logger.debug(f"flood_fill ({op.x}, {op.y}) changed {count} pixels")
    elif op.op == "turtle":
        run_turtle(canvas, op)
    else:
        raise ValueError(f"Unsupported scene op: {op.op}")


def _style(op) -> dict:
    return {
        'fill_color': to_color(op.fill) if op.fill is not None else None,
        'outline_color': to_color(op.outline) if op.outline is not None else None,
        'outline_thickness': op.thickness,
    }


# ============================================================================
# TURTLE PROGRAMS
# ============================================================================

def run_turtle(canvas: Canvas, op: validators.TurtleOp) -> Pen:
    """Execute a turtle op and return the pen in its final state."""
    start = op.start
    pen = Pen(canvas, PenState(
        position=(start.x, start.y),
        heading=start.heading,
        color=to_color(start.color),
        is_down=start.pen_down,
        thickness=start.thickness,
    ))
    if op.bounded:
        pen.set_bounds_to_canvas()

    stack: List[PenState] = []
    run_steps(pen, op.steps, stack)
    if stack:
        logger.debug(f"Turtle program ended with {len(stack)} unpopped state(s)")
    return pen


def run_steps(pen: Pen, steps: List[validators.TurtleStep], stack: List[PenState]) -> None:
    """Interpret turtle steps in order; ``stack`` holds push/pop snapshots."""
    for step in steps:
        cmd = step.cmd
        if cmd == "forward":
            pen.forward(step.value)
        elif cmd == "backward":
            pen.backward(step.value)
        elif cmd == "left":
            pen.turn_left(step.value)
        elif cmd == "right":
            pen.turn_right(step.value)
        elif cmd == "heading":
            pen.set_direction(step.value)
        elif cmd == "goto":
            pen.set_position(step.x, step.y)
        elif cmd == "move_to":
            pen.move_to(step.x, step.y)
        elif cmd == "pen_up":
            pen.pen_up()
        elif cmd == "pen_down":
            pen.pen_down()
        elif cmd == "color":
            pen.set_color(to_color(step.color))
        elif cmd == "thickness":
            pen.set_thickness(int(step.value))
        elif cmd == "fill":
            pen.flood_fill()
        elif cmd == "repeat":
            for _ in range(step.times):
                run_steps(pen, step.steps, stack)
        elif cmd == "push":
            stack.append(pen.get_state())
        elif cmd == "pop":
            if stack:
                pen.set_state(stack.pop())
            else:
                logger.warning("Turtle 'pop' with empty state stack ignored")
        else:
            raise ValueError(f"Unsupported turtle command: {cmd}")
