"""YAML scene schema validation and loading.

Provides pydantic models for scene files (scene.v1):
    - CanvasSpec: size, origin, background color
    - Shape operations: rect, circle, ellipse, triangle, line
    - flood_fill and clear operations
    - turtle operations: a Pen program of steps, with nested repeat blocks

Every loader fails fast with the offending file path in the message.

Colors:
    Any form accepted by rasterpen.utils.color.to_color: a name ("red"),
    "#rrggbb", a packed int, or an [r, g, b] list.

Example (scene.v1):
    schema: scene.v1
    canvas: {width: 256, height: 256, background: [180, 255, 100]}
    ops:
      - {op: rect, x: 80, y: 40, w: 128, h: 192, fill: green}
      - {op: circle, cx: -40, cy: -40, r: 128, fill: blue}
      - op: turtle
        start: {x: 128, y: 250, heading: -90}
        steps:
          - {cmd: repeat, times: 6, steps: [{cmd: forward, value: 40}, {cmd: right, value: 60}]}

Usage:
    from rasterpen.utils import validators
    scene = validators.load_scene("configs/scenes/demo.yaml")
"""

from pathlib import Path
from typing import Annotated, Any, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .color import to_color

ColorValue = Union[str, int, Tuple[int, int, int]]


def _check_color(v: Optional[ColorValue]) -> Optional[ColorValue]:
    if v is None:
        return v
    try:
        to_color(v)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid color {v!r}: {e}") from e
    return v


# ============================================================================
# CANVAS
# ============================================================================

class CanvasSpec(BaseModel):
    """Canvas dimensions and coordinate origin."""
    width: int = Field(..., ge=1, le=16384, description="Width in pixels")
    height: int = Field(..., ge=1, le=16384, description="Height in pixels")
    origin: Union[Literal["top_left", "center"], Tuple[int, int]] = Field(
        "top_left", description="Logical origin: top_left, center or [ox, oy]"
    )
    background: ColorValue = Field("black", description="Clear color")

    @field_validator('background')
    @classmethod
    def validate_background(cls, v: ColorValue) -> ColorValue:
        return _check_color(v)


# ============================================================================
# SHAPE OPERATIONS
# ============================================================================

class _ShapeOp(BaseModel):
    """Fill/outline fields shared by closed shapes."""
    fill: Optional[ColorValue] = Field(None, description="Fill color, None for no fill")
    outline: Optional[ColorValue] = Field(None, description="Outline color, None for no outline")
    thickness: int = Field(1, ge=1, le=512, description="Outline thickness (px)")

    @field_validator('fill', 'outline')
    @classmethod
    def validate_colors(cls, v: Optional[ColorValue]) -> Optional[ColorValue]:
        return _check_color(v)


class RectOp(_ShapeOp):
    op: Literal["rect"]
    x: int
    y: int
    w: int = Field(..., description="Width; negative extends left of x")
    h: int = Field(..., description="Height; negative extends above y")


class CircleOp(_ShapeOp):
    op: Literal["circle"]
    cx: int
    cy: int
    r: int = Field(..., ge=0)


class EllipseOp(_ShapeOp):
    op: Literal["ellipse"]
    cx: int
    cy: int
    rx: int = Field(..., ge=0)
    ry: int = Field(..., ge=0)


class TriangleOp(_ShapeOp):
    op: Literal["triangle"]
    points: List[Tuple[int, int]] = Field(..., description="Three (x, y) vertices")

    @field_validator('points')
    @classmethod
    def validate_points(cls, v: List[Tuple[int, int]]) -> List[Tuple[int, int]]:
        if len(v) != 3:
            raise ValueError(f"Triangle needs exactly 3 points, got {len(v)}")
        return v


class LineOp(BaseModel):
    op: Literal["line"]
    x0: int
    y0: int
    x1: int
    y1: int
    color: ColorValue = "white"
    thickness: int = Field(1, ge=1, le=512)

    @field_validator('color')
    @classmethod
    def validate_color(cls, v: Optional[ColorValue]) -> Optional[ColorValue]:
        return _check_color(v)


class FloodFillOp(BaseModel):
    op: Literal["flood_fill"]
    x: int
    y: int
    color: ColorValue

    @field_validator('color')
    @classmethod
    def validate_color(cls, v: Optional[ColorValue]) -> Optional[ColorValue]:
        return _check_color(v)


class ClearOp(BaseModel):
    op: Literal["clear"]
    color: ColorValue

    @field_validator('color')
    @classmethod
    def validate_color(cls, v: Optional[ColorValue]) -> Optional[ColorValue]:
        return _check_color(v)


# ============================================================================
# TURTLE PROGRAMS
# ============================================================================

TurtleCommand = Literal[
    "forward", "backward", "left", "right", "heading",
    "goto", "move_to", "pen_up", "pen_down", "color", "thickness",
    "fill", "repeat", "push", "pop",
]

_NEEDS_VALUE = {"forward", "backward", "left", "right", "heading", "thickness"}
_NEEDS_XY = {"goto", "move_to"}


class TurtleStep(BaseModel):
    """Single Pen command.

    forward/backward/left/right/heading/thickness need ``value``;
    goto (no drawing) and move_to (draws when down) need ``x`` and ``y``;
    color needs ``color``; repeat needs ``times`` and ``steps``;
    push/pop save and restore the full pen state.
    """
    cmd: TurtleCommand
    value: Optional[float] = None
    x: Optional[float] = None
    y: Optional[float] = None
    color: Optional[ColorValue] = None
    times: Optional[int] = Field(None, ge=0)
    steps: Optional[List["TurtleStep"]] = None

    @field_validator('color')
    @classmethod
    def validate_color(cls, v: Optional[ColorValue]) -> Optional[ColorValue]:
        return _check_color(v)

    @model_validator(mode='after')
    def validate_arguments(self) -> 'TurtleStep':
        if self.cmd in _NEEDS_VALUE and self.value is None:
            raise ValueError(f"Turtle command '{self.cmd}' requires 'value'")
        if self.cmd in _NEEDS_XY and (self.x is None or self.y is None):
            raise ValueError(f"Turtle command '{self.cmd}' requires 'x' and 'y'")
        if self.cmd == "color" and self.color is None:
            raise ValueError("Turtle command 'color' requires 'color'")
        if self.cmd == "repeat" and (self.times is None or self.steps is None):
            raise ValueError("Turtle command 'repeat' requires 'times' and 'steps'")
        return self


class TurtleStart(BaseModel):
    x: float = 0.0
    y: float = 0.0
    heading: float = Field(0.0, description="Degrees; 0 = +x, 90 = +y (down)")
    color: ColorValue = "white"
    thickness: int = Field(1, ge=1, le=512)
    pen_down: bool = True

    @field_validator('color')
    @classmethod
    def validate_color(cls, v: Optional[ColorValue]) -> Optional[ColorValue]:
        return _check_color(v)


class TurtleOp(BaseModel):
    op: Literal["turtle"]
    start: TurtleStart = Field(default_factory=TurtleStart)
    bounded: bool = Field(False, description="Clamp the pen to the canvas")
    steps: List[TurtleStep]


TurtleStep.model_rebuild()

SceneOp = Annotated[
    Union[RectOp, CircleOp, EllipseOp, TriangleOp, LineOp, FloodFillOp, ClearOp, TurtleOp],
    Field(discriminator="op"),
]


# ============================================================================
# SCENE V1
# ============================================================================

class SceneV1(BaseModel):
    """Complete scene description (scene.v1 schema)."""
    model_config = ConfigDict(populate_by_name=True)

    schema_version: str = Field("scene.v1", alias="schema", description="Schema version")
    name: Optional[str] = Field(None, description="Scene name for logs")
    canvas: CanvasSpec
    ops: List[SceneOp] = Field(default_factory=list, description="Drawing operations, in order")

    @field_validator('schema_version')
    @classmethod
    def validate_schema(cls, v: str) -> str:
        if v != "scene.v1":
            raise ValueError(f"Expected schema 'scene.v1', got '{v}'")
        return v

    @field_validator('ops', mode='before')
    @classmethod
    def validate_op_tags(cls, v: Any) -> Any:
        if not isinstance(v, list):
            return v
        known = {"rect", "circle", "ellipse", "triangle", "line", "flood_fill", "clear", "turtle"}
        for i, item in enumerate(v):
            tag = item.get("op") if isinstance(item, dict) else getattr(item, "op", None)
            if tag not in known:
                raise ValueError(f"ops[{i}]: unknown op {tag!r}, expected one of {sorted(known)}")
        return v


# ============================================================================
# PUBLIC API
# ============================================================================

def parse_scene(data: Any, source: str = "<dict>") -> SceneV1:
    """Validate an already-loaded scene mapping.

    Raises
    ------
    ValueError
        If validation fails (message names ``source``)
    """
    if not isinstance(data, dict):
        raise ValueError(f"Scene at {source} must be a mapping, got {type(data).__name__}")
    try:
        return SceneV1(**data)
    except Exception as e:
        raise ValueError(f"Scene validation failed at {source}: {e}") from e


def load_scene(path: Union[str, Path]) -> SceneV1:
    """Load and validate a scene from YAML.

    Parameters
    ----------
    path : Union[str, Path]
        Path to a scene.v1 YAML file

    Returns
    -------
    SceneV1
        Validated scene

    Raises
    ------
    FileNotFoundError
        If path doesn't exist
    ValueError
        If validation fails (with actionable error message)
    """
    from . import fs

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Scene file not found: {path}")

    data = fs.load_yaml(path)
    return parse_scene(data, source=str(path))
