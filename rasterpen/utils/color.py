"""Packed RGB colors and conversions.

Provides:
    - Color: immutable packed 0x00RRGGBB value with (r, g, b) conversion
    - Named constants (Color.RED, Color.SKY_BLUE, ...) and name lookup
    - to_word(): coerce any accepted color form to a packed int
    - unpack_rgb(): vectorised word buffer → (..., 3) uint8 array

Pixel format:
    One 32-bit word per pixel, laid out as 0x00RRGGBB:
        bits 16-23 red, bits 8-15 green, bits 0-7 blue, bits 24-31 unused.
    The PPM encoder writes channels in exactly this order (R, G, B), so
    every rasterizer and the encoder share one definition of the layout.

Accepted color inputs (ColorLike):
    - Color instance
    - int: packed word in [0, 2**32)
    - (r, g, b) tuple/list of ints in [0, 255]
    - str: case-insensitive constant name ("red", "sky_blue") or "#rrggbb"
"""

from typing import Dict, Sequence, Tuple, Union

import numpy as np

MAX_WORD = 0xFFFFFFFF


class Color:
    """Packed RGB color.

    Equality and hashing use the packed word, so ``Color.rgb(255, 0, 0)``
    equals ``Color(0xFF0000)``.
    """

    __slots__ = ("_value",)

    # Populated after the class body (see _NAMED below)
    BLACK: "Color"
    GRAY: "Color"
    WHITE: "Color"
    LIGHT_GRAY: "Color"
    RED: "Color"
    DARK_RED: "Color"
    GREEN: "Color"
    DARK_GREEN: "Color"
    BLUE: "Color"
    DARK_BLUE: "Color"
    CYAN: "Color"
    TEAL: "Color"
    MAGENTA: "Color"
    PURPLE: "Color"
    YELLOW: "Color"
    OLIVE: "Color"
    BROWN: "Color"
    GOLD: "Color"
    INDIGO: "Color"
    SKY_BLUE: "Color"

    def __init__(self, value: int):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise TypeError(f"Packed color must be an int, got {type(value).__name__}")
        value = int(value)
        if value < 0 or value > MAX_WORD:
            raise ValueError(f"Packed color out of 32-bit range: {value:#x}")
        self._value = value

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "Color":
        """Build a color from three byte channels.

        Raises
        ------
        ValueError
            If any channel is outside [0, 255]
        """
        for name, ch in (("r", r), ("g", g), ("b", b)):
            if not 0 <= int(ch) <= 255:
                raise ValueError(f"Channel {name}={ch} outside [0, 255]")
        return cls((int(r) << 16) | (int(g) << 8) | int(b))

    @classmethod
    def gray(cls, level: int) -> "Color":
        return cls.rgb(level, level, level)

    @classmethod
    def from_name(cls, name: str) -> "Color":
        """Look up a named constant or parse a ``#rrggbb`` hex string."""
        key = name.strip()
        if key.startswith("#"):
            if len(key) != 7:
                raise ValueError(f"Hex color must be #rrggbb, got {name!r}")
            try:
                return cls(int(key[1:], 16))
            except ValueError as e:
                raise ValueError(f"Invalid hex color {name!r}") from e
        try:
            return _NAMED[key.upper()]
        except KeyError:
            raise ValueError(f"Unknown color name {name!r}") from None

    @property
    def value(self) -> int:
        return self._value

    @property
    def r(self) -> int:
        return (self._value >> 16) & 0xFF

    @property
    def g(self) -> int:
        return (self._value >> 8) & 0xFF

    @property
    def b(self) -> int:
        return self._value & 0xFF

    def to_rgb(self) -> Tuple[int, int, int]:
        return self.r, self.g, self.b

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other) -> bool:
        if isinstance(other, Color):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Color(0x{self._value:06X})"


ColorLike = Union[Color, int, Sequence[int], str]

_NAMED: Dict[str, Color] = {
    "BLACK": Color.rgb(0, 0, 0),
    "GRAY": Color.rgb(128, 128, 128),
    "WHITE": Color.rgb(255, 255, 255),
    "LIGHT_GRAY": Color.rgb(192, 192, 192),
    "RED": Color.rgb(255, 0, 0),
    "DARK_RED": Color.rgb(128, 0, 0),
    "GREEN": Color.rgb(0, 255, 0),
    "DARK_GREEN": Color.rgb(0, 128, 0),
    "BLUE": Color.rgb(0, 0, 255),
    "DARK_BLUE": Color.rgb(0, 0, 128),
    "CYAN": Color.rgb(0, 255, 255),
    "TEAL": Color.rgb(0, 128, 128),
    "MAGENTA": Color.rgb(255, 0, 255),
    "PURPLE": Color.rgb(128, 0, 128),
    "YELLOW": Color.rgb(255, 255, 0),
    "OLIVE": Color.rgb(128, 128, 0),
    "BROWN": Color.rgb(165, 42, 42),
    "GOLD": Color.rgb(255, 215, 0),
    "INDIGO": Color.rgb(75, 0, 130),
    "SKY_BLUE": Color.rgb(135, 205, 250),
}

for _name, _color in _NAMED.items():
    setattr(Color, _name, _color)


def named_colors() -> Dict[str, Color]:
    """Return a copy of the named color table (upper-case keys)."""
    return dict(_NAMED)


def to_color(color: ColorLike) -> Color:
    """Coerce any accepted color form to a Color.

    Parameters
    ----------
    color : ColorLike
        Color, packed int, (r, g, b) sequence or name

    Returns
    -------
    Color

    Raises
    ------
    TypeError
        If the input type is not a recognised color form
    ValueError
        If the value is out of range or the name is unknown
    """
    if isinstance(color, Color):
        return color
    if isinstance(color, str):
        return Color.from_name(color)
    if isinstance(color, (int, np.integer)) and not isinstance(color, bool):
        return Color(int(color))
    if isinstance(color, (tuple, list, np.ndarray)):
        if len(color) != 3:
            raise ValueError(f"RGB color needs 3 channels, got {len(color)}")
        return Color.rgb(*(int(c) for c in color))
    raise TypeError(f"Unsupported color type: {type(color).__name__}")


def to_word(color: ColorLike) -> int:
    """Coerce a color to its packed word (fast path for Color and int)."""
    if isinstance(color, Color):
        return color.value
    return to_color(color).value


def unpack_rgb(words: np.ndarray) -> np.ndarray:
    """Split packed words into an RGB byte array.

    Parameters
    ----------
    words : np.ndarray
        Packed 0x00RRGGBB words, any shape, integer dtype

    Returns
    -------
    np.ndarray
        uint8 array of shape ``words.shape + (3,)`` with channels (R, G, B)
    """
    words = np.asarray(words, dtype=np.uint32)
    out = np.empty(words.shape + (3,), dtype=np.uint8)
    out[..., 0] = (words >> 16) & 0xFF
    out[..., 1] = (words >> 8) & 0xFF
    out[..., 2] = words & 0xFF
    return out


def pack_rgb(rgb: np.ndarray) -> np.ndarray:
    """Inverse of unpack_rgb: (..., 3) uint8 → packed uint32 words."""
    rgb = np.asarray(rgb)
    if rgb.shape[-1] != 3:
        raise ValueError(f"Expected trailing dimension 3, got shape {rgb.shape}")
    rgb = rgb.astype(np.uint32)
    return (rgb[..., 0] << 16) | (rgb[..., 1] << 8) | rgb[..., 2]
