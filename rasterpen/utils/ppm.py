"""Binary PPM (P6) encoding of packed pixel buffers.

Format:
    Header  "P6\\n<width> <height>\\n255\\n" (ASCII)
    Body    width * height RGB byte triples, row-major, top row first,
            no row padding

Channels are taken from the 0x00RRGGBB word layout defined in
rasterpen.utils.color; the unused top byte is dropped.

Usage:
    from rasterpen.utils import ppm
    ppm.write_ppm(canvas, "out/scene.ppm")
    with open("scene.ppm", "wb") as f:
        ppm.encode_canvas(canvas, f)
"""

import logging
from pathlib import Path
from typing import BinaryIO, Union

import numpy as np

from . import fs
from .color import unpack_rgb

logger = logging.getLogger(__name__)


class EncodingError(RuntimeError):
    """Writing an encoded image failed (wraps the underlying OSError)."""


def ppm_header(width: int, height: int) -> bytes:
    return f"P6\n{width} {height}\n255\n".encode("ascii")


def encode_buffer(buffer: np.ndarray, width: int, height: int) -> bytes:
    """Encode a packed word buffer as a complete P6 file.

    Parameters
    ----------
    buffer : np.ndarray
        Packed words, width * height elements in row-major order
    width, height : int
        Image dimensions in pixels

    Returns
    -------
    bytes
        Header followed by 3 * width * height body bytes

    Raises
    ------
    ValueError
        If the buffer length does not match width * height
    """
    words = np.asarray(buffer, dtype=np.uint32).reshape(-1)
    if words.size != width * height:
        raise ValueError(
            f"Buffer has {words.size} pixels, expected {width}x{height}={width * height}"
        )
    return ppm_header(width, height) + unpack_rgb(words).tobytes()


def encode_canvas(canvas, stream: BinaryIO) -> int:
    """Write a canvas to a binary stream.

    Parameters
    ----------
    canvas : Canvas
        Anything exposing ``width``, ``height`` and ``buffer``
    stream : BinaryIO
        Writable binary file-like object

    Returns
    -------
    int
        Number of bytes written

    Raises
    ------
    EncodingError
        If the stream write fails
    """
    data = encode_buffer(canvas.buffer, canvas.width, canvas.height)
    try:
        stream.write(data)
    except OSError as e:
        raise EncodingError(f"Failed to write PPM stream: {e}") from e
    return len(data)


def write_ppm(canvas, path: Union[str, Path]) -> Path:
    """Encode a canvas and write it atomically to ``path``.

    Raises
    ------
    EncodingError
        If the file cannot be written
    """
    path = Path(path)
    data = encode_buffer(canvas.buffer, canvas.width, canvas.height)
    try:
        fs.atomic_write_bytes(path, data)
    except (RuntimeError, OSError) as e:
        raise EncodingError(f"Failed to write PPM {path}: {e}") from e
    logger.info(f"Wrote {canvas.width}x{canvas.height} PPM: {path} ({len(data)} bytes)")
    return path


def decode_ppm(data: bytes) -> np.ndarray:
    """Parse a P6 file produced by encode_buffer back into an (H, W, 3) array.

    Only the exact header layout written by this module is accepted.

    Raises
    ------
    ValueError
        On a malformed header or truncated body
    """
    parts = data.split(b"\n", 3)
    if len(parts) != 4 or parts[0] != b"P6" or parts[2] != b"255":
        raise ValueError("Not a P6 file with maxval 255")
    try:
        width, height = (int(v) for v in parts[1].split())
    except ValueError as e:
        raise ValueError(f"Bad PPM size line: {parts[1]!r}") from e
    body = parts[3]
    if len(body) != width * height * 3:
        raise ValueError(f"PPM body has {len(body)} bytes, expected {width * height * 3}")
    return np.frombuffer(body, dtype=np.uint8).reshape(height, width, 3)
