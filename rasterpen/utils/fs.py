"""File output for rendered canvases and scene files.

Every writer stages its output in a sibling tmp file and renames it into
place, so a reader never observes a half-written PPM, PNG or YAML file and a
failed write leaves the previous file untouched.

Provides:
    - ensure_dir(): mkdir -p
    - atomic_write_bytes() / atomic_write_text(): encoded PPM streams, notes
    - atomic_save_image(): (H, W, 3) RGB arrays through Pillow
    - atomic_yaml_dump() / load_yaml(): scene files

Usage:
    from rasterpen.utils import fs
    fs.atomic_save_image(canvas.to_rgb(), out_dir / "scene.png")
    scene_dict = fs.load_yaml("configs/scenes/demo.yaml")
"""

import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Union

import numpy as np
import yaml
from PIL import Image

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def ensure_dir(p: PathLike) -> Path:
    """Create ``p`` (and parents) if missing; return it as a Path."""
    p = Path(p)
    p.mkdir(parents=True, exist_ok=True)
    return p


@contextmanager
def _staged(path: Path) -> Iterator[Path]:
    """Yield a tmp path next to ``path``; rename it over ``path`` on success.

    The tmp name keeps the real extension last so Pillow can infer the
    format from it. Any OSError/ValueError raised inside the block, or by
    the rename, removes the tmp file and surfaces as RuntimeError.
    """
    ensure_dir(path.parent)
    tmp_path = path.with_name(f".{path.stem}.tmp{path.suffix}")
    try:
        yield tmp_path
        tmp_path.replace(path)
    except (OSError, ValueError) as e:
        if tmp_path.exists():
            tmp_path.unlink()
        raise RuntimeError(f"Failed to write {path}: {e}") from e


def atomic_write_bytes(path: PathLike, data: bytes) -> None:
    """Write ``data`` to ``path`` atomically (tmp, fsync, rename).

    Raises
    ------
    RuntimeError
        If the write or the rename fails
    """
    path = Path(path)
    with _staged(path) as tmp_path:
        with open(tmp_path, 'wb') as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
    logger.debug(f"Wrote {len(data)} bytes to {path}")


def atomic_write_text(path: PathLike, text: str, encoding: str = "utf-8") -> None:
    atomic_write_bytes(path, text.encode(encoding))


def atomic_save_image(
    img: np.ndarray,
    path: PathLike,
    pil_kwargs: Optional[Dict[str, Any]] = None
) -> None:
    """Save an RGB image array atomically through Pillow.

    Parameters
    ----------
    img : np.ndarray
        (H, W, 3) RGB or (H, W) grayscale; non-uint8 data is clipped to
        [0, 255] first
    path : PathLike
        Target file; the extension selects the format (.png, .bmp, ...)
    pil_kwargs : dict, optional
        Passed to ``PIL.Image.Image.save`` (e.g. ``optimize=True``)

    Raises
    ------
    RuntimeError
        If Pillow cannot encode the array or the file cannot be written
    """
    path = Path(path)
    img = np.asarray(img)
    if img.dtype != np.uint8:
        img = np.clip(img, 0, 255).astype(np.uint8)
    if img.ndim == 3 and img.shape[2] == 1:
        img = img[..., 0]

    with _staged(path) as tmp_path:
        Image.fromarray(img).save(tmp_path, **(pil_kwargs or {}))
    logger.debug(f"Saved {img.shape[1]}x{img.shape[0]} image to {path}")


def atomic_yaml_dump(obj: Any, path: PathLike) -> None:
    """Dump ``obj`` as block-style YAML, keeping key order."""
    text = yaml.safe_dump(obj, default_flow_style=False, sort_keys=False, allow_unicode=True)
    atomic_write_text(path, text)


def load_yaml(path: PathLike) -> Any:
    """Parse a YAML file with ``yaml.safe_load``.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist
    ValueError
        If the file is not valid YAML (message names the file)
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML file {path}: {e}") from e
