"""Test atomic filesystem operations.

Tests for rasterpen.utils.fs:
    - atomic_write_bytes / atomic_write_text leave no tmp files
    - atomic_save_image writes a PNG Pillow can read back pixel-exactly
    - YAML roundtrip preserves structure and key order
    - load_yaml raises FileNotFoundError for missing files, ValueError for bad YAML
    - A failed image save keeps the previous file and leaves no tmp file
    - ensure_dir creates parents

Run:
    pytest tests/test_fs.py -v
"""

import numpy as np
import pytest
from PIL import Image

from rasterpen import Canvas, Color
from rasterpen.raster.conics import fill_circle
from rasterpen.utils import fs


def test_ensure_dir(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    result = fs.ensure_dir(target)
    assert result == target
    assert target.is_dir()
    # Idempotent
    fs.ensure_dir(target)


def test_atomic_write_bytes(tmp_path):
    path = tmp_path / "sub" / "data.bin"
    fs.atomic_write_bytes(path, b"abc")
    fs.atomic_write_bytes(path, b"defg")

    assert path.read_bytes() == b"defg"
    assert [p.name for p in path.parent.iterdir()] == ["data.bin"]


def test_atomic_write_text(tmp_path):
    path = tmp_path / "note.txt"
    fs.atomic_write_text(path, "héllo")
    assert path.read_text(encoding="utf-8") == "héllo"


def test_atomic_save_image_png(tmp_path):
    canvas = Canvas.blank(40, 30, Color.SKY_BLUE)
    fill_circle(canvas, 20, 15, 8, Color.RED)
    path = tmp_path / "img" / "canvas.png"

    fs.atomic_save_image(canvas.to_rgb(), path)

    assert path.exists()
    assert not list(path.parent.glob("*.tmp*"))
    with Image.open(path) as img:
        assert img.size == (40, 30)
        np.testing.assert_array_equal(np.asarray(img.convert("RGB")), canvas.to_rgb())


def test_yaml_roundtrip(tmp_path):
    obj = {'schema': 'scene.v1', 'canvas': {'width': 8, 'height': 4}, 'ops': [{'op': 'clear', 'color': 'red'}]}
    path = tmp_path / "scene.yaml"
    fs.atomic_yaml_dump(obj, path)

    loaded = fs.load_yaml(path)
    assert loaded == obj
    assert list(loaded.keys()) == ['schema', 'canvas', 'ops']


def test_load_yaml_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        fs.load_yaml(tmp_path / "missing.yaml")


def test_load_yaml_malformed(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("ops: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError, match="broken.yaml"):
        fs.load_yaml(path)


def test_failed_save_keeps_previous_file(tmp_path):
    path = tmp_path / "out.xyz"
    path.write_bytes(b"previous")

    # Pillow has no encoder for .xyz
    with pytest.raises(RuntimeError, match="out.xyz"):
        fs.atomic_save_image(np.zeros((4, 4, 3), dtype=np.uint8), path)

    assert path.read_bytes() == b"previous"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["out.xyz"]
