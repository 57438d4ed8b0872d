"""Test coordinate mapping, span clipping and rectangle normalisation.

Tests for rasterpen.utils.compute:
    - logical_to_index: row-major layout, origin offsets, out-of-range → None
    - resolve_origin: top_left, center, explicit offsets, bad input
    - clip_span: either order, partial and total clipping
    - normalize_rect: negative extents flip around the anchor
    - floor_point: floor (not truncation) for negative positions, saturates inf/NaN

Property tests:
    - logical_to_index agrees with a brute-force enumeration of the canvas
    - logical_to_index is injective over visible pixels

Run:
    pytest tests/test_compute.py -v
"""

import doctest

import pytest

from rasterpen.utils import compute
from rasterpen.utils.compute import (
    clamp,
    clip_span,
    floor_point,
    logical_to_index,
    normalize_rect,
    resolve_origin,
)


def test_doctests():
    result = doctest.testmod(compute)
    assert result.failed == 0


def test_logical_to_index_row_major():
    assert logical_to_index(0, 0, 4, 3) == 0
    assert logical_to_index(3, 0, 4, 3) == 3
    assert logical_to_index(0, 1, 4, 3) == 4
    assert logical_to_index(3, 2, 4, 3) == 11


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (4, 0), (0, 3), (100, 100), (-5, -5)])
def test_logical_to_index_out_of_range(x, y):
    assert logical_to_index(x, y, 4, 3) is None


def test_logical_to_index_with_origin():
    origin = resolve_origin("center", 5, 5)
    assert origin == (2, 2)
    assert logical_to_index(0, 0, 5, 5, origin) == 12
    assert logical_to_index(-2, -2, 5, 5, origin) == 0
    assert logical_to_index(2, 2, 5, 5, origin) == 24
    assert logical_to_index(3, 0, 5, 5, origin) is None
    assert logical_to_index(-3, 0, 5, 5, origin) is None


def test_logical_to_index_matches_enumeration():
    width, height, origin = 7, 5, (3, 1)
    seen = set()
    for y in range(-4, 9):
        for x in range(-6, 12):
            idx = logical_to_index(x, y, width, height, origin)
            px, py = x + origin[0], y + origin[1]
            if 0 <= px < width and 0 <= py < height:
                assert idx == py * width + px
                seen.add(idx)
            else:
                assert idx is None
    assert seen == set(range(width * height))


def test_resolve_origin():
    assert resolve_origin("top_left", 10, 20) == (0, 0)
    assert resolve_origin("center", 10, 21) == (5, 10)
    assert resolve_origin((3, -4), 10, 10) == (3, -4)
    assert resolve_origin([1, 2], 10, 10) == (1, 2)

    with pytest.raises(ValueError, match="Unknown origin"):
        resolve_origin("bottom", 10, 10)
    with pytest.raises(ValueError):
        resolve_origin((1, 2, 3), 10, 10)
    with pytest.raises(ValueError):
        resolve_origin(5, 10, 10)


def test_clip_span():
    assert clip_span(2, 5, 0, 10) == (2, 6)
    assert clip_span(5, 2, 0, 10) == (2, 6)
    assert clip_span(-3, 3, 0, 10) == (0, 4)
    assert clip_span(8, 20, 0, 10) == (8, 10)
    assert clip_span(-3, -1, 0, 10) is None
    assert clip_span(10, 12, 0, 10) is None
    assert clip_span(-2, 0, 2, 10) == (0, 3)
    assert clip_span(4, 4, 0, 10) == (4, 5)


def test_normalize_rect():
    assert normalize_rect(10, 10, 5, 3) == (10, 10, 5, 3)
    assert normalize_rect(10, 10, -5, 3) == (5, 10, 5, 3)
    assert normalize_rect(10, 10, 5, -3) == (10, 7, 5, 3)
    assert normalize_rect(10, 10, -5, -3) == (5, 7, 5, 3)
    assert normalize_rect(0, 0, 0, -2) == (0, -2, 0, 2)


def test_floor_point_and_clamp():
    assert floor_point(1.9, 2.0) == (1, 2)
    assert floor_point(-0.5, -1.0) == (-1, -1)
    assert floor_point(-0.0, 0.999) == (0, 0)
    assert floor_point(float("nan"), float("inf")) == (0, 2 ** 31 - 1)
    assert floor_point(-float("inf"), 1e300) == (-2 ** 31, 2 ** 31 - 1)
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2.5, 0, 3) == 2.5
