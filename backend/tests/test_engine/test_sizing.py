"""Tests for coordinate-space sizing and segment density."""

import math

import pytest

from tests.conftest import TARGET_SIZES

from wigglyborder.engine.errors import InvalidParameterError
from wigglyborder.engine.sizing import coordinate_space, segment_count


def test_landscape_pins_height():
    space = coordinate_space(400, 300)
    assert space.height == 300.0
    assert space.width == pytest.approx(400.0)


def test_portrait_pins_width():
    space = coordinate_space(250, 400)
    assert space.width == 300.0
    assert space.height == pytest.approx(480.0)


def test_square_uses_base_unit():
    space = coordinate_space(300, 300)
    assert space.width == 300.0
    assert space.height == 300.0


def test_custom_base_unit():
    space = coordinate_space(200, 100, base_unit=50.0)
    assert (space.width, space.height) == (100.0, 50.0)


@pytest.mark.parametrize("width,height", TARGET_SIZES)
def test_aspect_ratio_matches_target(width, height):
    space = coordinate_space(width, height)
    assert space.aspect_ratio == pytest.approx(width / height)
    assert min(space.width, space.height) == 300.0


def test_scale_independent():
    assert coordinate_space(40, 30) == coordinate_space(4000, 3000)


@pytest.mark.parametrize("width,height", [(0, 300), (400, 0), (-1, 300), (400, -5)])
def test_non_positive_dimensions_rejected(width, height):
    with pytest.raises(InvalidParameterError):
        coordinate_space(width, height)


def test_non_finite_dimensions_rejected():
    with pytest.raises(InvalidParameterError):
        coordinate_space(math.inf, 300)
    with pytest.raises(InvalidParameterError):
        coordinate_space(400, math.nan)


def test_segment_count_rounds():
    assert segment_count(384, 25, 6) == 15
    assert segment_count(284, 25, 4) == 11


def test_segment_count_half_rounds_up():
    assert segment_count(250, 20, 4) == 13


def test_segment_count_floor_for_large_segment_size():
    assert segment_count(384, 1000, 6) == 6
    assert segment_count(284, 1000, 4) == 4


def test_segment_count_floor_for_degenerate_length():
    assert segment_count(0.0, 25, 6) == 6
    assert segment_count(1e-12, 25, 4) == 4


@pytest.mark.parametrize("size", [0, -3])
def test_segment_count_rejects_non_positive_size(size):
    with pytest.raises(InvalidParameterError):
        segment_count(100, size, 4)


def test_overflowing_aspect_ratio_rejected():
    with pytest.raises(InvalidParameterError):
        coordinate_space(1e308, 1e-10)
    with pytest.raises(InvalidParameterError):
        coordinate_space(1e-10, 1e308)


def test_segment_count_ceiling():
    assert segment_count(1000, 1, 4, ceiling=1000) == 1000
    with pytest.raises(InvalidParameterError):
        segment_count(1000, 0.99, 4, ceiling=1000)


def test_segment_count_ceiling_with_tiny_segment_size():
    with pytest.raises(InvalidParameterError):
        segment_count(384, 1e-300, 6, ceiling=10_000)
