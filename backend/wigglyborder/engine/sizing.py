"""Coordinate-space sizing and segment density."""

from __future__ import annotations

import math

from wigglyborder.engine.errors import InvalidParameterError
from wigglyborder.engine.shapes import CoordinateSpace, require_finite


def coordinate_space(target_width: float, target_height: float, base_unit: float = 300.0) -> CoordinateSpace:
    """Coordinate space with the target's aspect ratio and its short axis at ``base_unit``.

    Wave density and amplitude are measured in these units, so the border
    looks the same at any display size.
    """
    require_finite("target_width", target_width)
    require_finite("target_height", target_height)
    require_finite("base_unit", base_unit)
    if target_width <= 0 or target_height <= 0:
        raise InvalidParameterError(
            f"target dimensions must be positive, got {target_width}x{target_height}"
        )
    if base_unit <= 0:
        raise InvalidParameterError(f"base_unit must be positive, got {base_unit}")

    if target_width >= target_height:
        space = CoordinateSpace(width=base_unit * target_width / target_height, height=base_unit)
    else:
        space = CoordinateSpace(width=base_unit, height=base_unit * target_height / target_width)

    # Extreme aspect ratios overflow even when both targets are finite.
    require_finite("coordinate-space width", space.width)
    require_finite("coordinate-space height", space.height)
    return space


def segment_count(length: float, segment_size: float, floor: int, ceiling: int | None = None) -> int:
    """Number of wave segments along an edge, never below ``floor``.

    Raises ``InvalidParameterError`` when the edge would need more than
    ``ceiling`` segments.
    """
    require_finite("segment_size", segment_size)
    if segment_size <= 0:
        raise InvalidParameterError(f"segment_size must be > 0, got {segment_size}")
    ratio = length / segment_size
    if ceiling is not None and not (ratio + 0.5 < ceiling + 1):
        raise InvalidParameterError(
            f"segment_size {segment_size} needs more than {ceiling} segments on a {length:g} edge"
        )
    # Halves round up.
    return max(floor, int(math.floor(ratio + 0.5)))
