"""Immutable value types flowing through the border pipeline.

Point / EdgeSpec / WaveParameters → inputs
MoveTo / CurveTo / ClosePath       → emitted path commands
PathResult                         → final output of generate()
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple, Union

from wigglyborder.engine.errors import InvalidParameterError

# Tolerance for the unit-length and perpendicularity checks on edge normals.
_NORMAL_TOL = 1e-9


class Point(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class CoordinateSpace:
    """Working plane all geometry is computed in (maps to the SVG viewBox)."""

    width: float
    height: float

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height


def require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidParameterError(f"{name} must be a finite number, got {value!r}")


@dataclass(frozen=True)
class WaveParameters:
    """Wave shape inputs, in coordinate-space units."""

    amplitude: float = 4.0
    segment_size: float = 25.0
    stroke_inset: float = 4.0

    def __post_init__(self) -> None:
        for name in ("amplitude", "segment_size", "stroke_inset"):
            require_finite(name, getattr(self, name))
        if self.amplitude < 0:
            raise InvalidParameterError(f"amplitude must be >= 0, got {self.amplitude}")
        if self.segment_size <= 0:
            raise InvalidParameterError(f"segment_size must be > 0, got {self.segment_size}")
        if self.stroke_inset < 0:
            raise InvalidParameterError(f"stroke_inset must be >= 0, got {self.stroke_inset}")

    @property
    def padding(self) -> float:
        """Inset keeping waves and stroke inside the coordinate space."""
        return self.amplitude + self.stroke_inset


@dataclass(frozen=True)
class EdgeSpec:
    """One side of the working rectangle."""

    start: Point
    end: Point
    segment_count: int
    seed: float
    # Unit vector perpendicular to end - start, pointing out of the rectangle
    outward_normal: Point

    def __post_init__(self) -> None:
        if self.segment_count < 1:
            raise InvalidParameterError(f"segment_count must be >= 1, got {self.segment_count}")
        nx, ny = self.outward_normal
        if abs(math.hypot(nx, ny) - 1.0) > _NORMAL_TOL:
            raise InvalidParameterError(f"outward_normal must be a unit vector, got {self.outward_normal}")
        dx = self.end.x - self.start.x
        dy = self.end.y - self.start.y
        length = math.hypot(dx, dy)
        if length > 0 and abs(dx * nx + dy * ny) / length > _NORMAL_TOL:
            raise InvalidParameterError("outward_normal must be perpendicular to the edge")


@dataclass(frozen=True)
class MoveTo:
    point: Point


@dataclass(frozen=True)
class CurveTo:
    """Cubic Bezier from the current point to ``end``."""

    control1: Point
    control2: Point
    end: Point


@dataclass(frozen=True)
class ClosePath:
    pass


PathCommand = Union[MoveTo, CurveTo, ClosePath]


@dataclass(frozen=True)
class PathResult:
    commands: tuple[PathCommand, ...]
    # Concatenated edge points the curve passes through, before conversion
    points: tuple[Point, ...]
    coordinate_space: CoordinateSpace
    horizontal_segments: int = 0
    vertical_segments: int = 0
