"""Wiggly border geometry engine."""

from wigglyborder.engine.assembler import assemble_points, generate
from wigglyborder.engine.config import GeneratorConfig
from wigglyborder.engine.errors import InvalidParameterError
from wigglyborder.engine.shapes import (
    ClosePath,
    CoordinateSpace,
    CurveTo,
    EdgeSpec,
    MoveTo,
    PathResult,
    Point,
    WaveParameters,
)

__all__ = [
    "generate",
    "assemble_points",
    "GeneratorConfig",
    "InvalidParameterError",
    "ClosePath",
    "CoordinateSpace",
    "CurveTo",
    "EdgeSpec",
    "MoveTo",
    "PathResult",
    "Point",
    "WaveParameters",
]
