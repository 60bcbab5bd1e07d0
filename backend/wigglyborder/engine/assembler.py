"""Path assembler — four wavy edges joined into one closed curve.

Order is clockwise from the top-left corner (y grows downward):

    top    (left,top)     → (right,top)     normal ( 0, -1)
    right  (right,top)    → (right,bottom)  normal ( 1,  0)
    bottom (right,bottom) → (left,bottom)   normal ( 0,  1)
    left   (left,bottom)  → (left,top)      normal (-1,  0)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from wigglyborder.engine.config import GeneratorConfig
from wigglyborder.engine.errors import InvalidParameterError
from wigglyborder.engine.sampler import sample_edge
from wigglyborder.engine.shapes import (
    ClosePath,
    CoordinateSpace,
    EdgeSpec,
    PathResult,
    Point,
    WaveParameters,
)
from wigglyborder.engine.sizing import coordinate_space, segment_count
from wigglyborder.engine.spline import catmull_rom_to_bezier

logger = logging.getLogger(__name__)

_UP = Point(0.0, -1.0)
_RIGHT = Point(1.0, 0.0)
_DOWN = Point(0.0, 1.0)
_LEFT = Point(-1.0, 0.0)


@dataclass(frozen=True)
class BorderPoints:
    """Intermediate result: point sequence plus the sizing it came from."""

    points: tuple[Point, ...]
    coordinate_space: CoordinateSpace
    horizontal_segments: int
    vertical_segments: int


def border_edges(
    space: CoordinateSpace,
    params: WaveParameters,
    config: GeneratorConfig,
) -> tuple[EdgeSpec, EdgeSpec, EdgeSpec, EdgeSpec]:
    """Top, right, bottom and left edges of the working rectangle."""
    pad = params.padding
    if 2 * pad > space.width or 2 * pad > space.height:
        raise InvalidParameterError(
            f"padding {pad} (amplitude + stroke_inset) does not fit a "
            f"{space.width:g}x{space.height:g} coordinate space"
        )

    left, top = pad, pad
    right, bottom = space.width - pad, space.height - pad

    size = params.segment_size
    h_segments = segment_count(right - left, size, config.min_horizontal_segments, config.max_segments)
    v_segments = segment_count(bottom - top, size, config.min_vertical_segments, config.max_segments)

    tl = Point(left, top)
    tr = Point(right, top)
    br = Point(right, bottom)
    bl = Point(left, bottom)

    return (
        EdgeSpec(tl, tr, h_segments, config.top_seed, _UP),
        EdgeSpec(tr, br, v_segments, config.right_seed, _RIGHT),
        EdgeSpec(br, bl, h_segments, config.bottom_seed, _DOWN),
        EdgeSpec(bl, tl, v_segments, config.left_seed, _LEFT),
    )


def assemble_points(
    params: WaveParameters,
    target_width: float,
    target_height: float,
    config: GeneratorConfig | None = None,
) -> BorderPoints:
    """Sample all four edges and join them without repeating shared corners."""
    config = config or GeneratorConfig()
    space = coordinate_space(target_width, target_height, config.base_unit)
    top, right, bottom, left = border_edges(space, params, config)

    amp = params.amplitude
    top_pts = sample_edge(top, amp)
    right_pts = sample_edge(right, amp)
    bottom_pts = sample_edge(bottom, amp)
    left_pts = sample_edge(left, amp)

    # Each edge starts on the previous edge's last point; the left edge
    # also ends on the top edge's first point, which Z reconnects to.
    points = (*top_pts, *right_pts[1:], *bottom_pts[1:], *left_pts[1:-1])

    return BorderPoints(
        points=points,
        coordinate_space=space,
        horizontal_segments=top.segment_count,
        vertical_segments=right.segment_count,
    )


def generate(
    params: WaveParameters,
    target_width: float,
    target_height: float,
    config: GeneratorConfig | None = None,
) -> PathResult:
    """Generate the closed wiggly border for a ``target_width`` x ``target_height`` box."""
    config = config or GeneratorConfig()
    border = assemble_points(params, target_width, target_height, config)

    commands = catmull_rom_to_bezier(border.points, config.tension)
    commands.append(ClosePath())

    space = border.coordinate_space
    logger.debug(
        "Border generated: %d points, %dx%d segments, space %.2fx%.2f",
        len(border.points),
        border.horizontal_segments,
        border.vertical_segments,
        space.width,
        space.height,
    )
    return PathResult(
        commands=tuple(commands),
        points=border.points,
        coordinate_space=space,
        horizontal_segments=border.horizontal_segments,
        vertical_segments=border.vertical_segments,
    )
