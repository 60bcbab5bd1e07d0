"""Catmull-Rom spline → cubic Bezier commands."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from wigglyborder.engine.shapes import CurveTo, MoveTo, PathCommand, Point


def _point(row: np.ndarray) -> Point:
    return Point(float(row[0]), float(row[1]))


def catmull_rom_to_bezier(points: Sequence[Point], tension: float = 0.5) -> list[PathCommand]:
    """Smooth curve through every point: MoveTo, then one CurveTo per pair.

    Neighbours past either end are clamped to the end point itself, which
    keeps the open ends from overshooting. The path is left open.
    """
    if len(points) < 2:
        return []

    pts = np.asarray(points, dtype=np.float64)
    last = len(pts) - 1
    idx = np.arange(last)

    p0 = pts[np.maximum(idx - 1, 0)]
    p1 = pts[idx]
    p2 = pts[idx + 1]
    p3 = pts[np.minimum(idx + 2, last)]

    k = tension / 3
    cp1 = p1 + (p2 - p0) * k
    cp2 = p2 - (p3 - p1) * k

    commands: list[PathCommand] = [MoveTo(Point(*points[0]))]
    for i in range(last):
        commands.append(CurveTo(_point(cp1[i]), _point(cp2[i]), Point(*points[i + 1])))
    return commands
