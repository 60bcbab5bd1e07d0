"""Edge point sampling — evenly spaced points pushed in and out along the edge normal."""

from __future__ import annotations

import numpy as np

from wigglyborder.engine.shapes import EdgeSpec, Point
from wigglyborder.engine.wave import organic_offset


def wave_directions(count: int) -> np.ndarray:
    """+1 for even indices, -1 for odd, over indices 1..count-1."""
    idx = np.arange(1, count)
    return np.where(idx % 2 == 0, 1.0, -1.0)


def sample_edge(edge: EdgeSpec, amplitude: float) -> list[Point]:
    """Return ``segment_count + 1`` points from ``edge.start`` to ``edge.end``.

    Endpoints are the exact corners. Interior points alternate sides of the
    edge: the offset is negated on odd indices.
    """
    n = edge.segment_count
    start = np.array(edge.start, dtype=np.float64)
    end = np.array(edge.end, dtype=np.float64)
    normal = np.array(edge.outward_normal, dtype=np.float64)

    step = (end - start) / n
    pts = start + np.outer(np.arange(n + 1), step)

    if n > 1:
        idx = np.arange(1, n)
        offsets = organic_offset(idx, amplitude, edge.seed) * wave_directions(n)
        pts[1:-1] += np.outer(offsets, normal)

    points = [Point(float(x), float(y)) for x, y in pts]
    points[0] = edge.start
    points[-1] = edge.end
    return points
