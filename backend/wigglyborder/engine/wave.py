"""Organic wave offset — overlapping sines, no randomness."""

from __future__ import annotations

from typing import Union

import numpy as np
from numpy.typing import NDArray

# (weight, index frequency, seed multiplier) per sine term.
_TERMS = (
    (0.3, 1.7, 1.0),
    (0.2, 2.3, 1.5),
    (0.25, 0.9, 0.7),
)

# Sum of weights bounds the variation to [-0.75, 0.75].
MAX_VARIATION = sum(w for w, _, _ in _TERMS)


def organic_offset(
    index: Union[int, NDArray[np.int_]],
    amplitude: float,
    seed: float,
) -> Union[float, NDArray[np.float64]]:
    """Offset of the point at 1-based ``index`` along an edge.

    Lies in ``amplitude * [0.5 - 0.75, 0.5 + 0.75]``. Accepts an index array
    to evaluate a whole edge at once.
    """
    idx = np.asarray(index, dtype=np.float64)
    variation = sum(w * np.sin(f * idx + k * seed) for w, f, k in _TERMS)
    offset = amplitude * (0.5 + variation)
    if np.ndim(offset) == 0:
        return float(offset)
    return offset
