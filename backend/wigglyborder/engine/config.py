"""Generator configuration — fixed constants of the border geometry."""

from __future__ import annotations

from dataclasses import dataclass

# Per-edge wave seeds.
TOP_SEED = 1.23
RIGHT_SEED = 4.56
BOTTOM_SEED = 7.89
LEFT_SEED = 2.34


@dataclass(frozen=True)
class GeneratorConfig:
    """Controls coordinate-space scale, segment floors and curve tension."""

    # Length of the shorter coordinate-space axis
    base_unit: float = 300.0

    # Minimum wave segments per edge. Horizontal edges are usually the
    # long ones, so they get the higher floor.
    min_horizontal_segments: int = 6
    min_vertical_segments: int = 4
    # Upper bound per edge; finer segment sizes are rejected
    max_segments: int = 10_000

    # Catmull-Rom tension (0 = sharp, 1 = loose)
    tension: float = 0.5

    top_seed: float = TOP_SEED
    right_seed: float = RIGHT_SEED
    bottom_seed: float = BOTTOM_SEED
    left_seed: float = LEFT_SEED
