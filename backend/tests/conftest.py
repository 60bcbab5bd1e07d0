"""Shared test fixtures."""

from __future__ import annotations

import pytest

from wigglyborder.engine import GeneratorConfig, WaveParameters

# Reference scenario: 4:3 box, default wave settings.
# Space 400x300, padding 8, working rectangle [8, 392] x [8, 292].
REFERENCE_PARAMS = WaveParameters(amplitude=4.0, segment_size=25.0, stroke_inset=4.0)
REFERENCE_TARGET = (400.0, 300.0)
REFERENCE_CORNERS = [(8.0, 8.0), (392.0, 8.0), (392.0, 292.0), (8.0, 292.0)]

# (target_width, target_height) pairs covering landscape, portrait and square
TARGET_SIZES = [
    (400.0, 300.0),
    (400.0, 250.0),
    (1920.0, 1080.0),
    (250.0, 400.0),
    (300.0, 300.0),
    (37.0, 1000.0),
]


@pytest.fixture
def reference_params() -> WaveParameters:
    return REFERENCE_PARAMS


@pytest.fixture
def default_config() -> GeneratorConfig:
    return GeneratorConfig()
