"""FastAPI dependency injection."""

from __future__ import annotations

from wigglyborder.config import Settings, settings
from wigglyborder.engine.config import GeneratorConfig


def get_settings() -> Settings:
    return settings


def get_generator_config() -> GeneratorConfig:
    return GeneratorConfig(base_unit=settings.coordinate_base_unit)
