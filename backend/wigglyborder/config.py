"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    wigglyborder_env: str = "development"
    wigglyborder_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Geometry
    coordinate_base_unit: float = 300.0
    # Decimal places in emitted path data; None keeps full precision
    path_precision: int | None = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
