"""API response models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class GenerateResponse(BaseModel):
    path_data: str
    view_box_width: float
    view_box_height: float
    point_count: int = 0
    horizontal_segments: int = 0
    vertical_segments: int = 0
    # (xmin, ymin, xmax, ymax) of the sampled points, waves included
    bounds: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)


class ExportResponse(BaseModel):
    code: str
    format: Literal["svg", "react"]
    view_box_width: float
    view_box_height: float
