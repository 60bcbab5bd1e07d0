"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from wigglyborder.engine.shapes import WaveParameters
from wigglyborder.svg.style import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_BORDER_COLOR,
    DEFAULT_BORDER_WIDTH,
    BorderStyle,
    normalize_hex_color,
)


class GenerateRequest(BaseModel):
    amplitude: float = Field(default=4.0, ge=0, allow_inf_nan=False, description="How far waves extend from the edge")
    segment_size: float = Field(default=25.0, gt=0, allow_inf_nan=False, description="Distance between wave points")
    stroke_inset: float = Field(default=4.0, ge=0, allow_inf_nan=False, description="Extra inset reserved for the stroke")
    target_width: float = Field(default=400.0, gt=0, allow_inf_nan=False, description="Display box width")
    target_height: float = Field(default=250.0, gt=0, allow_inf_nan=False, description="Display box height")

    def wave_parameters(self) -> WaveParameters:
        return WaveParameters(
            amplitude=self.amplitude,
            segment_size=self.segment_size,
            stroke_inset=self.stroke_inset,
        )


class ExportRequest(BaseModel):
    background_color: str = Field(default=DEFAULT_BACKGROUND_COLOR, description="Fill colour (#RRGGBB)")
    border_color: str = Field(default=DEFAULT_BORDER_COLOR, description="Outline colour (#RRGGBB)")
    border_width: float = Field(
        default=DEFAULT_BORDER_WIDTH,
        ge=0,
        allow_inf_nan=False,
        description="Stroke width; also used as the stroke inset",
    )
    amplitude: float = Field(default=4.0, ge=0, allow_inf_nan=False)
    segment_size: float = Field(default=25.0, gt=0, allow_inf_nan=False)
    target_width: float = Field(default=400.0, gt=0, allow_inf_nan=False)
    target_height: float = Field(default=250.0, gt=0, allow_inf_nan=False)

    @field_validator("background_color", "border_color")
    @classmethod
    def _hex_color(cls, value: str) -> str:
        return normalize_hex_color(value)

    def wave_parameters(self) -> WaveParameters:
        return WaveParameters(
            amplitude=self.amplitude,
            segment_size=self.segment_size,
            stroke_inset=self.border_width,
        )

    def border_style(self) -> BorderStyle:
        return BorderStyle(
            background_color=self.background_color,
            border_color=self.border_color,
            border_width=self.border_width,
        )
