"""POST /api/generate — border path for a box size."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from wigglyborder.config import Settings
from wigglyborder.dependencies import get_generator_config, get_settings
from wigglyborder.engine import GeneratorConfig, generate
from wigglyborder.models.requests import GenerateRequest
from wigglyborder.models.responses import GenerateResponse
from wigglyborder.svg.path_data import to_path_data
from wigglyborder.utils.geometry import as_array, bbox

router = APIRouter()


@router.post("/generate", response_model=GenerateResponse)
def generate_border(
    req: GenerateRequest,
    config: GeneratorConfig = Depends(get_generator_config),
    settings: Settings = Depends(get_settings),
) -> GenerateResponse:
    result = generate(req.wave_parameters(), req.target_width, req.target_height, config)
    space = result.coordinate_space

    return GenerateResponse(
        path_data=to_path_data(result.commands, settings.path_precision),
        view_box_width=space.width,
        view_box_height=space.height,
        point_count=len(result.points),
        horizontal_segments=result.horizontal_segments,
        vertical_segments=result.vertical_segments,
        bounds=bbox(as_array(result.points)),
    )
