"""POST /api/export/* — standalone SVG and React component code."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from wigglyborder.config import Settings
from wigglyborder.dependencies import get_generator_config, get_settings
from wigglyborder.engine import GeneratorConfig, PathResult, generate
from wigglyborder.models.requests import ExportRequest
from wigglyborder.models.responses import ExportResponse
from wigglyborder.svg.path_data import to_path_data
from wigglyborder.svg.react import border_component
from wigglyborder.svg.serializer import border_svg

router = APIRouter(prefix="/export")


def _generate(req: ExportRequest, config: GeneratorConfig) -> PathResult:
    return generate(req.wave_parameters(), req.target_width, req.target_height, config)


@router.post("/svg", response_model=ExportResponse)
def export_svg(
    req: ExportRequest,
    config: GeneratorConfig = Depends(get_generator_config),
    settings: Settings = Depends(get_settings),
) -> ExportResponse:
    result = _generate(req, config)
    space = result.coordinate_space
    path_data = to_path_data(result.commands, settings.path_precision)

    return ExportResponse(
        code=border_svg(path_data, space, req.border_style()),
        format="svg",
        view_box_width=space.width,
        view_box_height=space.height,
    )


@router.post("/react", response_model=ExportResponse)
def export_react(
    req: ExportRequest,
    config: GeneratorConfig = Depends(get_generator_config),
    settings: Settings = Depends(get_settings),
) -> ExportResponse:
    result = _generate(req, config)
    space = result.coordinate_space
    path_data = to_path_data(result.commands, settings.path_precision)

    return ExportResponse(
        code=border_component(path_data, space, req.border_style()),
        format="react",
        view_box_width=space.width,
        view_box_height=space.height,
    )
