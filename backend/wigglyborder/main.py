"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wigglyborder.config import settings
from wigglyborder.engine.errors import InvalidParameterError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.wigglyborder_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _invalid_parameter_handler(request: Request, exc: InvalidParameterError) -> JSONResponse:
    logger.warning("Rejected parameters for %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="WigglyBorder",
        description="Hand-drawn style rectangular border paths for any aspect ratio",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidParameterError, _invalid_parameter_handler)

    from wigglyborder.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
