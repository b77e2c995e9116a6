"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from pathlang.config import Settings
from pathlang.dependencies import get_settings
from pathlang.engine.registry import get_registry
from pathlang.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(app_settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        env=app_settings.pathlang_env,
        element_kinds_registered=get_registry().count,
    )
