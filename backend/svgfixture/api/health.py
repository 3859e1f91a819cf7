"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from svgfixture import __version__
from svgfixture.config import Settings
from svgfixture.dependencies import get_settings
from svgfixture.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(status="ok", version=__version__, max_points=settings.max_points)
