"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from svgfixture.api import fixture, health, svg_import

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(fixture.router)
api_router.include_router(svg_import.router)
