"""POST /api/fixture: place points along a single path."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from svgfixture.dependencies import get_engine_config
from svgfixture.engine.config import EngineConfig
from svgfixture.engine.pipeline import build_fixture_geometry
from svgfixture.models.requests import FixtureRequest
from svgfixture.models.responses import FixtureResponse
from svgfixture.utils.geometry import as_transform

router = APIRouter()


@router.post("/fixture", response_model=FixtureResponse)
async def fixture(req: FixtureRequest, config: EngineConfig = Depends(get_engine_config)) -> FixtureResponse:
    try:
        transform = as_transform(req.transform)
        policy = req.placement.to_policy()
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    result = build_fixture_geometry(
        req.path_data,
        policy,
        path_units=req.path_units,
        model_units=req.model_units,
        transform=transform,
        config=config,
    )
    return FixtureResponse.from_result(result, label="Path")
