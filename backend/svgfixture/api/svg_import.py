"""POST /api/import: turn every path in an SVG document into a fixture."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends, HTTPException

from svgfixture.dependencies import get_engine_config
from svgfixture.engine.config import EngineConfig
from svgfixture.engine.errors import InputUnreadableError
from svgfixture.fixture.importer import SvgImporter
from svgfixture.fixture.path_fixture import new_density
from svgfixture.models.requests import ImportRequest
from svgfixture.models.responses import FixtureResponse, ImportResponse
from svgfixture.params.parameter import BoundedParameter

router = APIRouter()


def _check_range(parameter: BoundedParameter, value: float, field: str) -> None:
    # Fixture parameters clamp; out-of-range request values are rejected instead
    if not parameter.min_value <= value <= parameter.max_value:
        raise HTTPException(
            status_code=422,
            detail=f"placement.{field} must be between {parameter.min_value:g} and "
            f"{parameter.max_value:g} for imports, got {value:g}",
        )


def _configure(importer: SvgImporter, req: ImportRequest) -> None:
    """Drive the importer's synced lead parameters from the request."""
    placement = req.placement
    for name in ("spacing", "pad_start", "pad_end"):
        _check_range(importer.syncs[name].parameter, getattr(placement, name), name)
    _check_range(new_density(), placement.density, "density")

    importer.syncs["path_units"].parameter.set_value(req.path_units)
    importer.syncs["model_units"].parameter.set_value(req.model_units)
    importer.syncs["point_mode"].parameter.set_value(placement.mode)
    importer.syncs["num_points"].parameter.set_value(placement.num_points)
    importer.syncs["spacing"].parameter.set_value(placement.spacing)
    importer.syncs["reverse_path"].parameter.set_value(placement.reverse)
    importer.syncs["pad_start"].parameter.set_value(placement.pad_start)
    importer.syncs["pad_end"].parameter.set_value(placement.pad_end)


@router.post("/import", response_model=ImportResponse)
async def import_svg(req: ImportRequest, config: EngineConfig = Depends(get_engine_config)) -> ImportResponse:
    start = time.perf_counter()

    importer = SvgImporter(config=config)
    _configure(importer, req)
    try:
        fixtures = importer.import_svg(req.svg, req.file_name)
    except InputUnreadableError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    responses = []
    for fixture in fixtures:
        # Settings without a group sync are applied per fixture
        fixture.spacing_units.set_value(req.placement.spacing_units or req.model_units)
        fixture.density_units.set_value(req.placement.density_units or req.model_units)
        fixture.density.set_value(req.placement.density)
        result = fixture.compute_points()
        result.diagnostics[:0] = fixture.diagnostics
        responses.append(FixtureResponse.from_result(result, label=fixture.label))

    elapsed = (time.perf_counter() - start) * 1000
    return ImportResponse(
        file_name=importer.file_name,
        num_paths=int(importer.num_paths.value),
        total_points=int(importer.total_points.value),
        fixtures=responses,
        processing_time_ms=round(elapsed, 1),
    )
