"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgfixture.engine.errors import Diagnostic
from svgfixture.engine.resample import FixtureGeometryResult


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    max_points: int = 0


class DiagnosticModel(BaseModel):
    kind: str
    message: str
    token: str | None = None
    position: int | None = None

    @classmethod
    def from_diagnostic(cls, diagnostic: Diagnostic) -> DiagnosticModel:
        return cls(**diagnostic.to_dict())


class FixtureResponse(BaseModel):
    label: str = ""
    points: list[tuple[float, float, float]] = Field(default_factory=list)
    size: int = 0
    total_length: float = 0.0
    active_length: float = 0.0
    diagnostics: list[DiagnosticModel] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: FixtureGeometryResult, label: str = "") -> FixtureResponse:
        return cls(
            label=label,
            points=[(float(x), float(y), float(z)) for x, y, z in result.points],
            size=result.size,
            total_length=result.total_length,
            active_length=result.active_length,
            diagnostics=[DiagnosticModel.from_diagnostic(d) for d in result.diagnostics],
        )


class ImportResponse(BaseModel):
    file_name: str = ""
    num_paths: int = 0
    total_points: int = 0
    fixtures: list[FixtureResponse] = Field(default_factory=list)
    processing_time_ms: float = 0.0
