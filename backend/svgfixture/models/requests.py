"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from svgfixture.engine.resample import PlacementPolicy, PointMode
from svgfixture.engine.units import DistanceUnit


def _parse_unit(value: Any) -> Any:
    if value is None or isinstance(value, DistanceUnit):
        return value
    return DistanceUnit.parse(str(value))


class PlacementRequest(BaseModel):
    mode: PointMode = Field(default=PointMode.SPACING, description="Direct, Density, Spacing or NumPoints")
    num_points: int = Field(default=10, ge=1, description="Point count in NumPoints mode")
    spacing: float = Field(default=1.0, ge=0, description="Distance between points in Spacing mode")
    spacing_units: DistanceUnit | None = Field(default=None, description="Defaults to the model units")
    density: float = Field(default=60.0, ge=0, description="Points per density unit in Density mode")
    density_units: DistanceUnit | None = Field(default=None, description="Defaults to the model units")
    pad_start: float = Field(default=0.0, ge=0, description="Model-unit distance skipped at the start")
    pad_end: float = Field(default=0.0, ge=0, description="Model-unit distance skipped at the end")
    reverse: bool = Field(default=False, description="Traverse the path from its end")

    @field_validator("spacing_units", "density_units", mode="before")
    @classmethod
    def _units(cls, value: Any) -> Any:
        return _parse_unit(value)

    def to_policy(self) -> PlacementPolicy:
        return PlacementPolicy(
            mode=self.mode,
            num_points=self.num_points,
            spacing=self.spacing,
            spacing_units=self.spacing_units,
            density=self.density,
            density_units=self.density_units,
            pad_start=self.pad_start,
            pad_end=self.pad_end,
            reverse=self.reverse,
        )


class FixtureRequest(BaseModel):
    path_data: str = Field(..., description="SVG path 'd' attribute")
    path_units: DistanceUnit = Field(default=DistanceUnit.INCHES, description="Units of the path data")
    model_units: DistanceUnit = Field(default=DistanceUnit.INCHES, description="Units of the output points")
    placement: PlacementRequest = Field(default_factory=PlacementRequest)
    transform: list[list[float]] | None = Field(
        default=None,
        description="Row-major 4x4 affine transform applied to every point",
    )

    @field_validator("path_units", "model_units", mode="before")
    @classmethod
    def _units(cls, value: Any) -> Any:
        return _parse_unit(value)


class ImportRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    file_name: str = Field(default="", description="Name of the source file, for labelling")
    path_units: DistanceUnit = Field(default=DistanceUnit.INCHES)
    model_units: DistanceUnit = Field(default=DistanceUnit.INCHES)
    placement: PlacementRequest = Field(default_factory=PlacementRequest)

    @field_validator("path_units", "model_units", mode="before")
    @classmethod
    def _units(cls, value: Any) -> Any:
        return _parse_unit(value)
