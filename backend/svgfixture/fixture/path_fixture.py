"""A lighting fixture whose points are placed along one SVG path.

The fixture owns its path data and a set of observable parameters. Coordinates are
rebuilt from the parsed commands whenever the path data or either unit changes, and
the cached size is refreshed whenever anything that affects point count changes.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from numpy.typing import NDArray

from svgfixture.engine.commands import PathCommand
from svgfixture.engine.config import EngineConfig
from svgfixture.engine.errors import Diagnostic
from svgfixture.engine.flatten import CoordinateChain, flatten
from svgfixture.engine.path_parser import parse_path_data
from svgfixture.engine.resample import (
    FixtureGeometryResult,
    PlacementPolicy,
    PointMode,
    active_length,
    point_count,
    resample,
)
from svgfixture.engine.units import DistanceUnit, singular_options
from svgfixture.params.parameter import (
    BooleanParameter,
    BoundedParameter,
    DiscreteParameter,
    EnumParameter,
    MutableParameter,
    Parameter,
)

logger = logging.getLogger(__name__)


# Parameter builders, shared with the import component so its sync parameters
# match the fixtures' parameters exactly.


def new_path_units() -> EnumParameter[DistanceUnit]:
    return EnumParameter("Path Units", DistanceUnit.INCHES, description="Units of the SVG path")


def new_model_units() -> EnumParameter[DistanceUnit]:
    return EnumParameter("Model Units", DistanceUnit.INCHES, description="Units of the model")


def new_point_mode() -> EnumParameter[PointMode]:
    return EnumParameter(
        "Mode",
        PointMode.SPACING,
        description="How points are placed along the path: a fixed number of points, a fixed "
        "spacing or density between points, or one point per path coordinate.",
    )


def new_num_points(max_points: int) -> DiscreteParameter:
    return DiscreteParameter(
        "Num Points", 10, 1, max_points, description="Number of points on the path, in NumPoints mode"
    )


def new_spacing() -> BoundedParameter:
    return BoundedParameter("Spacing", 1, 0.1, 1000, description="Spacing between points, in Spacing mode")


def new_spacing_units() -> EnumParameter[DistanceUnit]:
    return EnumParameter("Spacing Units", DistanceUnit.INCHES, description="Units for Spacing mode")


def new_density() -> BoundedParameter:
    return BoundedParameter("Density", 60, 0.1, 1000, description="Number of points per unit, in Density mode")


def new_density_units() -> EnumParameter[DistanceUnit]:
    return EnumParameter(
        "Density Units",
        DistanceUnit.METERS,
        description="In Density mode, the number of points is per each of these units",
        option_labels=singular_options(),
    )


def new_reverse_path() -> BooleanParameter:
    return BooleanParameter(
        "Reverse Path", False, description="Direction to traverse the SVG path (Forward = False)"
    )


def new_pad_start() -> BoundedParameter:
    return BoundedParameter("PadStart", 0, 0, 10000, description="Distance between path start and first pixel")


def new_pad_end() -> BoundedParameter:
    return BoundedParameter("PadEnd", 0, 0, 10000, description="Distance between last pixel and path end")


class PathFixture:
    """Points placed along an SVG path by fixed count, spacing, density or directly."""

    def __init__(
        self,
        path_data: str | None = None,
        label: str = "Path",
        config: EngineConfig | None = None,
    ) -> None:
        self.label = label
        self.config = config or EngineConfig()

        self.path_units = new_path_units()
        self.model_units = new_model_units()
        self.point_mode = new_point_mode()
        self.num_points = new_num_points(self.config.max_points)
        self.spacing = new_spacing()
        self.spacing_units = new_spacing_units()
        self.density = new_density()
        self.density_units = new_density_units()
        self.reverse_path = new_reverse_path()
        self.pad_start = new_pad_start()
        self.pad_end = new_pad_end()
        self.enabled = BooleanParameter("Enabled", True, description="Whether this fixture is exported")
        self.size = MutableParameter("Size", 0, description="Calculated number of points in this fixture, read-only")

        self._path_data: str | None = None
        self._commands: list[PathCommand] = []
        self._diagnostics: list[Diagnostic] = []
        self._chain = CoordinateChain.from_points([])

        for parameter in (self.path_units, self.model_units):
            parameter.add_listener(self._units_changed)
        for parameter in self.placement_parameters:
            parameter.add_listener(self._placement_changed)

        if path_data is not None:
            self.set_path_data(path_data)

    def __repr__(self) -> str:
        return f"PathFixture({self.label!r}, size={self.size.value:.0f})"

    @property
    def placement_parameters(self) -> tuple[Parameter, ...]:
        return (
            self.point_mode,
            self.num_points,
            self.spacing,
            self.spacing_units,
            self.density,
            self.density_units,
            self.reverse_path,
            self.pad_start,
            self.pad_end,
        )

    @property
    def path_data(self) -> str | None:
        return self._path_data

    @property
    def coordinates(self) -> CoordinateChain:
        return self._chain

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Parse diagnostics for the current path data."""
        return list(self._diagnostics)

    @property
    def policy(self) -> PlacementPolicy:
        return PlacementPolicy(
            mode=self.point_mode.value,
            num_points=self.num_points.value,
            spacing=self.spacing.value,
            spacing_units=self.spacing_units.value,
            density=self.density.value,
            density_units=self.density_units.value,
            pad_start=self.pad_start.value,
            pad_end=self.pad_end.value,
            reverse=self.reverse_path.value,
        )

    @property
    def total_length(self) -> float:
        return self._chain.total_length

    @property
    def active_length(self) -> float:
        return active_length(self._chain, self.policy)

    def set_path_data(self, path_data: str) -> None:
        parsed = parse_path_data(path_data)
        self._path_data = path_data
        self._commands = parsed.commands
        self._diagnostics = parsed.diagnostics
        self._rebuild_coordinates()
        self._refresh_size()

    def _units_changed(self, parameter: Parameter, origin: Any) -> None:
        self._rebuild_coordinates()
        self._refresh_size()

    def _placement_changed(self, parameter: Parameter, origin: Any) -> None:
        self._refresh_size()

    def _rebuild_coordinates(self) -> None:
        self._chain = flatten(
            self._commands,
            self.path_units.value,
            self.model_units.value,
            self.config,
        )
        logger.debug("%s: rebuilt %d coordinates", self.label, len(self._chain))

    def _refresh_size(self) -> None:
        self.size.set_value(
            point_count(self._chain, self.policy, self.model_units.value, self.config),
            origin=self,
        )

    def compute_points(self, transform: NDArray[np.float64] | None = None) -> FixtureGeometryResult:
        """Place this fixture's points and map them through ``transform``."""
        return resample(self._chain, self.policy, transform, self.model_units.value, self.config)

    def metadata(self) -> dict[str, str]:
        """Fixture settings as the string map attached to model metadata."""
        return {
            "pathUnits": str(self.path_units.value),
            "modelUnits": str(self.model_units.value),
            "pointMode": str(self.point_mode.value),
            "numPoints": str(self.num_points.value),
            "spacing": str(self.spacing.value),
            "spacingUnits": str(self.spacing_units.value),
            "density": str(self.density.value),
            "densityUnits": str(self.density_units.value),
            "reversePath": str(self.reverse_path.value).lower(),
            "padStart": str(self.pad_start.value),
            "padEnd": str(self.pad_end.value),
        }

    def export_summary(self, transform: NDArray[np.float64] | None = None) -> dict[str, Any]:
        """Data an export writer needs: label, active length, point count and xyz points."""
        result = self.compute_points(transform)
        return {
            "label": self.label,
            "metadata": {
                "length": result.active_length,
                "numPoints": result.size,
            },
            "coordinates": [
                {"x": float(x), "y": float(y), "z": float(z)} for x, y, z in result.points
            ],
        }

    def dispose(self) -> None:
        for parameter in (self.path_units, self.model_units):
            parameter.remove_listener(self._units_changed)
        for parameter in self.placement_parameters:
            parameter.remove_listener(self._placement_changed)
