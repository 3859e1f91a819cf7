"""Path interpretation and point resampling engine."""

from svgfixture.engine.config import MAX_POINTS, EngineConfig
from svgfixture.engine.errors import Diagnostic, DiagnosticKind, InputUnreadableError, SvgFixtureError
from svgfixture.engine.flatten import Coordinate, CoordinateChain, flatten
from svgfixture.engine.path_parser import ParseResult, parse_path_data
from svgfixture.engine.pipeline import build_fixture_geometry
from svgfixture.engine.resample import (
    FixtureGeometryResult,
    PlacementPolicy,
    PointMode,
    point_count,
    resample,
)
from svgfixture.engine.units import DistanceUnit, convert

__all__ = [
    "MAX_POINTS",
    "EngineConfig",
    "Diagnostic",
    "DiagnosticKind",
    "InputUnreadableError",
    "SvgFixtureError",
    "Coordinate",
    "CoordinateChain",
    "flatten",
    "ParseResult",
    "parse_path_data",
    "build_fixture_geometry",
    "FixtureGeometryResult",
    "PlacementPolicy",
    "PointMode",
    "point_count",
    "resample",
    "DistanceUnit",
    "convert",
]
