"""End-to-end run: path data -> parse -> flatten -> resample."""

from __future__ import annotations

import logging
import time

import numpy as np
from numpy.typing import NDArray

from svgfixture.engine.config import EngineConfig
from svgfixture.engine.flatten import flatten
from svgfixture.engine.path_parser import parse_path_data
from svgfixture.engine.resample import FixtureGeometryResult, PlacementPolicy, resample
from svgfixture.engine.units import DistanceUnit

logger = logging.getLogger(__name__)


def build_fixture_geometry(
    path_data: str,
    policy: PlacementPolicy,
    path_units: DistanceUnit = DistanceUnit.INCHES,
    model_units: DistanceUnit = DistanceUnit.INCHES,
    transform: NDArray[np.float64] | None = None,
    config: EngineConfig | None = None,
) -> FixtureGeometryResult:
    """Run the whole engine on one path. Parse diagnostics come first in the result."""
    start = time.perf_counter()
    parsed = parse_path_data(path_data)
    chain = flatten(parsed.commands, path_units, model_units, config)
    result = resample(chain, policy, transform, model_units, config)
    result.diagnostics[:0] = parsed.diagnostics

    elapsed = (time.perf_counter() - start) * 1000
    logger.debug(
        "Fixture geometry: %d points (%s) over %.4f %s in %.1fms",
        result.size,
        policy.mode,
        result.total_length,
        model_units.abbrev,
        elapsed,
    )
    return result
