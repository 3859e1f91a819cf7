"""Point placement along a flattened path.

``point_count`` and ``resample`` share one size computation: the resampler asks
``point_count`` how many points to place, so the two can never disagree.
"""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from svgfixture.engine.config import EngineConfig
from svgfixture.engine.errors import Diagnostic, DiagnosticKind, report
from svgfixture.engine.flatten import CoordinateChain
from svgfixture.engine.units import DistanceUnit, convert
from svgfixture.utils.geometry import apply_transform, as_transform

logger = logging.getLogger(__name__)


class PointMode(enum.Enum):
    DIRECT = "Direct"
    DENSITY = "Density"
    SPACING = "Spacing"
    NUMPOINTS = "NumPoints"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PlacementPolicy:
    """How points are placed on a path.

    ``spacing`` is measured in ``spacing_units`` and ``density`` is points per
    ``density_units``; None means the model units. Padding is in model units.
    """

    mode: PointMode = PointMode.SPACING
    num_points: int = 10
    spacing: float = 1.0
    spacing_units: DistanceUnit | None = None
    density: float = 60.0
    density_units: DistanceUnit | None = None
    pad_start: float = 0.0
    pad_end: float = 0.0
    reverse: bool = False

    def __post_init__(self) -> None:
        if self.num_points < 1:
            raise ValueError(f"num_points must be >= 1, got {self.num_points}")
        if self.spacing < 0:
            raise ValueError(f"spacing must be >= 0, got {self.spacing}")
        if self.density < 0:
            raise ValueError(f"density must be >= 0, got {self.density}")
        if self.pad_start < 0 or self.pad_end < 0:
            raise ValueError(f"padding must be >= 0, got {self.pad_start}/{self.pad_end}")

    @classmethod
    def direct(cls, reverse: bool = False) -> PlacementPolicy:
        return cls(mode=PointMode.DIRECT, reverse=reverse)

    @classmethod
    def fixed_count(
        cls, num_points: int, pad_start: float = 0.0, pad_end: float = 0.0, reverse: bool = False
    ) -> PlacementPolicy:
        return cls(
            mode=PointMode.NUMPOINTS,
            num_points=num_points,
            pad_start=pad_start,
            pad_end=pad_end,
            reverse=reverse,
        )

    @classmethod
    def spaced(
        cls,
        distance: float,
        units: DistanceUnit | None = None,
        pad_start: float = 0.0,
        pad_end: float = 0.0,
        reverse: bool = False,
    ) -> PlacementPolicy:
        return cls(
            mode=PointMode.SPACING,
            spacing=distance,
            spacing_units=units,
            pad_start=pad_start,
            pad_end=pad_end,
            reverse=reverse,
        )

    @classmethod
    def dense(
        cls,
        points_per_unit: float,
        units: DistanceUnit | None = None,
        pad_start: float = 0.0,
        pad_end: float = 0.0,
        reverse: bool = False,
    ) -> PlacementPolicy:
        return cls(
            mode=PointMode.DENSITY,
            density=points_per_unit,
            density_units=units,
            pad_start=pad_start,
            pad_end=pad_end,
            reverse=reverse,
        )


@dataclass
class FixtureGeometryResult:
    """Placed points (Nx3, transform applied) and the lengths export writers need."""

    points: NDArray[np.float64]
    size: int
    total_length: float
    active_length: float
    diagnostics: list[Diagnostic] = field(default_factory=list)


def active_length(chain: CoordinateChain, policy: PlacementPolicy) -> float:
    """Length of the path minus padding, in model units."""
    return max(0.0, chain.total_length - policy.pad_start - policy.pad_end)


def model_spacing(policy: PlacementPolicy, model_units: DistanceUnit) -> float:
    """Distance between points in model units, for Spacing and Density modes."""
    if policy.mode is PointMode.DENSITY:
        density_spacing = 1 / policy.density if policy.density > 0 else 0.0
        return convert(policy.density_units or model_units, model_units, density_spacing)
    return convert(policy.spacing_units or model_units, model_units, policy.spacing)


def placement_spacing(
    chain: CoordinateChain,
    policy: PlacementPolicy,
    model_units: DistanceUnit,
    count: int,
) -> float:
    """Arc-length step between consecutive points for the spacing-family modes.

    ``count`` is the capped size from ``point_count``; NumPoints spreads exactly that
    many points between the padded ends.
    """
    if policy.mode is PointMode.NUMPOINTS:
        spaces = count - 1
        return active_length(chain, policy) / spaces if spaces > 0 else 0.0
    return model_spacing(policy, model_units)


def point_count(
    chain: CoordinateChain,
    policy: PlacementPolicy,
    model_units: DistanceUnit = DistanceUnit.INCHES,
    config: EngineConfig | None = None,
) -> int:
    """Number of points ``resample`` will produce. Has no side effects."""
    config = config or EngineConfig()
    if len(chain) == 0:
        return 0
    if policy.mode is PointMode.DIRECT:
        count = len(chain)
    elif policy.mode is PointMode.NUMPOINTS:
        count = policy.num_points
    else:
        spacing = model_spacing(policy, model_units)
        if spacing <= 0:
            return 0
        ratio = active_length(chain, policy) / spacing
        if not math.isfinite(ratio):
            return config.max_points
        count = math.floor(ratio)
    return min(count, config.max_points)


def _place_on_path(
    chain: CoordinateChain,
    count: int,
    spacing: float,
    pad_start: float,
    diagnostics: list[Diagnostic],
) -> NDArray[np.float64]:
    out = np.empty((count, 2))
    if count == 0:
        return out

    total = chain.total_length
    n_spacing = spacing / total if total > 0 else 0.0
    n_pad_start = min(max(pad_start / total, 0.0), 1.0) if total > 0 else 0.0
    normalized = chain.normalized
    positions = chain.positions
    last = len(chain) - 1

    # Walk along the path, assigning a location to each point as its normalized
    # position is passed. Placed points never feed back into the walk.
    i_coord = 0
    for i in range(count):
        # Clamped: the sum sometimes slips just above 1 on the last point
        n_point = min(max(n_pad_start + i * n_spacing, 0.0), 1.0)
        while True:
            if normalized[i_coord] == n_point:
                # Don't advance: the next point may sit on this coordinate too
                out[i] = positions[i_coord]
                break
            if i_coord == last:
                report(
                    diagnostics,
                    logger,
                    DiagnosticKind.PLACEMENT_OVERRUN,
                    f"Point {i} didn't fit on the path; placed at the last coordinate",
                )
                out[i] = positions[i_coord]
                break
            n_next = normalized[i_coord + 1]
            if n_next < n_point:
                i_coord += 1
            elif n_next == n_point:
                out[i] = positions[i_coord + 1]
                break
            else:
                amount = (n_point - normalized[i_coord]) / (n_next - normalized[i_coord])
                a = positions[i_coord]
                b = positions[i_coord + 1]
                out[i] = a + (b - a) * amount
                break
    return out


def resample(
    chain: CoordinateChain,
    policy: PlacementPolicy,
    transform: NDArray[np.float64] | None = None,
    model_units: DistanceUnit = DistanceUnit.INCHES,
    config: EngineConfig | None = None,
) -> FixtureGeometryResult:
    """Place points on ``chain`` according to ``policy`` and map them through ``transform``.

    Reversal happens before placement, so padding is measured from the start of the
    reversed traversal.
    """
    matrix = as_transform(transform)
    diagnostics: list[Diagnostic] = []
    size = point_count(chain, policy, model_units, config)
    working = chain.reversed() if policy.reverse else chain

    if policy.mode is PointMode.DIRECT:
        xy = working.positions[:size]
    else:
        spacing = placement_spacing(working, policy, model_units, size)
        xy = _place_on_path(working, size, spacing, policy.pad_start, diagnostics)

    return FixtureGeometryResult(
        points=apply_transform(matrix, xy),
        size=size,
        total_length=chain.total_length,
        active_length=active_length(chain, policy),
        diagnostics=diagnostics,
    )
