"""Path flattening: path commands -> unit-converted coordinate chain with arc lengths.

Coordinates are always derived from the original commands, never by rescaling an
existing chain, so a unit change cannot compound floating error.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from svgpathtools import CubicBezier, QuadraticBezier

from svgfixture.engine.commands import (
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    Point,
    QuadraticCurveTo,
)
from svgfixture.engine.config import EngineConfig
from svgfixture.engine.units import DistanceUnit, convert
from svgfixture.utils.geometry import arc_lengths, segment_lengths

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Coordinate:
    """One vertex of a flattened path, in model units."""

    x: float
    y: float
    dist_from_previous: float
    dist_from_start: float
    normalized: float


@dataclass(frozen=True)
class CoordinateChain:
    """Flattened path: Nx2 positions plus per-vertex distances and normalized positions."""

    positions: NDArray[np.float64]
    dist_from_previous: NDArray[np.float64]
    dist_from_start: NDArray[np.float64]
    normalized: NDArray[np.float64]
    total_length: float

    @classmethod
    def from_points(cls, points: Sequence[Point] | NDArray[np.float64]) -> CoordinateChain:
        positions = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        n = len(positions)
        if n == 0:
            empty = np.empty(0)
            return cls(np.empty((0, 2)), empty, empty.copy(), empty.copy(), 0.0)

        dist_prev = np.concatenate([[0.0], segment_lengths(positions)])
        dist_start = arc_lengths(positions)
        total = float(dist_start[-1])
        if total > 0:
            normalized = dist_start / total
        else:
            # Zero net distance between coordinates. Avoid divide by zero.
            normalized = np.zeros(n)
        return cls(positions, dist_prev, dist_start, normalized, total)

    def __len__(self) -> int:
        return len(self.positions)

    def __getitem__(self, index: int) -> Coordinate:
        return Coordinate(
            x=float(self.positions[index, 0]),
            y=float(self.positions[index, 1]),
            dist_from_previous=float(self.dist_from_previous[index]),
            dist_from_start=float(self.dist_from_start[index]),
            normalized=float(self.normalized[index]),
        )

    def __iter__(self) -> Iterator[Coordinate]:
        for i in range(len(self)):
            yield self[i]

    def reversed(self) -> CoordinateChain:
        """The same chain traversed from its last coordinate to its first."""
        n = len(self)
        if n == 0:
            return self
        positions = self.positions[::-1].copy()
        dist_prev = np.concatenate([[0.0], self.dist_from_previous[::-1][:-1]])
        dist_start = self.total_length - self.dist_from_start[::-1]
        if self.total_length > 0:
            normalized = 1.0 - self.normalized[::-1]
        else:
            normalized = np.zeros(n)
        return CoordinateChain(positions, dist_prev, dist_start, normalized, self.total_length)


def _curve_interior(
    start: Point,
    command: CubicCurveTo | QuadraticCurveTo,
    steps: int,
) -> list[Point]:
    """Points at t = i/steps (i = 1..steps-1) along a Bézier, in path units."""
    if isinstance(command, CubicCurveTo):
        segment = CubicBezier(
            complex(*start),
            complex(*command.control1),
            complex(*command.control2),
            complex(*command.end),
        )
    else:
        segment = QuadraticBezier(
            complex(*start),
            complex(*command.control),
            complex(*command.end),
        )
    points = []
    for i in range(1, steps):
        z = segment.point(i / steps)
        points.append((z.real, z.imag))
    return points


def flatten(
    commands: Sequence[PathCommand],
    path_units: DistanceUnit = DistanceUnit.INCHES,
    model_units: DistanceUnit = DistanceUnit.INCHES,
    config: EngineConfig | None = None,
) -> CoordinateChain:
    """Walk path commands and build the coordinate chain in model units.

    Move-to and line-to end points become coordinates. Curves contribute their end
    point, plus interior points when ``config.curve_subdivisions`` > 1. Close-path
    adds nothing. Sub-paths are not separated: every move-to continues the chain.
    """
    config = config or EngineConfig()
    steps = config.curve_subdivisions

    raw: list[Point] = []
    current: Point = (0.0, 0.0)
    subpath_start: Point = (0.0, 0.0)
    for command in commands:
        if isinstance(command, MoveTo):
            raw.append(command.end)
            current = subpath_start = command.end
        elif isinstance(command, LineTo):
            raw.append(command.end)
            current = command.end
        elif isinstance(command, (CubicCurveTo, QuadraticCurveTo)):
            if steps > 1:
                raw.extend(_curve_interior(current, command, steps))
            raw.append(command.end)
            current = command.end
        elif isinstance(command, ClosePath):
            current = subpath_start

    points = [(convert(path_units, model_units, x), convert(path_units, model_units, y)) for x, y in raw]
    chain = CoordinateChain.from_points(points)
    logger.debug(
        "Flattened %d commands -> %d coordinates, length %.4f %s",
        len(commands),
        len(chain),
        chain.total_length,
        model_units.abbrev,
    )
    return chain
