"""Engine configuration: limits and the curve subdivision extension point."""

from __future__ import annotations

from dataclasses import dataclass

MAX_POINTS = 4096


@dataclass
class EngineConfig:
    """Controls point limits and how curves are flattened."""

    # Upper bound on points produced by any placement mode
    max_points: int = MAX_POINTS

    # Steps per cubic/quadratic curve when flattening. 0 or 1 keeps only the curve
    # end point as a coordinate; k > 1 also emits the k-1 interior points.
    curve_subdivisions: int = 0

    def __post_init__(self) -> None:
        if self.max_points < 1:
            raise ValueError(f"max_points must be >= 1, got {self.max_points}")
        if self.curve_subdivisions < 0:
            raise ValueError(f"curve_subdivisions must be >= 0, got {self.curve_subdivisions}")
