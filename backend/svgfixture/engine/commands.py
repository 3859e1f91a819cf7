"""Geometric path commands produced by the parser.

All coordinates are absolute. Arcs never appear here: the parser expands them into
``CubicCurveTo`` before appending.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

Point = tuple[float, float]


@dataclass(frozen=True)
class MoveTo:
    end: Point


@dataclass(frozen=True)
class LineTo:
    end: Point


@dataclass(frozen=True)
class CubicCurveTo:
    control1: Point
    control2: Point
    end: Point


@dataclass(frozen=True)
class QuadraticCurveTo:
    control: Point
    end: Point


@dataclass(frozen=True)
class ClosePath:
    pass


PathCommand = Union[MoveTo, LineTo, CubicCurveTo, QuadraticCurveTo, ClosePath]
