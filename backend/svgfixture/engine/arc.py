"""Elliptical arc -> cubic Bézier conversion.

svgpathtools' ``Arc`` does the endpoint-to-center parameterization, including
scaling radii that are too small to reach the end point. Each <= 90° slice of the
arc is then approximated by one cubic using the tangent-length factor
alpha = sin(d) * (sqrt(4 + 3 tan²(d/4)) - 1) / 3.
"""

from __future__ import annotations

import math

from svgpathtools import Arc

from svgfixture.engine.commands import CubicCurveTo, LineTo, PathCommand, Point

_QUARTER_TURN = math.pi / 2
# Slack so a sweep of exactly 90°/180°/270° is not split into an extra sliver
_SEGMENT_EPS = 1e-6


def _xy(z: complex) -> Point:
    return (z.real, z.imag)


def arc_to_cubics(
    start: Point,
    rx: float,
    ry: float,
    x_axis_rotation: float,
    large_arc: bool,
    sweep: bool,
    end: Point,
) -> list[PathCommand]:
    """Convert one SVG arc into cubic curves.

    Returns an empty list when start and end coincide, and a single ``LineTo`` when
    either radius is zero. The last curve ends exactly on ``end``.
    """
    if start == end:
        return []
    if rx == 0 or ry == 0:
        return [LineTo(end)]

    arc = Arc(
        complex(*start),
        complex(abs(rx), abs(ry)),
        x_axis_rotation,
        bool(large_arc),
        bool(sweep),
        complex(*end),
    )
    sweep_angle = math.radians(arc.delta)
    if sweep_angle == 0:
        return [LineTo(end)]

    num_segments = max(1, math.ceil(abs(sweep_angle) / _QUARTER_TURN - _SEGMENT_EPS))
    delta = sweep_angle / num_segments
    t = math.tan(delta / 4)
    alpha = math.sin(delta) * (math.sqrt(4 + 3 * t * t) - 1) / 3

    def tangent(s: float) -> Point:
        # Arc.derivative is d/ds over the whole sweep; rescale to d/dtheta
        return _xy(arc.derivative(s) / sweep_angle)

    curves: list[PathCommand] = []
    p1 = start
    d1 = tangent(0.0)
    for i in range(1, num_segments + 1):
        s = i / num_segments
        p2 = end if i == num_segments else _xy(arc.point(s))
        d2 = tangent(s)
        curves.append(
            CubicCurveTo(
                control1=(p1[0] + alpha * d1[0], p1[1] + alpha * d1[1]),
                control2=(p2[0] - alpha * d2[0], p2[1] - alpha * d2[1]),
                end=p2,
            )
        )
        p1, d1 = p2, d2
    return curves
