"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svgfixture.engine.flatten import CoordinateChain, flatten
from svgfixture.engine.path_parser import parse_path_data


# Path data samples

LINE_10 = "M0,0 L10,0"
LINE_100 = "M0,0 L100,0"
SQUARE = "M0 0 H10 V10 H0 Z"
HALF_CIRCLE_ARC = "M0,0 A5,5 0 0,1 10,0"
CUBIC_WAVE = "M10 80 C 40 10, 65 10, 95 80 S 150 150, 180 80"
QUAD_WAVE = "M10 80 Q 95 10 180 80 T 250 80"
MIXED_RELATIVE = "m0,0 l10,0 v10 h-10 z m5,5 L 7 7"
ZIGZAG = "M0 0 L3 4 L6 0 L9 4 L12 0"
ROTATED_ARC = "M2 3 a8 4 30 1 0 12 -5"

SAMPLE_PATHS = [
    LINE_10,
    LINE_100,
    SQUARE,
    HALF_CIRCLE_ARC,
    CUBIC_WAVE,
    QUAD_WAVE,
    MIXED_RELATIVE,
    ZIGZAG,
    ROTATED_ARC,
]


# SVG documents

TWO_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="120" height="120" viewBox="0 0 120 120">
  <path d="M0,0 L100,0" stroke="black" fill="none"/>
  <g>
    <path d="M0 0 H10 V10 H0 Z" stroke="black" fill="none"/>
  </g>
  <circle cx="50" cy="50" r="10"/>
</svg>'''

EMPTY_D_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">
  <path d="" />
  <path d="M1 1 L2 2"/>
</svg>'''

NO_NAMESPACE_SVG = '''<svg viewBox="0 0 10 10"><path d="M0 0 L4 3"/></svg>'''

BROKEN_SVG = '''<svg xmlns="http://www.w3.org/2000/svg"><path d="M0 0 L1 1"></svg>'''


def chain_for(path_data: str, **kwargs) -> CoordinateChain:
    return flatten(parse_path_data(path_data).commands, **kwargs)


@pytest.fixture
def line_chain() -> CoordinateChain:
    return chain_for(LINE_100)


@pytest.fixture
def square_chain() -> CoordinateChain:
    return chain_for(SQUARE)


@pytest.fixture
def two_path_svg() -> str:
    return TWO_PATH_SVG
