"""svgfixture: SVG paths to ordered 3D point sequences for lighting fixtures."""

__version__ = "0.1.0"
