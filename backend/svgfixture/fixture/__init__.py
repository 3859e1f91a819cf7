"""Path fixtures and the SVG import component that manages them."""

from svgfixture.fixture.importer import SvgImporter, load_svg_paths
from svgfixture.fixture.path_fixture import PathFixture

__all__ = ["PathFixture", "SvgImporter", "load_svg_paths"]
