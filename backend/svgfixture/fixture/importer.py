"""SVG import component.

Reads path elements from SVG markup, creates one ``PathFixture`` per path and keeps
group-level state across the imported fixtures: synced parameters, the live point
total and the number of fixtures marked for export.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Any

from svgfixture.engine.config import EngineConfig
from svgfixture.engine.errors import InputUnreadableError
from svgfixture.fixture.path_fixture import (
    PathFixture,
    new_model_units,
    new_num_points,
    new_pad_end,
    new_pad_start,
    new_path_units,
    new_point_mode,
    new_reverse_path,
    new_spacing,
)
from svgfixture.params.parameter import BooleanParameter, MutableParameter, Parameter
from svgfixture.params.sum import SumParameter
from svgfixture.params.sync import SyncParameter

logger = logging.getLogger(__name__)


def _strip_ns(tag: str) -> str:
    """Strip an XML namespace: '{http://www.w3.org/2000/svg}path' -> 'path'."""
    return tag.rsplit("}", 1)[-1]


def load_svg_paths(svg_text: str) -> list[str]:
    """Return the ``d`` attribute of every path element, in document order."""
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise InputUnreadableError(f"Could not parse SVG markup: {e}") from e

    paths: list[str] = []
    for elem in root.iter():
        if not isinstance(elem.tag, str) or _strip_ns(elem.tag) != "path":
            continue
        d = (elem.get("d") or "").strip()
        if d:
            paths.append(d)
    return paths


class SvgImporter:
    """Imports SVG files as path fixtures and manages them as a group."""

    def __init__(self, config: EngineConfig | None = None, clear_existing_on_import: bool = True) -> None:
        self.config = config or EngineConfig()
        self.file_name = ""
        self.clear_existing_on_import = BooleanParameter(
            "Clear on Import",
            clear_existing_on_import,
            description="Whether to remove previously imported fixtures when a new SVG is imported",
        )
        self.num_paths = MutableParameter("NumPaths", 0, description="Number of paths found in the SVG, read-only")
        self.num_for_export = MutableParameter(
            "NumForExport", 0, description="Number of enabled path fixtures, read-only"
        )
        self.total_points = SumParameter("Total Points", description="Total number of points")

        # Keyed by the PathFixture attribute each one drives
        self.syncs: dict[str, SyncParameter] = {
            "path_units": SyncParameter(new_path_units()),
            "model_units": SyncParameter(new_model_units()),
            "point_mode": SyncParameter(new_point_mode()),
            "spacing": SyncParameter(new_spacing()),
            "num_points": SyncParameter(new_num_points(self.config.max_points)),
            "reverse_path": SyncParameter(new_reverse_path()),
            "pad_start": SyncParameter(new_pad_start()),
            "pad_end": SyncParameter(new_pad_end()),
        }

        self._fixtures: list[PathFixture] = []

    @property
    def fixtures(self) -> tuple[PathFixture, ...]:
        return tuple(self._fixtures)

    def import_svg(self, svg_text: str, file_name: str = "") -> list[PathFixture]:
        """Create fixtures for every path in ``svg_text``.

        Raises InputUnreadableError, with all prior state untouched, when the markup
        cannot be parsed.
        """
        try:
            paths = load_svg_paths(svg_text)
        except InputUnreadableError:
            logger.error("Error loading SVG %s", file_name or "<string>", exc_info=True)
            raise

        if self.clear_existing_on_import.is_on:
            for fixture in list(self._fixtures):
                self.remove_fixture(fixture)

        self.file_name = file_name
        self.num_paths.set_value(len(paths))

        created = []
        for i, path_data in enumerate(paths):
            fixture = PathFixture(path_data, label=f"Path {i}", config=self.config)
            self.add_fixture(fixture)
            created.append(fixture)

        logger.info(
            "Imported %s: %d paths, %.0f total points",
            file_name or "SVG",
            len(paths),
            self.total_points.value,
        )
        return created

    def add_fixture(self, fixture: PathFixture) -> None:
        self._fixtures.append(fixture)
        fixture.enabled.add_listener(self._enabled_changed)
        if fixture.enabled.is_on:
            self.total_points.add_child(fixture.size)
        for name, sync in self.syncs.items():
            sync.add_child(getattr(fixture, name))
        self._refresh_num_for_export()

    def remove_fixture(self, fixture: PathFixture) -> bool:
        if fixture not in self._fixtures:
            return False
        fixture.enabled.remove_listener(self._enabled_changed)
        if self.total_points.has_child(fixture.size):
            self.total_points.remove_child(fixture.size)
        for name, sync in self.syncs.items():
            sync.remove_child(getattr(fixture, name))
        self._fixtures.remove(fixture)
        fixture.dispose()
        self._refresh_num_for_export()
        return True

    def _enabled_changed(self, parameter: Parameter, origin: Any) -> None:
        fixture = next(f for f in self._fixtures if f.enabled is parameter)
        if fixture.enabled.is_on:
            if not self.total_points.has_child(fixture.size):
                self.total_points.add_child(fixture.size)
        else:
            self.total_points.remove_child(fixture.size)
        self._refresh_num_for_export()

    def _refresh_num_for_export(self) -> None:
        self.num_for_export.set_value(sum(1 for f in self._fixtures if f.enabled.is_on))

    def export_summaries(self) -> list[dict[str, Any]]:
        """Export data for every enabled fixture."""
        return [f.export_summary() for f in self._fixtures if f.enabled.is_on]
