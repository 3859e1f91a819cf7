"""Tests for PathFixture parameter wiring."""

import pytest

from svgfixture.engine.config import EngineConfig
from svgfixture.engine.errors import DiagnosticKind
from svgfixture.engine.resample import PointMode
from svgfixture.engine.units import DistanceUnit
from svgfixture.fixture import PathFixture
from svgfixture.utils.geometry import translation
from tests.conftest import LINE_10, LINE_100


def test_defaults_use_spacing_mode():
    fixture = PathFixture(LINE_100)
    assert fixture.point_mode.value is PointMode.SPACING
    assert fixture.spacing_units.value is DistanceUnit.INCHES
    assert fixture.density_units.value is DistanceUnit.METERS
    assert fixture.size.value == 100
    assert fixture.total_length == pytest.approx(100.0)


def test_density_units_are_offered_in_the_singular():
    fixture = PathFixture()
    assert fixture.density_units.option_labels == [
        "Inch", "Foot", "Yard", "Millimeter", "Centimeter", "Meter"
    ]
    assert fixture.spacing_units.option_labels[1] == "Feet"


def test_no_path_data_means_no_points():
    fixture = PathFixture()
    assert fixture.path_data is None
    assert fixture.size.value == 0
    assert fixture.compute_points().points.shape == (0, 3)


def test_size_follows_placement_parameters():
    fixture = PathFixture(LINE_100)
    fixture.point_mode.set_value(PointMode.NUMPOINTS)
    fixture.num_points.set_value(17)
    assert fixture.size.value == 17

    fixture.point_mode.set_value(PointMode.SPACING)
    fixture.spacing.set_value(30)
    assert fixture.size.value == 3

    fixture.pad_start.set_value(20)
    assert fixture.size.value == 2
    assert fixture.active_length == pytest.approx(80.0)

    fixture.point_mode.set_value(PointMode.DIRECT)
    assert fixture.size.value == 2


def test_density_mode():
    fixture = PathFixture(LINE_100)
    fixture.point_mode.set_value(PointMode.DENSITY)
    fixture.density_units.set_value(DistanceUnit.FEET)
    fixture.density.set_value(2)
    # 100 in at 6 in spacing
    assert fixture.size.value == 16


def test_unit_change_rebuilds_coordinates():
    fixture = PathFixture(LINE_100)
    fixture.path_units.set_value(DistanceUnit.CENTIMETERS)
    assert fixture.total_length == pytest.approx(100 / 2.54)
    fixture.model_units.set_value(DistanceUnit.CENTIMETERS)
    assert fixture.total_length == 100.0
    assert fixture.coordinates.positions[-1].tolist() == [100.0, 0.0]


def test_unit_round_trip_does_not_drift():
    fixture = PathFixture("M0.1 0.7 L33.3 12.9")
    before = fixture.coordinates.positions.copy()
    for unit in DistanceUnit:
        fixture.model_units.set_value(unit)
    fixture.model_units.set_value(DistanceUnit.INCHES)
    assert fixture.coordinates.positions.tolist() == before.tolist()


def test_size_listeners_notified():
    fixture = PathFixture(LINE_100)
    seen = []
    fixture.size.add_listener(lambda p, origin: seen.append(p.value))
    fixture.spacing.set_value(50)
    assert seen == [2.0]


def test_set_path_data_replaces_path():
    fixture = PathFixture(LINE_100)
    fixture.set_path_data(LINE_10)
    assert fixture.path_data == LINE_10
    assert fixture.size.value == 10


def test_parse_diagnostics_are_kept():
    fixture = PathFixture("M0,0 L10,abc 20,0")
    assert [d.kind for d in fixture.diagnostics] == [DiagnosticKind.MALFORMED_TOKEN]
    fixture.set_path_data(LINE_10)
    assert fixture.diagnostics == []


def test_num_points_limited_by_config():
    fixture = PathFixture(LINE_100, config=EngineConfig(max_points=50))
    fixture.point_mode.set_value(PointMode.NUMPOINTS)
    fixture.num_points.set_value(500)
    assert fixture.num_points.value == 50
    fixture.point_mode.set_value(PointMode.SPACING)
    fixture.spacing.set_value(0.5)
    assert fixture.size.value == 50


def test_compute_points_with_transform():
    fixture = PathFixture(LINE_10)
    fixture.point_mode.set_value(PointMode.NUMPOINTS)
    fixture.num_points.set_value(2)
    result = fixture.compute_points(translation(0, 0, 5))
    assert result.points.tolist() == [[0.0, 0.0, 5.0], [10.0, 0.0, 5.0]]


def test_reverse_path():
    fixture = PathFixture(LINE_10)
    fixture.point_mode.set_value(PointMode.NUMPOINTS)
    fixture.num_points.set_value(2)
    fixture.reverse_path.set_value(True)
    assert fixture.compute_points().points[0].tolist() == [10.0, 0.0, 0.0]


def test_metadata():
    fixture = PathFixture(LINE_10)
    meta = fixture.metadata()
    assert meta["pointMode"] == "Spacing"
    assert meta["modelUnits"] == "Inches"
    assert meta["densityUnits"] == "Meters"
    assert meta["reversePath"] == "false"
    assert meta["numPoints"] == "10"


def test_export_summary():
    fixture = PathFixture(LINE_10, label="Path 3")
    fixture.spacing.set_value(5)
    summary = fixture.export_summary()
    assert summary["label"] == "Path 3"
    assert summary["metadata"] == {"length": pytest.approx(10.0), "numPoints": 2}
    assert summary["coordinates"] == [
        {"x": 0.0, "y": 0.0, "z": 0.0},
        {"x": 5.0, "y": 0.0, "z": 0.0},
    ]


def test_dispose_stops_updates():
    fixture = PathFixture(LINE_100)
    fixture.dispose()
    fixture.spacing.set_value(50)
    assert fixture.size.value == 100
