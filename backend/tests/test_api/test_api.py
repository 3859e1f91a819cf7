"""Tests for API endpoints."""

from __future__ import annotations

import numpy as np
import pytest
from fastapi.testclient import TestClient

from svgfixture import __version__
from svgfixture.dependencies import get_engine_config
from svgfixture.engine.config import EngineConfig
from svgfixture.main import app
from tests.conftest import BROKEN_SVG, LINE_10, TWO_PATH_SVG


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == __version__
    assert data["max_points"] > 0


def test_fixture_num_points():
    response = client.post(
        "/api/fixture",
        json={"path_data": LINE_10, "placement": {"mode": "NumPoints", "num_points": 3}},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["size"] == 3
    np.testing.assert_allclose(data["points"], [[0, 0, 0], [5, 0, 0], [10, 0, 0]], atol=1e-9)
    assert data["total_length"] == pytest.approx(10.0)
    assert data["diagnostics"] == []


def test_fixture_spacing_in_feet():
    response = client.post(
        "/api/fixture",
        json={
            "path_data": "M0 0 L50 0",
            "placement": {"mode": "Spacing", "spacing": 1, "spacing_units": "ft"},
        },
    )
    assert response.status_code == 200
    assert response.json()["size"] == 4


def test_fixture_units_and_transform():
    translate = [[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 7], [0, 0, 0, 1]]
    response = client.post(
        "/api/fixture",
        json={
            "path_data": LINE_10,
            "path_units": "Centimeters",
            "model_units": "mm",
            "placement": {"mode": "Direct"},
            "transform": translate,
        },
    )
    assert response.status_code == 200
    points = response.json()["points"]
    assert points[-1] == pytest.approx([100.0, 0.0, 7.0])


def test_fixture_reports_diagnostics():
    response = client.post(
        "/api/fixture",
        json={"path_data": "M0,0 L10,abc 20,0", "placement": {"mode": "Direct"}},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["size"] == 2
    assert data["diagnostics"][0]["kind"] == "malformed_token"
    assert data["diagnostics"][0]["token"] == "abc"


def test_fixture_bad_transform():
    response = client.post(
        "/api/fixture",
        json={"path_data": LINE_10, "transform": [[1, 0], [0, 1]]},
    )
    assert response.status_code == 422


@pytest.mark.parametrize(
    "placement",
    [
        {"mode": "Sideways"},
        {"mode": "NumPoints", "num_points": 0},
        {"spacing": -1},
        {"spacing_units": "furlongs"},
    ],
)
def test_fixture_invalid_placement(placement):
    response = client.post("/api/fixture", json={"path_data": LINE_10, "placement": placement})
    assert response.status_code == 422


def test_fixture_respects_engine_limits():
    app.dependency_overrides[get_engine_config] = lambda: EngineConfig(max_points=8)
    try:
        response = client.post(
            "/api/fixture",
            json={"path_data": "M0 0 L100 0", "placement": {"mode": "Spacing", "spacing": 1}},
        )
    finally:
        app.dependency_overrides.clear()
    assert response.json()["size"] == 8


def test_import_svg():
    response = client.post(
        "/api/import",
        json={
            "svg": TWO_PATH_SVG,
            "file_name": "shapes.svg",
            "placement": {"mode": "NumPoints", "num_points": 4},
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["file_name"] == "shapes.svg"
    assert data["num_paths"] == 2
    assert data["total_points"] == 8
    assert [f["label"] for f in data["fixtures"]] == ["Path 0", "Path 1"]
    assert data["fixtures"][0]["points"][-1] == pytest.approx([100.0, 0.0, 0.0])


def test_import_density_uses_model_units():
    response = client.post(
        "/api/import",
        json={
            "svg": TWO_PATH_SVG,
            "placement": {"mode": "Density", "density": 0.5},
        },
    )
    assert response.status_code == 200
    sizes = [f["size"] for f in response.json()["fixtures"]]
    # One point every 2 in
    assert sizes == [50, 15]


def test_import_broken_svg():
    response = client.post("/api/import", json={"svg": BROKEN_SVG})
    assert response.status_code == 400
    assert "Could not parse SVG" in response.json()["detail"]


def test_fixture_num_points_above_the_cap_spans_the_path():
    app.dependency_overrides[get_engine_config] = lambda: EngineConfig(max_points=8)
    try:
        response = client.post(
            "/api/fixture",
            json={"path_data": LINE_10, "placement": {"mode": "NumPoints", "num_points": 100}},
        )
    finally:
        app.dependency_overrides.clear()
    data = response.json()
    assert data["size"] == 8
    assert data["points"][0] == pytest.approx([0.0, 0.0, 0.0])
    assert data["points"][-1] == pytest.approx([10.0, 0.0, 0.0])


@pytest.mark.parametrize(
    "placement, field",
    [
        ({"spacing": 0}, "spacing"),
        ({"spacing": 5000}, "spacing"),
        ({"density": 0.01}, "density"),
        ({"pad_end": 20000}, "pad_end"),
    ],
)
def test_import_rejects_values_outside_fixture_ranges(placement, field):
    response = client.post("/api/import", json={"svg": TWO_PATH_SVG, "placement": placement})
    assert response.status_code == 422
    assert f"placement.{field}" in response.json()["detail"]


def test_fixture_accepts_zero_spacing():
    response = client.post(
        "/api/fixture",
        json={"path_data": LINE_10, "placement": {"mode": "Spacing", "spacing": 0}},
    )
    assert response.status_code == 200
    assert response.json()["size"] == 0
