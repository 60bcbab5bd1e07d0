"""Tests for API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from wigglyborder.main import app


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == "0.1.0"


def test_generate_defaults():
    response = client.post("/api/generate", json={})
    assert response.status_code == 200
    data = response.json()
    # 400x250 default box → 480x300 space
    assert data["view_box_width"] == pytest.approx(480.0)
    assert data["view_box_height"] == 300.0
    assert data["path_data"].startswith("M 8 8 C ")
    assert data["path_data"].endswith(" Z")
    assert data["point_count"] == 2 * data["horizontal_segments"] + 2 * data["vertical_segments"]


def test_generate_reference_scenario():
    response = client.post("/api/generate", json={
        "amplitude": 4,
        "segment_size": 25,
        "stroke_inset": 4,
        "target_width": 400,
        "target_height": 300,
    })
    assert response.status_code == 200
    data = response.json()
    assert data["view_box_width"] == pytest.approx(400.0)
    assert data["horizontal_segments"] == 15
    assert data["vertical_segments"] == 11
    xmin, ymin, xmax, ymax = data["bounds"]
    assert 8.0 - 1.25 * 4 <= xmin <= 8.0
    assert 392.0 <= xmax <= 392.0 + 1.25 * 4


def test_generate_is_deterministic():
    body = {"amplitude": 6, "segment_size": 18, "target_width": 800, "target_height": 200}
    first = client.post("/api/generate", json=body).json()
    second = client.post("/api/generate", json=body).json()
    assert first == second


@pytest.mark.parametrize("body", [
    {"target_width": 0},
    {"target_height": -10},
    {"segment_size": 0},
    {"amplitude": -1},
    {"stroke_inset": -2},
])
def test_generate_rejects_invalid_fields(body):
    response = client.post("/api/generate", json=body)
    assert response.status_code == 422


def test_generate_rejects_oversized_padding():
    response = client.post("/api/generate", json={"amplitude": 200, "stroke_inset": 10})
    assert response.status_code == 422
    assert "padding" in response.json()["detail"]


def test_export_svg():
    response = client.post("/api/export/svg", json={
        "background_color": "112233",
        "border_color": "#445566",
        "border_width": 3,
    })
    assert response.status_code == 200
    data = response.json()
    assert data["format"] == "svg"
    assert data["code"].startswith("<svg")
    assert 'fill="#112233"' in data["code"]
    assert 'stroke="#445566"' in data["code"]
    assert 'stroke-width="3"' in data["code"]
    assert 'viewBox="0 0 480 300"' in data["code"]


def test_export_react():
    response = client.post("/api/export/react", json={})
    assert response.status_code == 200
    data = response.json()
    assert data["format"] == "react"
    assert "BoxWithWigglyBorder" in data["code"]
    assert 'fill="#FFF8EA"' in data["code"]


def test_export_uses_border_width_as_inset():
    svg = client.post("/api/export/svg", json={"amplitude": 4, "border_width": 6}).json()["code"]
    assert 'd="M 10 10 C ' in svg


def test_export_rejects_bad_color():
    response = client.post("/api/export/svg", json={"border_color": "not-a-color"})
    assert response.status_code == 422


def test_generate_rejects_overflowing_aspect_ratio():
    response = client.post("/api/generate", json={"target_width": 1e308, "target_height": 1e-10})
    assert response.status_code == 422
    assert "finite" in response.json()["detail"]


def test_generate_rejects_too_many_segments():
    response = client.post("/api/generate", json={"segment_size": 1e-300})
    assert response.status_code == 422
    assert "segments" in response.json()["detail"]


def test_export_rejects_too_many_segments():
    response = client.post("/api/export/svg", json={"segment_size": 1e-6})
    assert response.status_code == 422
