"""Tests for API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from roughsketch.main import app
from tests.conftest import HEART_PATH, RECT


client = TestClient(app)

RECT_SHAPE = {"kind": "rectangle", "x": RECT[0], "y": RECT[1], "width": RECT[2], "height": RECT[3]}


@pytest.fixture(autouse=True)
def clear_cache():
    client.post("/api/cache/clear")


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "scribble" in data["fill_styles"]
    assert "cross-hatch" in data["fill_styles"]


def test_generate_rectangle():
    response = client.post("/api/generate", json={"shape": RECT_SHAPE, "width": 200, "height": 200})
    assert response.status_code == 200
    data = response.json()
    assert len(data["layers"]) == 1
    layer = data["layers"][0]
    assert layer["shape"] == "rectangle"
    kinds = [s["kind"] for s in layer["sets"]]
    assert kinds == ["fillSketch", "path"]
    assert layer["sets"][1]["ops"][0]["op"] == "move"
    assert data["svg"].startswith("<?xml")
    assert data["cache"]["misses"] >= 1


def test_generate_with_options():
    body = {
        "shape": {"kind": "path", "d": HEART_PATH},
        "options": {"fill": "#ff0000", "fill_style": "solid", "roughness": 0.5},
    }
    data = client.post("/api/generate", json=body).json()
    assert data["layers"][0]["sets"][0]["kind"] == "path2DFill"
    assert 'fill="#ff0000"' in data["svg"]


def test_generate_twice_hits_cache():
    client.post("/api/generate", json={"shape": RECT_SHAPE})
    stats = client.get("/api/cache/stats").json()
    client.post("/api/generate", json={"shape": RECT_SHAPE})
    again = client.get("/api/cache/stats").json()
    assert again["hits"] > stats["hits"]
    assert again["entries"] == stats["entries"]


def test_generate_missing_params_gives_no_layers():
    response = client.post("/api/generate", json={"shape": {"kind": "circle", "x": 10}})
    assert response.status_code == 200
    data = response.json()
    assert data["layers"] == []
    assert data["svg"] == ""


def test_generate_layers_match_svg_with_spacing_pattern():
    body = {"shape": RECT_SHAPE, "options": {"fill": "#00ff00", "fill_spacing_pattern": [1, 3]}}
    data = client.post("/api/generate", json=body).json()
    assert len(data["layers"]) == 2
    total_sets = sum(len(layer["sets"]) for layer in data["layers"])
    assert total_sets == 4
    assert data["svg"].count("<path ") == total_sets
    first, second = (layer["sets"][0]["ops"] for layer in data["layers"])
    assert len(first) > len(second)


def test_unknown_shape_kind_rejected():
    response = client.post("/api/generate", json={"shape": {"kind": "hexagon"}})
    assert response.status_code == 422


def test_animate_frames():
    body = {"shape": RECT_SHAPE, "options": {"fill": "#000"}, "steps": 3, "speed": "fast", "seed": 7}
    response = client.post("/api/animate", json=body)
    assert response.status_code == 200
    data = response.json()
    assert data["steps"] == 3
    assert data["duration"] == 0.1
    assert len(data["frames"]) == 3
    assert len(data["frames"][0]) == 2
    assert data["frames"][0] != data["frames"][1]


def test_animate_nothing_to_draw():
    data = client.post("/api/animate", json={"shape": {"kind": "polygon", "points": []}}).json()
    assert data["frames"] == []
    assert data["steps"] == 4


def test_cache_clear():
    client.post("/api/generate", json={"shape": RECT_SHAPE})
    data = client.post("/api/cache/clear").json()
    assert data == {"entries": 0, "hits": 0, "misses": 0, "hit_rate": 0.0}
