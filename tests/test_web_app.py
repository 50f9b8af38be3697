"""Mini README: Tests for the FastAPI route and simulation endpoints.

Uses FastAPI's ``TestClient`` against an application bound to an in-memory
route so no asset files or network ports are involved.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from skyroute.configuration import SkyrouteSettings
from skyroute.interface import create_application
from skyroute.route import FlightRoute


@pytest.fixture()
def route() -> FlightRoute:
    return FlightRoute.from_points([(0.0, 0.0), (0.02, 0.0), (0.04, 0.01)], [0.0, 300.0, 900.0])


@pytest.fixture()
def client(route: FlightRoute) -> TestClient:
    return TestClient(create_application(settings=SkyrouteSettings(), route=route))


def test_route_endpoint_returns_feature(client: TestClient, route: FlightRoute) -> None:
    response = client.get("/route")
    assert response.status_code == 200
    payload = response.json()
    assert payload["geometry"]["type"] == "LineString"
    assert payload["properties"]["elevation"] == [0.0, 300.0, 900.0]
    assert payload["properties"]["total_length_m"] == pytest.approx(route.total_length)


def test_sample_endpoint(client: TestClient, route: FlightRoute) -> None:
    response = client.get("/route/sample", params={"distance": route.total_length * 10})
    assert response.status_code == 200
    payload = response.json()
    assert payload["position"] == [0.04, 0.01]
    assert payload["altitude"] == 900.0
    assert payload["distance"] == pytest.approx(route.total_length)


def test_simulate_endpoint(client: TestClient) -> None:
    response = client.get("/simulate", params={"frames": 5, "camera_mode": "fallback"})
    assert response.status_code == 200
    payload = response.json()
    assert payload["camera_mode"] == "fallback"
    assert payload["initial"]["properties"]["model-id"] == "plane"
    assert len(payload["frames"]) == 5
    assert [frame["index"] for frame in payload["frames"]] == [1, 2, 3, 4, 5]
    assert all(frame["camera"]["mode"] == "fallback" for frame in payload["frames"])


@pytest.mark.parametrize(
    "params",
    [
        {"frames": 0},
        {"frames": 5, "camera_mode": "orbit"},
        {"frames": 5, "end_of_route": "bounce"},
        {"frames": 5, "frame_interval_ms": -1},
        {"frames": 5, "frame_interval_ms": "nan"},
        {"frames": 5, "frame_interval_ms": "inf"},
    ],
)
def test_simulate_rejects_bad_input(client: TestClient, params: dict) -> None:
    assert client.get("/simulate", params=params).status_code == 400


@pytest.mark.parametrize("distance", ["nan", "inf", "-inf"])
def test_sample_rejects_non_finite_distance(client: TestClient, distance: str) -> None:
    assert client.get("/route/sample", params={"distance": distance}).status_code == 400


def test_empty_route_is_unavailable() -> None:
    client = TestClient(create_application(settings=SkyrouteSettings(), route=FlightRoute.empty()))
    assert client.get("/route").status_code == 503
    assert client.get("/route/sample").status_code == 503
    assert client.get("/simulate").status_code == 503
