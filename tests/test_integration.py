import math

import pytest
from fastapi.testclient import TestClient

from routefinder.main import create_app
from routefinder.services.routing import service as routing_service
from routefinder.services.routing.errors import InvalidCredentialsError
from routefinder.services.routing.models import DistanceMatrix


class DummyGoogle:
    rows = [[0, 10, 15], [10, 0, 20], [15, 20, 0]]
    error: Exception | None = None

    def __init__(self, api_key=None, mode=None):
        self.api_key = api_key

    def fetch_distance_matrix(self, locations):
        if self.error is not None:
            raise self.error
        return DistanceMatrix.from_rows(
            self.rows,
            durations=[[0, 60, 90], [60, 0, 120], [90, 120, 0]],
        )


@pytest.fixture
def api_client(monkeypatch: pytest.MonkeyPatch) -> TestClient:
    monkeypatch.setattr(routing_service, "GoogleDistanceMatrixClient", DummyGoogle)
    monkeypatch.setattr(DummyGoogle, "error", None)
    monkeypatch.setattr(DummyGoogle, "rows", [[0, 10, 15], [10, 0, 20], [15, 20, 0]])
    return TestClient(create_app())


def test_health(api_client: TestClient):
    response = api_client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_distance_service_health(api_client: TestClient, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(routing_service.settings, "google_maps_api_key", None)
    assert api_client.get("/api/health/distance-service").json() == {
        "service": "google-distance-matrix",
        "configured": False,
    }

    monkeypatch.setattr(routing_service.settings, "google_maps_api_key", "abc")
    assert api_client.get("/api/health/distance-service").json()["configured"] is True


def test_optimize_endpoint_returns_best_route(api_client: TestClient):
    response = api_client.post(
        "/api/routes/optimize", json={"locations": ["A", "B", "C"], "api_key": "key"}
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["locations"] == ["A", "B", "C"]
    assert payload["order"] == [0, 1, 2]
    assert payload["total_distance_m"] == 30
    assert payload["total_distance_km"] == 0.03
    assert payload["total_duration_s"] == 180
    assert [stop["sequence"] for stop in payload["stops"]] == [1, 2, 3]


def test_optimize_rejects_single_location(api_client: TestClient):
    response = api_client.post("/api/routes/optimize", json={"locations": ["A"]})

    assert response.status_code == 422


def test_optimize_rejects_blank_location(api_client: TestClient):
    response = api_client.post("/api/routes/optimize", json={"locations": ["A", "  "]})

    assert response.status_code == 422


def test_optimize_rejects_more_than_configured_maximum(api_client: TestClient, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(routing_service.settings, "max_locations", 3)

    response = api_client.post("/api/routes/optimize", json={"locations": ["A", "B", "C", "D"]})

    assert response.status_code == 422


def test_optimize_reports_infeasible_route(api_client: TestClient, monkeypatch: pytest.MonkeyPatch):
    inf = math.inf
    monkeypatch.setattr(DummyGoogle, "rows", [[0, inf, inf], [inf, 0, inf], [inf, inf, 0]])

    response = api_client.post("/api/routes/optimize", json={"locations": ["A", "B", "C"]})

    assert response.status_code == 400
    assert "finite" in response.json()["detail"]


def test_optimize_maps_service_errors_to_bad_gateway(api_client: TestClient, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(
        DummyGoogle, "error", InvalidCredentialsError("request denied", status="REQUEST_DENIED")
    )

    response = api_client.post("/api/routes/optimize", json={"locations": ["A", "B"]})

    assert response.status_code == 502
    assert "request denied" in response.json()["detail"]


def test_optimize_without_credentials_is_bad_request(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(routing_service.settings, "google_maps_api_key", None)
    client = TestClient(create_app())

    response = client.post("/api/routes/optimize", json={"locations": ["A", "B"]})

    assert response.status_code == 400
    assert "API key" in response.json()["detail"]
