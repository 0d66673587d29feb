import pytest

from routefinder.services.routing import service as routing_service
from routefinder.services.routing.errors import (
    InvalidLocationError,
    LocationCountError,
    MissingCredentialsError,
)
from routefinder.services.routing.models import DistanceMatrix


class DummyProvider:
    def __init__(self, rows=None, error: Exception | None = None):
        self.rows = rows or [[0, 10, 15], [10, 0, 20], [15, 20, 0]]
        self.error = error
        self.calls: list[list[str]] = []

    def fetch_distance_matrix(self, locations):
        self.calls.append(list(locations))
        if self.error is not None:
            raise self.error
        return DistanceMatrix.from_rows(self.rows)


def test_find_best_route_uses_injected_provider():
    provider = DummyProvider()

    result = routing_service.find_best_route([" A ", "B", "C"], client=provider)

    assert provider.calls == [["A", "B", "C"]]
    assert result.locations == ("A", "B", "C")
    assert result.total_distance_m == 30


def test_find_best_route_builds_client_with_credentials(monkeypatch: pytest.MonkeyPatch):
    created = {}
    provider = DummyProvider()

    def fake_client(**kwargs):
        created.update(kwargs)
        return provider

    monkeypatch.setattr(routing_service, "GoogleDistanceMatrixClient", fake_client)

    result = routing_service.find_best_route(["A", "B", "C"], api_key="secret", mode="walking")

    assert created == {"api_key": "secret", "mode": "walking"}
    assert result.order == (0, 1, 2)


def test_provider_errors_propagate_unchanged():
    error = ConnectionError("service unreachable")
    provider = DummyProvider(error=error)

    with pytest.raises(ConnectionError) as excinfo:
        routing_service.find_best_route(["A", "B"], client=provider)

    assert excinfo.value is error


def test_single_location_never_reaches_provider():
    provider = DummyProvider()

    with pytest.raises(LocationCountError):
        routing_service.find_best_route(["A"], client=provider)

    assert provider.calls == []


def test_missing_credentials_fail_before_any_request(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(routing_service.settings, "google_maps_api_key", None)

    with pytest.raises(MissingCredentialsError):
        routing_service.find_best_route(["A", "B"])


def test_validate_locations_strips_and_bounds():
    assert routing_service.validate_locations(["  Paris ", "Lyon"]) == ["Paris", "Lyon"]

    with pytest.raises(InvalidLocationError):
        routing_service.validate_locations(["Paris", ""])
    with pytest.raises(LocationCountError):
        routing_service.validate_locations([f"City {i}" for i in range(11)])
    with pytest.raises(LocationCountError):
        routing_service.validate_locations(["A", "B", "C"], max_locations=2)
