"""HTTP client for the Google Maps Distance Matrix service."""

from __future__ import annotations

import logging
import time
from typing import Any, Sequence

import httpx

from ...config import settings
from .errors import (
    DistanceServiceError,
    InvalidCredentialsError,
    InvalidLocationError,
    LocationCountError,
    MalformedResponseError,
    MissingCredentialsError,
    UnresolvableLegError,
)
from .models import DistanceMatrix

SERVICE_NAME = "google-distance-matrix"

logger = logging.getLogger(__name__)


class GoogleDistanceMatrixClient:
    """Resolves pairwise travel distances with a single Distance Matrix request.

    The client holds its own credential and HTTP client, so independent
    instances never share configuration. Requests are not retried.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        mode: str | None = None,
        timeout: float | None = None,
        http_client: httpx.Client | None = None,
        max_locations: int | None = None,
        min_locations: int | None = None,
    ) -> None:
        api_key = api_key if api_key is not None else settings.google_maps_api_key
        if not api_key or not api_key.strip():
            raise MissingCredentialsError("Google Maps API key is not configured.")
        self.api_key = api_key.strip()
        self.base_url = (base_url or settings.google_maps_base_url).rstrip("/")
        self.mode = mode or settings.travel_mode
        self.timeout = timeout if timeout is not None else settings.request_timeout_seconds
        self.max_locations = max_locations if max_locations is not None else settings.max_locations
        self.min_locations = min_locations if min_locations is not None else settings.min_locations
        self._http_client = http_client

    def _get_client(self) -> httpx.Client:
        if self._http_client is not None:
            return self._http_client
        return httpx.Client(timeout=httpx.Timeout(self.timeout, connect=10.0))

    def _validate(self, locations: Sequence[str]) -> list[str]:
        if len(locations) < self.min_locations or len(locations) > self.max_locations:
            raise LocationCountError(len(locations), self.min_locations, self.max_locations)
        cleaned = []
        for position, location in enumerate(locations, start=1):
            if not isinstance(location, str) or not location.strip():
                raise InvalidLocationError(f"Location {position} is empty.")
            cleaned.append(location.strip())
        return cleaned

    def _request(self, locations: Sequence[str]) -> dict[str, Any]:
        joined = "|".join(locations)
        params = {
            "origins": joined,
            "destinations": joined,
            "mode": self.mode,
            "units": "metric",
            "key": self.api_key,
        }
        url = f"{self.base_url}/distancematrix/json"

        client = self._get_client()
        try:
            response = client.get(url, params=params)
            response.raise_for_status()
            try:
                return response.json()
            except ValueError as exc:
                raise MalformedResponseError("Distance Matrix response is not valid JSON.") from exc
        except httpx.ConnectError as exc:
            raise ConnectionError(
                f"Failed to connect to the Distance Matrix service at {self.base_url}: {exc}"
            ) from exc
        finally:
            if client is not self._http_client:
                client.close()

    def fetch_distance_matrix(self, locations: Sequence[str]) -> DistanceMatrix:
        """Get the directed distance matrix between ``locations``.

        Args:
            locations: Between ``min_locations`` and ``max_locations`` addresses or place names.

        Returns:
            DistanceMatrix whose row i, column j is the driving distance in meters
            from ``locations[i]`` to ``locations[j]``.
        """
        locations = self._validate(locations)
        start_time = time.time()
        logger.info(f"Requesting {len(locations)}x{len(locations)} distance matrix ({self.mode})")

        data = self._request(locations)
        matrix = parse_distance_matrix(data, locations)

        logger.debug(f"Distance matrix received in {time.time() - start_time:.2f}s")
        return matrix


def parse_distance_matrix(data: dict[str, Any], locations: Sequence[str]) -> DistanceMatrix:
    """Convert a Distance Matrix JSON payload into a DistanceMatrix.

    Raises a DistanceServiceError subclass for non-OK statuses, mismatched
    dimensions, and legs the service could not compute.
    """
    if not isinstance(data, dict):
        raise MalformedResponseError("Distance Matrix response is not a JSON object.")

    status = data.get("status")
    if status != "OK":
        detail = data.get("error_message") or "no details"
        if status == "REQUEST_DENIED":
            raise InvalidCredentialsError(
                f"Distance Matrix request denied: {detail}", status=status
            )
        raise DistanceServiceError(f"Distance Matrix request failed ({status}): {detail}", status=status)

    rows = data.get("rows")
    count = len(locations)
    if not isinstance(rows, list) or len(rows) != count:
        received = len(rows) if isinstance(rows, list) else 0
        raise MalformedResponseError(
            f"Distance Matrix returned {received} rows for {count} locations."
        )

    distances: list[list[float]] = []
    durations: list[list[float]] = []
    for i, row in enumerate(rows):
        elements = row.get("elements") if isinstance(row, dict) else None
        if not isinstance(elements, list) or len(elements) != count:
            received = len(elements) if isinstance(elements, list) else 0
            raise MalformedResponseError(
                f"Distance Matrix row {i} has {received} elements for {count} locations."
            )
        distance_row: list[float] = []
        duration_row: list[float] = []
        for j, element in enumerate(elements):
            element_status = element.get("status") if isinstance(element, dict) else None
            if element_status != "OK":
                raise UnresolvableLegError(locations[i], locations[j], str(element_status))
            try:
                distance_row.append(float(element["distance"]["value"]))
                duration_row.append(float(element["duration"]["value"]))
            except (KeyError, TypeError, ValueError) as exc:
                raise MalformedResponseError(
                    f"Distance Matrix element [{i}][{j}] is missing distance or duration."
                ) from exc
        distances.append(distance_row)
        durations.append(duration_row)

    addresses = data.get("origin_addresses")
    if not isinstance(addresses, list) or len(addresses) != count:
        addresses = None

    try:
        return DistanceMatrix.from_rows(distances, durations=durations, resolved_addresses=addresses)
    except ValueError as exc:
        raise MalformedResponseError(str(exc)) from exc


def check_health(api_key: str | None = None) -> bool:
    """Report whether a Distance Matrix credential is configured.

    No request is made, so health probes never spend API quota.
    """
    key = api_key if api_key is not None else settings.google_maps_api_key
    return bool(key and key.strip())
