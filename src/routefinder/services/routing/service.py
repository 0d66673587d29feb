"""Routing orchestration service."""

from __future__ import annotations

import logging
from typing import Protocol, Sequence

from ...config import settings
from .distance_client import GoogleDistanceMatrixClient
from .errors import InvalidLocationError, LocationCountError
from .models import DistanceMatrix, RouteResult
from .optimizer import find_shortest_route

logger = logging.getLogger(__name__)


class DistanceProvider(Protocol):
    def fetch_distance_matrix(self, locations: Sequence[str]) -> DistanceMatrix:
        ...


def validate_locations(
    locations: Sequence[str],
    *,
    min_locations: int | None = None,
    max_locations: int | None = None,
) -> list[str]:
    """Strip location names and enforce the supported location count."""
    lower = min_locations if min_locations is not None else settings.min_locations
    upper = max_locations if max_locations is not None else settings.max_locations

    cleaned: list[str] = []
    for position, location in enumerate(locations, start=1):
        if not isinstance(location, str) or not location.strip():
            raise InvalidLocationError(f"Location {position} is empty.")
        cleaned.append(location.strip())

    if len(cleaned) < lower or len(cleaned) > upper:
        raise LocationCountError(len(cleaned), lower, upper)
    return cleaned


def find_best_route(
    locations: Sequence[str],
    *,
    api_key: str | None = None,
    mode: str | None = None,
    client: DistanceProvider | None = None,
) -> RouteResult:
    """Resolve distances for ``locations`` and return the shortest open route.

    A GoogleDistanceMatrixClient is created with ``api_key`` and ``mode``
    unless ``client`` is given. Errors from the distance lookup propagate unchanged.
    """
    cleaned = validate_locations(locations)
    provider = client if client is not None else GoogleDistanceMatrixClient(api_key=api_key, mode=mode)

    matrix = provider.fetch_distance_matrix(cleaned)
    result = find_shortest_route(matrix, cleaned)

    logger.info(
        f"Best route through {len(cleaned)} locations: {result.total_distance_km:.2f} km"
    )
    return result
