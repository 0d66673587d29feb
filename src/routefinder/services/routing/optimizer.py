"""Exhaustive shortest open-path search over a distance matrix.

Every ordering of the locations is scored as the sum of its consecutive legs
(no return to the start). Orderings are enumerated with the first index fixed
in ascending order and the remainder permuted the same way, i.e.
lexicographically, and the best ordering is only replaced on strict
improvement. When several orderings tie, the first one enumerated wins.

Cost grows as O(n!), so the number of locations is capped by
``settings.max_locations`` (10, or 3,628,800 orderings). There is no
heuristic fallback for larger inputs; they are rejected.
"""

from __future__ import annotations

import itertools
import logging
import math
import time
from typing import Iterator, Sequence

from ...config import settings
from .errors import InfeasibleRouteError, LocationCountError, MatrixSizeMismatchError
from .models import DistanceMatrix, RouteResult, RouteStop

logger = logging.getLogger(__name__)


def iter_permutations(count: int) -> Iterator[tuple[int, ...]]:
    """Yield every ordering of ``range(count)`` in fix-first-index order."""
    return itertools.permutations(range(count))


def route_distance(matrix: DistanceMatrix, order: Sequence[int]) -> float:
    """Total distance of an open path; ``math.inf`` if any leg is unreachable."""
    return sum(matrix.distance(a, b) for a, b in zip(order, order[1:]))


def _bounded_distance(distances: tuple[tuple[float, ...], ...], order: tuple[int, ...], bound: float) -> float:
    # Stops as soon as the partial sum can no longer beat ``bound``.
    total = 0.0
    previous = order[0]
    for current in order[1:]:
        total += distances[previous][current]
        if total >= bound:
            return math.inf
        previous = current
    return total


def _build_result(matrix: DistanceMatrix, order: tuple[int, ...], locations: Sequence[str], total: float) -> RouteResult:
    stops: list[RouteStop] = []
    total_duration: float | None = 0.0 if matrix.durations is not None else None
    previous: int | None = None
    for sequence, index in enumerate(order, start=1):
        leg_distance = 0.0
        leg_duration: float | None = 0.0 if total_duration is not None else None
        if previous is not None:
            leg_distance = matrix.distance(previous, index)
            leg_duration = matrix.duration(previous, index)
            if total_duration is not None and leg_duration is not None:
                total_duration += leg_duration
        stops.append(
            RouteStop(
                location=locations[index],
                index=index,
                sequence=sequence,
                distance_from_prev_m=leg_distance,
                duration_from_prev_s=leg_duration,
            )
        )
        previous = index

    return RouteResult(
        order=order,
        locations=tuple(locations[index] for index in order),
        total_distance_m=total,
        stops=tuple(stops),
        total_duration_s=total_duration,
    )


def find_shortest_route(
    matrix: DistanceMatrix,
    locations: Sequence[str],
    *,
    max_locations: int | None = None,
) -> RouteResult:
    """Return the ordering of ``locations`` with the minimal total distance.

    Args:
        matrix: Distance matrix built for ``locations`` in the same order.
        locations: Location names; only used to label the result.
        max_locations: Upper bound on the number of locations (defaults to settings).

    Raises:
        MatrixSizeMismatchError: ``matrix`` and ``locations`` differ in size.
        LocationCountError: fewer than ``settings.min_locations`` or more than ``max_locations`` locations.
        InfeasibleRouteError: every ordering contains an unreachable leg.
    """
    if matrix.size != len(locations):
        raise MatrixSizeMismatchError(
            f"Distance matrix has {matrix.size} rows but {len(locations)} locations were given."
        )

    limit = max_locations if max_locations is not None else settings.max_locations
    count = len(locations)
    if count < settings.min_locations or count > limit:
        raise LocationCountError(count, settings.min_locations, limit)

    start_time = time.perf_counter()
    distances = matrix.distances
    best_order: tuple[int, ...] | None = None
    shortest = math.inf
    evaluated = 0

    for order in iter_permutations(count):
        evaluated += 1
        total = _bounded_distance(distances, order, shortest)
        if total < shortest:
            shortest = total
            best_order = order

    if best_order is None:
        raise InfeasibleRouteError(
            f"No route through all {count} locations has a finite total distance."
        )

    logger.debug(
        f"Evaluated {evaluated} orderings of {count} locations in "
        f"{time.perf_counter() - start_time:.3f}s (best {shortest:.0f} m)"
    )
    return _build_result(matrix, best_order, locations, shortest)
