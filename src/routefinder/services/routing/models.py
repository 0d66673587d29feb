"""Routing domain models."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence


def _as_cell(value: float | None) -> float:
    if value is None:
        return math.inf
    cell = float(value)
    if math.isnan(cell):
        return math.inf
    if cell < 0:
        raise ValueError(f"Distance matrix cells must be non-negative, got {value}.")
    return cell


def _as_grid(rows: Sequence[Sequence[float | None]], name: str) -> tuple[tuple[float, ...], ...]:
    grid = tuple(tuple(_as_cell(value) for value in row) for row in rows)
    size = len(grid)
    for index, row in enumerate(grid):
        if len(row) != size:
            raise ValueError(
                f"{name} matrix must be square: row {index} has {len(row)} cells, expected {size}."
            )
    return grid


@dataclass(frozen=True, slots=True)
class DistanceMatrix:
    """Directed travel distances in meters between locations, in input order.

    Unreachable legs are stored as ``math.inf``. ``durations`` holds travel
    times in seconds when the provider reports them.
    """

    distances: tuple[tuple[float, ...], ...]
    durations: Optional[tuple[tuple[float, ...], ...]] = None
    resolved_addresses: Optional[tuple[str, ...]] = None

    def __post_init__(self) -> None:
        distances = _as_grid(self.distances, "Distance")
        duration_grid = None
        if self.durations is not None:
            duration_grid = _as_grid(self.durations, "Duration")
            if len(duration_grid) != len(distances):
                raise ValueError(
                    f"Matrix size mismatch: distances={len(distances)}, durations={len(duration_grid)}"
                )
        object.__setattr__(self, "distances", distances)
        object.__setattr__(self, "durations", duration_grid)
        if self.resolved_addresses is not None:
            object.__setattr__(self, "resolved_addresses", tuple(self.resolved_addresses))

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[float | None]],
        durations: Sequence[Sequence[float | None]] | None = None,
        resolved_addresses: Sequence[str] | None = None,
    ) -> "DistanceMatrix":
        return cls(distances=rows, durations=durations, resolved_addresses=resolved_addresses)

    @property
    def size(self) -> int:
        return len(self.distances)

    def distance(self, origin: int, destination: int) -> float:
        return self.distances[origin][destination]

    def duration(self, origin: int, destination: int) -> Optional[float]:
        if self.durations is None:
            return None
        return self.durations[origin][destination]


@dataclass(frozen=True, slots=True)
class RouteStop:
    location: str
    index: int
    sequence: int
    distance_from_prev_m: float
    duration_from_prev_s: Optional[float] = None


@dataclass(frozen=True, slots=True)
class RouteResult:
    order: tuple[int, ...]
    locations: tuple[str, ...]
    total_distance_m: float
    stops: tuple[RouteStop, ...]
    total_duration_s: Optional[float] = None

    @property
    def total_distance_km(self) -> float:
        return self.total_distance_m / 1000.0
