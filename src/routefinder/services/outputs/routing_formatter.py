"""Serializers for routing outputs."""

from __future__ import annotations

import csv
import io
import math
from dataclasses import asdict

from ..routing.models import RouteResult


def _finite_or_none(value: float | None) -> float | None:
    if value is None or not math.isfinite(value):
        return None
    return value


def route_result_to_text(result: RouteResult) -> str:
    lines = ["Best Route:"]
    lines.extend(f"{stop.sequence}: {stop.location}" for stop in result.stops)
    lines.append("")
    lines.append(f"Total Distance: {result.total_distance_km:.2f} km")
    return "\n".join(lines)


def route_result_to_json(result: RouteResult) -> dict:
    return {
        "locations": list(result.locations),
        "order": list(result.order),
        "total_distance_m": result.total_distance_m,
        "total_distance_km": round(result.total_distance_km, 3),
        "total_duration_s": _finite_or_none(result.total_duration_s),
        "stops": [
            {**asdict(stop), "duration_from_prev_s": _finite_or_none(stop.duration_from_prev_s)}
            for stop in result.stops
        ],
    }


def route_result_to_csv(result: RouteResult) -> str:
    buffer = io.StringIO()
    fieldnames = [
        "sequence",
        "location",
        "index",
        "distance_from_prev_m",
        "duration_from_prev_s",
        "total_distance_m",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames, lineterminator="\n")
    writer.writeheader()
    for stop in result.stops:
        writer.writerow(
            {
                "sequence": stop.sequence,
                "location": stop.location,
                "index": stop.index,
                "distance_from_prev_m": stop.distance_from_prev_m,
                "duration_from_prev_s": "" if stop.duration_from_prev_s is None else stop.duration_from_prev_s,
                "total_distance_m": result.total_distance_m,
            }
        )
    return buffer.getvalue()
