"""Routing request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..config import settings


class RouteRequest(BaseModel):
    locations: List[str] = Field(
        ...,
        description="Addresses or place names to visit, within the configured location bounds.",
    )
    api_key: Optional[str] = Field(
        default=None,
        description="Google Maps API key. Falls back to the server configuration when omitted.",
    )

    @field_validator("locations")
    @classmethod
    def _check_locations(cls, value: List[str]) -> List[str]:
        if len(value) < settings.min_locations or len(value) > settings.max_locations:
            raise ValueError(
                f"Between {settings.min_locations} and {settings.max_locations} locations are required, "
                f"got {len(value)}."
            )
        cleaned = [item.strip() for item in value]
        if any(not item for item in cleaned):
            raise ValueError("Locations must not be blank.")
        return cleaned


class RouteStopModel(BaseModel):
    location: str
    index: int
    sequence: int
    distance_from_prev_m: float
    duration_from_prev_s: Optional[float] = None


class RouteResponse(BaseModel):
    locations: List[str]
    order: List[int]
    total_distance_m: float
    total_distance_km: float
    total_duration_s: Optional[float] = None
    stops: List[RouteStopModel]
