"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...services.routing.distance_client import SERVICE_NAME, check_health

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/distance-service", status_code=status.HTTP_200_OK)
def health_distance_service() -> dict:
    return {"service": SERVICE_NAME, "configured": check_health()}
