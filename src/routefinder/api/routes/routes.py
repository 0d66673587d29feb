"""Routing endpoints."""

from __future__ import annotations

import logging

import httpx
from fastapi import APIRouter, HTTPException, status

from ...schemas.routing import RouteRequest, RouteResponse
from ...services.outputs.routing_formatter import route_result_to_json
from ...services.routing.errors import DistanceServiceError, InfeasibleRouteError
from ...services.routing.service import find_best_route

router = APIRouter(prefix="/routes", tags=["routes"])

logger = logging.getLogger(__name__)


@router.post("/optimize", response_model=RouteResponse, status_code=status.HTTP_200_OK)
def optimize(payload: RouteRequest) -> RouteResponse:
    try:
        result = find_best_route(payload.locations, api_key=payload.api_key)
    except (DistanceServiceError, ConnectionError, httpx.HTTPError) as exc:
        logger.warning(f"Distance lookup failed: {exc}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Distance service error: {exc}",
        ) from exc
    except (ValueError, InfeasibleRouteError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error optimizing route: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to optimize route: {exc}",
        ) from exc

    return RouteResponse(**route_result_to_json(result))
