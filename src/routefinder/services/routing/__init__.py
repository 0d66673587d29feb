"""Distance lookup and shortest route search."""

from .distance_client import GoogleDistanceMatrixClient
from .errors import (
    DistanceServiceError,
    InfeasibleRouteError,
    InvalidCredentialsError,
    InvalidLocationError,
    LocationCountError,
    MalformedResponseError,
    MatrixSizeMismatchError,
    MissingCredentialsError,
    RouteFinderError,
    UnresolvableLegError,
)
from .models import DistanceMatrix, RouteResult, RouteStop
from .optimizer import find_shortest_route
from .service import find_best_route

__all__ = [
    "DistanceMatrix",
    "DistanceServiceError",
    "GoogleDistanceMatrixClient",
    "InfeasibleRouteError",
    "InvalidCredentialsError",
    "InvalidLocationError",
    "LocationCountError",
    "MalformedResponseError",
    "MatrixSizeMismatchError",
    "MissingCredentialsError",
    "RouteFinderError",
    "RouteResult",
    "RouteStop",
    "UnresolvableLegError",
    "find_best_route",
    "find_shortest_route",
]
