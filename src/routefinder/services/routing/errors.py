"""Exceptions raised while resolving distances and searching for routes."""

from __future__ import annotations


class RouteFinderError(Exception):
    """Base class for all route finder failures."""


class LocationCountError(RouteFinderError, ValueError):
    """Too few or too many locations were supplied."""

    def __init__(self, count: int, min_locations: int, max_locations: int) -> None:
        self.count = count
        self.min_locations = min_locations
        self.max_locations = max_locations
        if count < min_locations:
            message = f"At least {min_locations} locations are required, got {count}."
        else:
            message = (
                f"At most {max_locations} locations are supported, got {count}. "
                "Exhaustive search grows factorially with the number of stops."
            )
        super().__init__(message)


class InvalidLocationError(RouteFinderError, ValueError):
    """A location identifier is blank or not a string."""


class MissingCredentialsError(RouteFinderError, ValueError):
    """No API key is available for the distance service."""


class DistanceServiceError(RouteFinderError):
    """The distance service answered with a non-OK status."""

    def __init__(self, message: str, status: str | None = None) -> None:
        super().__init__(message)
        self.status = status


class InvalidCredentialsError(DistanceServiceError):
    """The distance service rejected the API key."""


class MalformedResponseError(DistanceServiceError, ValueError):
    """The distance service response does not match the requested locations."""


class UnresolvableLegError(DistanceServiceError):
    """The distance service could not compute the distance for one leg."""

    def __init__(self, origin: str, destination: str, status: str) -> None:
        super().__init__(
            f"No distance available from '{origin}' to '{destination}' ({status}).",
            status=status,
        )
        self.origin = origin
        self.destination = destination


class MatrixSizeMismatchError(RouteFinderError, ValueError):
    """The distance matrix was built for a different set of locations."""


class InfeasibleRouteError(RouteFinderError):
    """No ordering of the locations has a finite total distance."""
