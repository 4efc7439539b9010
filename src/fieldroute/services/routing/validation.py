"""Fail-fast checks applied before a request enters the optimizer."""

from __future__ import annotations

import math

from ...models.domain import Location, RouteOptimizationParams
from .errors import InvalidInputError
from .priority import PRIORITY_SCORES
from .time_windows import parse_clock


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _validate_coordinates(location: Location) -> None:
    lat, lon = location.latitude, location.longitude
    if not _is_number(lat) or not _is_number(lon):
        raise InvalidInputError(f"Location '{location.id}' has non-numeric coordinates.")
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise InvalidInputError(f"Location '{location.id}' has non-finite coordinates ({lat}, {lon}).")
    if abs(lat) > 90:
        raise InvalidInputError(f"Location '{location.id}' latitude {lat} is outside [-90, 90].")
    if abs(lon) > 180:
        raise InvalidInputError(f"Location '{location.id}' longitude {lon} is outside [-180, 180].")


def validate_location(location: Location) -> None:
    _validate_coordinates(location)
    if location.priority is not None and location.priority not in PRIORITY_SCORES:
        raise InvalidInputError(
            f"Location '{location.id}' has unknown priority '{location.priority}'. "
            f"Expected one of: {', '.join(PRIORITY_SCORES)}."
        )
    service_time = location.estimated_service_time
    if service_time is not None and (
        not _is_number(service_time) or not math.isfinite(service_time) or service_time < 0
    ):
        raise InvalidInputError(f"Location '{location.id}' has invalid service time {service_time}.")
    window = location.time_window
    if window is not None:
        start, end = parse_clock(window.start), parse_clock(window.end)
        if start > end:
            raise InvalidInputError(
                f"Location '{location.id}' time window {window.start}-{window.end} crosses midnight, "
                "which is not supported."
            )


def validate_params(params: RouteOptimizationParams) -> None:
    """Raise ``InvalidInputError`` for any stop the optimizer cannot use.

    An empty destination list is valid and produces the trivial route.
    """

    validate_location(params.start_location)
    for destination in params.destinations:
        validate_location(destination)
    if params.max_route_time is not None and params.max_route_time <= 0:
        raise InvalidInputError(f"max_route_time must be positive, got {params.max_route_time}.")
