"""Time window checks for stops."""

from __future__ import annotations

from typing import Optional, Sequence

from ...config import settings
from ...models.domain import Location
from .collaborators import TrafficProvider, resolve_traffic_factor
from .distance import location_distance_km, travel_time_minutes
from .errors import InvalidInputError

MINUTES_PER_DAY = 24 * 60


def parse_clock(value: str) -> int:
    """Convert an ``HH:MM`` clock value to minutes since midnight."""

    hours, sep, minutes = str(value).strip().partition(":")
    if not sep or not hours.isdigit() or not minutes.isdigit():
        raise InvalidInputError(f"Invalid clock value '{value}', expected HH:MM.")
    hour_value, minute_value = int(hours), int(minutes)
    if hour_value > 23 or minute_value > 59:
        raise InvalidInputError(f"Invalid clock value '{value}', expected HH:MM.")
    return hour_value * 60 + minute_value


def format_clock(minutes: float) -> str:
    total = int(round(minutes)) % MINUTES_PER_DAY
    return f"{total // 60:02d}:{total % 60:02d}"


def is_within_time_window(location: Location, reference: str | int) -> bool:
    """Return True if the stop has no window or ``reference`` falls inside it (inclusive).

    ``reference`` is either an ``HH:MM`` string or minutes since midnight.
    Windows that wrap past midnight are rejected during validation.
    """

    window = location.time_window
    if window is None:
        return True
    current = reference if isinstance(reference, int) else parse_clock(reference)
    return parse_clock(window.start) <= current <= parse_clock(window.end)


def projected_arrivals(
    route: Sequence[Location],
    day_start: Optional[str] = None,
    traffic: Optional[TrafficProvider] = None,
) -> list[int]:
    """Arrival clock (minutes since midnight) for every stop after the start.

    Arrival at a stop is the day start plus all preceding travel and service
    time; service happens on arrival, no waiting for a window to open.
    """

    clock = float(parse_clock(day_start or settings.day_start))
    arrivals: list[int] = []
    for previous, current in zip(route, route[1:]):
        factor = resolve_traffic_factor(traffic, previous, current)
        clock += travel_time_minutes(location_distance_km(previous, current), factor)
        arrivals.append(int(clock))
        clock += current.service_minutes(settings.default_service_minutes)
    return arrivals
