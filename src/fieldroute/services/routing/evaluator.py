"""Route metrics computed from a finished visiting order."""

from __future__ import annotations

from typing import Optional, Sequence

from ...config import settings
from ...models.domain import Location
from .collaborators import TrafficProvider, resolve_traffic_factor
from .distance import location_distance_km, travel_time_minutes
from .models import OptimizedRoute


def theoretical_min_distance(destination_count: int) -> float:
    """Fixed per-stop baseline, not a derived lower bound on tour length."""

    return destination_count * settings.baseline_km_per_stop


def efficiency_score(total_distance: float, destination_count: int) -> float:
    """Baseline-to-actual distance ratio clamped to [0, 1].

    A route with no distance to travel (no destinations, or every stop at the
    start coordinates) scores 1.0.
    """

    if total_distance <= 0:
        return 1.0
    ratio = theoretical_min_distance(destination_count) / total_distance
    return max(0.0, min(1.0, ratio))


def fuel_cost(total_distance: float, cost_per_km: Optional[float] = None) -> float:
    rate = settings.cost_per_km if cost_per_km is None else cost_per_km
    return total_distance * rate


def route_totals(
    route: Sequence[Location],
    traffic: Optional[TrafficProvider] = None,
) -> tuple[float, float]:
    """Walk the route and return ``(distance_km, time_min)`` including service time."""

    total_distance = 0.0
    total_time = 0.0
    for previous, current in zip(route, route[1:]):
        distance = location_distance_km(previous, current)
        factor = resolve_traffic_factor(traffic, previous, current)
        total_distance += distance
        total_time += travel_time_minutes(distance, factor) + current.service_minutes(
            settings.default_service_minutes
        )
    return total_distance, total_time


def evaluate_route(
    route: Sequence[Location],
    *,
    traffic: Optional[TrafficProvider] = None,
    cost_per_km: Optional[float] = None,
) -> OptimizedRoute:
    total_distance, total_time = route_totals(route, traffic)
    return OptimizedRoute(
        route=list(route),
        total_distance=total_distance,
        total_time=total_time,
        estimated_fuel_cost=fuel_cost(total_distance, cost_per_km),
        efficiency=efficiency_score(total_distance, len(route) - 1),
    )
