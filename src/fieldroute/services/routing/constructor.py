"""Priority-weighted nearest neighbour route construction."""

from __future__ import annotations

import math
from typing import Callable, Optional, Sequence

from ...config import settings
from ...models.domain import Location
from .collaborators import TrafficProvider, resolve_traffic_factor
from .distance import haversine_km, travel_time_minutes
from .errors import ComputationError
from .evaluator import efficiency_score, fuel_cost
from .models import OptimizedRoute
from .priority import score_priority

PriorityScorer = Callable[[Location], float]


def _select_next(
    current: Location,
    remaining: Sequence[Location],
    scorer: PriorityScorer,
) -> tuple[int, float]:
    """Index and raw distance of the candidate with the lowest priority-adjusted distance.

    Ties keep the first candidate in ``remaining`` order (strict ``<``), so the
    same input order always yields the same route.
    """

    best_index = -1
    best_adjusted = math.inf
    best_distance = math.inf
    for index, candidate in enumerate(remaining):
        distance = haversine_km(current.latitude, current.longitude, candidate.latitude, candidate.longitude)
        if not math.isfinite(distance):
            raise ComputationError(
                f"Non-finite distance between '{current.id}' and '{candidate.id}'."
            )
        adjusted = distance / scorer(candidate)
        if best_index < 0 or adjusted < best_adjusted:
            best_index = index
            best_adjusted = adjusted
            best_distance = distance
    return best_index, best_distance


def construct_route(
    start: Location,
    destinations: Sequence[Location],
    *,
    scorer: PriorityScorer = score_priority,
    traffic: Optional[TrafficProvider] = None,
) -> OptimizedRoute:
    """Build an initial tour greedily from ``start``.

    Each step picks the remaining stop minimising ``distance / priority score``,
    so urgent stops win when true distances are comparable. Totals accumulate
    the raw, unadjusted distances.
    """

    route: list[Location] = [start]
    remaining = list(destinations)
    current = start
    total_distance = 0.0
    total_time = 0.0

    while remaining:
        index, distance = _select_next(current, remaining, scorer)
        winner = remaining.pop(index)
        factor = resolve_traffic_factor(traffic, current, winner)
        total_distance += distance
        total_time += travel_time_minutes(distance, factor) + winner.service_minutes(
            settings.default_service_minutes
        )
        route.append(winner)
        current = winner

    return OptimizedRoute(
        route=route,
        total_distance=total_distance,
        total_time=total_time,
        estimated_fuel_cost=fuel_cost(total_distance),
        efficiency=efficiency_score(total_distance, len(destinations)),
    )
