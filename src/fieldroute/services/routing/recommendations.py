"""Advisory notes attached to an optimized route."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ...config import settings
from ...models.domain import Location, RouteOptimizationParams
from .collaborators import TrafficProvider
from .models import OptimizedRoute
from .time_windows import format_clock, is_within_time_window, projected_arrivals

logger = logging.getLogger(__name__)

LOW_EFFICIENCY_MESSAGE = "Route efficiency is below optimal. Consider grouping nearby locations."
WORKDAY_EXCEEDED_MESSAGE = "Route exceeds 8 hours. Consider splitting into multiple days."
TIME_WINDOW_MESSAGE = "Some locations may have time window constraints. Verify schedule feasibility."
FALLBACK_MESSAGE = "Route optimization failed. Using fallback sequential route."

CHECK_REFERENCE = "reference"
CHECK_ARRIVAL = "arrival"


def time_window_check_mode(params: RouteOptimizationParams) -> str:
    if params.prioritize_time_windows:
        return CHECK_ARRIVAL
    return settings.time_window_check_mode


def time_window_violations(
    route: Sequence[Location],
    mode: str,
    traffic: Optional[TrafficProvider] = None,
) -> list[Location]:
    """Stops whose window is missed.

    ``reference`` mode checks every stop against one fixed clock reading;
    ``arrival`` mode checks each stop's projected arrival along the route.
    """

    stops = list(route[1:])
    if mode == CHECK_ARRIVAL:
        arrivals = projected_arrivals(route, traffic=traffic)
        missed = []
        for stop, arrival in zip(stops, arrivals):
            if not is_within_time_window(stop, arrival):
                logger.info(
                    "Stop %s reached at %s, outside window %s-%s",
                    stop.id,
                    format_clock(arrival),
                    stop.time_window.start,
                    stop.time_window.end,
                )
                missed.append(stop)
        return missed
    return [stop for stop in stops if not is_within_time_window(stop, settings.time_window_reference)]


def build_recommendations(
    optimized: OptimizedRoute,
    params: RouteOptimizationParams,
    *,
    traffic: Optional[TrafficProvider] = None,
) -> list[str]:
    recommendations: list[str] = []

    if optimized.efficiency < settings.efficiency_warning_threshold:
        recommendations.append(LOW_EFFICIENCY_MESSAGE)

    if optimized.total_time > settings.workday_minutes:
        recommendations.append(WORKDAY_EXCEEDED_MESSAGE)

    if params.max_route_time is not None and optimized.total_time > params.max_route_time:
        recommendations.append(
            f"Route takes {optimized.total_time:.0f} minutes, over the requested maximum of "
            f"{params.max_route_time:.0f} minutes."
        )

    urgent_count = sum(1 for destination in params.destinations if destination.priority == "urgent")
    if urgent_count:
        recommendations.append(f"{urgent_count} urgent stop(s) detected. Prioritized in route.")

    if time_window_violations(optimized.route, time_window_check_mode(params), traffic):
        recommendations.append(TIME_WINDOW_MESSAGE)

    return recommendations
