"""Routing orchestration service."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Optional

from ...models.domain import RouteOptimizationParams
from .collaborators import TrafficProvider
from .constructor import construct_route
from .evaluator import evaluate_route
from .improver import improve_route
from .models import (
    FALLBACK_ALGORITHM,
    OPTIMIZED_ALGORITHM,
    OptimizedRoute,
    RouteMetadata,
    RouteOptimizationResult,
)
from .recommendations import FALLBACK_MESSAGE, build_recommendations, time_window_check_mode
from .validation import validate_params

logger = logging.getLogger(__name__)

FALLBACK_EFFICIENCY = 0.5


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000.0


def _fallback_result(params: RouteOptimizationParams, started: float) -> RouteOptimizationResult:
    # free-flow times only; the traffic provider may be what failed
    sequential = evaluate_route([params.start_location, *params.destinations])
    route = OptimizedRoute(
        route=sequential.route,
        total_distance=sequential.total_distance,
        total_time=sequential.total_time,
        estimated_fuel_cost=sequential.estimated_fuel_cost,
        efficiency=FALLBACK_EFFICIENCY,
    )
    return RouteOptimizationResult(
        routes=[route],
        total_distance=route.total_distance,
        total_time=route.total_time,
        recommendations=[FALLBACK_MESSAGE],
        metadata=RouteMetadata(
            algorithm=FALLBACK_ALGORITHM,
            processing_time=_elapsed_ms(started),
            optimization_score=FALLBACK_EFFICIENCY,
            time_window_check=time_window_check_mode(params),
        ),
    )


def optimize_route(
    params: RouteOptimizationParams,
    *,
    traffic: Optional[TrafficProvider] = None,
    time_limit_seconds: Optional[float] = None,
) -> RouteOptimizationResult:
    """Sequence a technician's stops: construct, improve, evaluate, recommend.

    Invalid coordinates or windows raise ``InvalidInputError`` before any work
    starts. Once validated, a result is always returned; failures inside
    construction or improvement degrade to the sequential fallback route,
    which callers can detect through ``metadata.algorithm``.
    """

    started = time.perf_counter()
    validate_params(params)
    traffic = traffic if params.traffic_consideration else None

    try:
        constructed = construct_route(params.start_location, params.destinations, traffic=traffic)
        outcome = improve_route(constructed.route, time_limit_seconds=time_limit_seconds)
    except Exception as exc:
        logger.exception(
            "Route optimization failed for %d destinations, using sequential fallback: %s",
            len(params.destinations),
            exc,
        )
        return _fallback_result(params, started)

    optimized = evaluate_route(outcome.route, traffic=traffic)
    recommendations = build_recommendations(optimized, params, traffic=traffic)
    metadata = RouteMetadata(
        algorithm=OPTIMIZED_ALGORITHM,
        processing_time=_elapsed_ms(started),
        optimization_score=optimized.efficiency,
        time_window_check=time_window_check_mode(params),
        improvement_passes=outcome.passes,
        improvement_stop_reason=outcome.stop_reason,
    )
    logger.info(
        "Optimized route with %d stops: %.2f km (constructed %.2f km), %.1f min, %d 2-opt swaps in %.1f ms",
        len(params.destinations),
        optimized.total_distance,
        constructed.total_distance,
        optimized.total_time,
        outcome.swaps,
        metadata.processing_time,
    )
    return RouteOptimizationResult(
        routes=[optimized],
        total_distance=optimized.total_distance,
        total_time=optimized.total_time,
        recommendations=recommendations,
        metadata=metadata,
    )


async def optimize_route_async(
    params: RouteOptimizationParams,
    *,
    traffic: Optional[TrafficProvider] = None,
    time_limit_seconds: Optional[float] = None,
) -> RouteOptimizationResult:
    """Run :func:`optimize_route` on a worker thread so event loops stay responsive."""

    return await asyncio.to_thread(
        optimize_route,
        params,
        traffic=traffic,
        time_limit_seconds=time_limit_seconds,
    )
