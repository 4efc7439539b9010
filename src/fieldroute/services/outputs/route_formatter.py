"""Serializers for optimized route exports."""

from __future__ import annotations

import csv
import io

from ..routing.models import OptimizedRoute, RouteOptimizationResult


def _format_duration(minutes: float) -> str:
    whole = int(round(minutes))
    return f"{whole // 60} hours {whole % 60} minutes"


def _primary_route(result: RouteOptimizationResult) -> OptimizedRoute:
    if not result.routes:
        raise ValueError("Optimization result contains no routes to export.")
    return result.routes[0]


def route_result_to_json(result: RouteOptimizationResult) -> dict:
    """Ordered stops with human-readable totals, as offered for download."""

    route = _primary_route(result)
    return {
        "route": [
            {
                "order": index,
                "name": location.name or f"Stop {index}",
                "address": location.address,
                "priority": location.priority,
                "estimatedServiceTime": location.estimated_service_time,
                "timeWindow": (
                    {"start": location.time_window.start, "end": location.time_window.end}
                    if location.time_window
                    else None
                ),
            }
            for index, location in enumerate(route.route, start=1)
        ],
        "summary": {
            "totalDistance": f"{route.total_distance:.1f} km",
            "totalTime": _format_duration(route.total_time),
            "estimatedFuelCost": f"${route.estimated_fuel_cost:.2f}",
            "efficiency": f"{route.efficiency * 100:.1f}%",
        },
        "recommendations": list(result.recommendations),
        "algorithm": result.metadata.algorithm,
    }


def route_result_to_csv(result: RouteOptimizationResult) -> str:
    route = _primary_route(result)
    buffer = io.StringIO()
    fieldnames = [
        "order",
        "location_id",
        "name",
        "address",
        "latitude",
        "longitude",
        "priority",
        "window_start",
        "window_end",
        "service_minutes",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    for index, location in enumerate(route.route, start=1):
        window = location.time_window
        writer.writerow(
            {
                "order": index,
                "location_id": location.id,
                "name": location.name or "",
                "address": location.address,
                "latitude": location.latitude,
                "longitude": location.longitude,
                "priority": location.priority or "",
                "window_start": window.start if window else "",
                "window_end": window.end if window else "",
                "service_minutes": "" if location.estimated_service_time is None else location.estimated_service_time,
            }
        )
    return buffer.getvalue()
