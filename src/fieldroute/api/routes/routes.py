"""Routing endpoints."""

from __future__ import annotations

import logging
from typing import Literal, Optional

from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import PlainTextResponse

from ...schemas.routing import RouteOptimizationRequest, RouteOptimizationResponse
from ...services.outputs.route_formatter import route_result_to_csv, route_result_to_json
from ...services.routing.errors import InvalidInputError
from ...services.routing.models import RouteOptimizationResult
from ...services.routing.service import optimize_route

router = APIRouter(prefix="/routes", tags=["routes"])
logger = logging.getLogger(__name__)


def _run(payload: RouteOptimizationRequest, time_limit_seconds: Optional[float]) -> RouteOptimizationResult:
    try:
        return optimize_route(payload.to_params(), time_limit_seconds=time_limit_seconds)
    except InvalidInputError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error optimizing route: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to optimize route: {str(exc)}",
        ) from exc


@router.post("/optimize", response_model=RouteOptimizationResponse, status_code=status.HTTP_200_OK)
def optimize(
    payload: RouteOptimizationRequest,
    time_limit_seconds: Optional[float] = Query(
        default=None,
        gt=0,
        alias="timeLimitSeconds",
        description="Stop 2-opt improvement after this many seconds.",
    ),
) -> RouteOptimizationResponse:
    return RouteOptimizationResponse.from_result(_run(payload, time_limit_seconds))


@router.post("/export", status_code=status.HTTP_200_OK)
def export(
    payload: RouteOptimizationRequest,
    format: Literal["json", "csv"] = Query(default="json"),
    time_limit_seconds: Optional[float] = Query(default=None, gt=0, alias="timeLimitSeconds"),
):
    """Optimize and render the route as a downloadable summary."""
    result = _run(payload, time_limit_seconds)
    if format == "csv":
        return PlainTextResponse(
            route_result_to_csv(result),
            media_type="text/csv",
            headers={"Content-Disposition": 'attachment; filename="route-optimization.csv"'},
        )
    return route_result_to_json(result)
