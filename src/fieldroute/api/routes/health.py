"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...config import settings

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/config", status_code=status.HTTP_200_OK)
def health_config() -> dict:
    """Report the optimizer tunables in effect."""
    return {
        "average_speed_kmh": settings.average_speed_kmh,
        "default_service_minutes": settings.default_service_minutes,
        "cost_per_km": settings.cost_per_km,
        "baseline_km_per_stop": settings.baseline_km_per_stop,
        "improver_max_passes": settings.improver_max_passes,
        "time_window_check_mode": settings.time_window_check_mode,
    }
