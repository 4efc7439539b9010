"""Domain models for technician stops and optimization requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

Priority = Literal["low", "medium", "high", "urgent"]


@dataclass(slots=True, frozen=True)
class TimeWindow:
    """Allowed service interval as HH:MM clock values."""

    start: str
    end: str


@dataclass(slots=True)
class Location:
    """A stop to visit; coordinates are decimal degrees."""

    id: str
    address: str
    latitude: float
    longitude: float
    name: Optional[str] = None
    priority: Optional[Priority] = None
    time_window: Optional[TimeWindow] = None
    estimated_service_time: Optional[float] = None

    def service_minutes(self, default: float) -> float:
        # 0 is a legitimate service time, only a missing value falls back
        if self.estimated_service_time is None:
            return default
        return self.estimated_service_time


@dataclass(slots=True)
class RouteOptimizationParams:
    start_location: Location
    destinations: list[Location] = field(default_factory=list)
    vehicle_capacity: Optional[float] = None
    max_route_time: Optional[float] = None
    traffic_consideration: bool = False
    prioritize_time_windows: bool = False
