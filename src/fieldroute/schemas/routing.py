"""Routing request/response schemas."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..models.domain import Location, RouteOptimizationParams, TimeWindow
from ..services.routing.models import OptimizedRoute, RouteOptimizationResult

CLOCK_PATTERN = r"^([01]?\d|2[0-3]):[0-5]\d$"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TimeWindowModel(CamelModel):
    start: str = Field(..., pattern=CLOCK_PATTERN, description="Window opening, HH:MM")
    end: str = Field(..., pattern=CLOCK_PATTERN, description="Window closing, HH:MM")


class LocationModel(CamelModel):
    id: str
    address: str = Field(..., description="Postal address, display only")
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    name: Optional[str] = None
    priority: Optional[Literal["low", "medium", "high", "urgent"]] = None
    time_window: Optional[TimeWindowModel] = None
    estimated_service_time: Optional[float] = Field(default=None, ge=0, description="Minutes on site")

    def to_domain(self) -> Location:
        window = self.time_window
        return Location(
            id=self.id,
            address=self.address,
            latitude=self.latitude,
            longitude=self.longitude,
            name=self.name,
            priority=self.priority,
            time_window=TimeWindow(start=window.start, end=window.end) if window else None,
            estimated_service_time=self.estimated_service_time,
        )

    @classmethod
    def from_domain(cls, location: Location) -> "LocationModel":
        window = location.time_window
        return cls(
            id=location.id,
            address=location.address,
            latitude=location.latitude,
            longitude=location.longitude,
            name=location.name,
            priority=location.priority,
            time_window=TimeWindowModel(start=window.start, end=window.end) if window else None,
            estimated_service_time=location.estimated_service_time,
        )


class RouteOptimizationRequest(CamelModel):
    start_location: LocationModel
    destinations: List[LocationModel] = Field(default_factory=list)
    vehicle_capacity: Optional[float] = Field(default=None, ge=0, description="Accepted but not enforced.")
    max_route_time: Optional[float] = Field(default=None, gt=0, description="Minutes")
    traffic_consideration: bool = False
    prioritize_time_windows: bool = Field(
        default=False,
        description="Check time windows against each stop's projected arrival instead of a fixed clock.",
    )

    def to_params(self) -> RouteOptimizationParams:
        return RouteOptimizationParams(
            start_location=self.start_location.to_domain(),
            destinations=[destination.to_domain() for destination in self.destinations],
            vehicle_capacity=self.vehicle_capacity,
            max_route_time=self.max_route_time,
            traffic_consideration=self.traffic_consideration,
            prioritize_time_windows=self.prioritize_time_windows,
        )


class OptimizedRouteModel(CamelModel):
    route: List[LocationModel]
    total_distance: float
    total_time: float
    estimated_fuel_cost: float
    efficiency: float

    @classmethod
    def from_domain(cls, optimized: OptimizedRoute) -> "OptimizedRouteModel":
        return cls(
            route=[LocationModel.from_domain(location) for location in optimized.route],
            total_distance=optimized.total_distance,
            total_time=optimized.total_time,
            estimated_fuel_cost=optimized.estimated_fuel_cost,
            efficiency=optimized.efficiency,
        )


class RouteMetadataModel(CamelModel):
    algorithm: str
    processing_time: float = Field(..., description="Milliseconds")
    optimization_score: float
    time_window_check: str
    improvement_passes: int = 0
    improvement_stop_reason: Optional[str] = None


class RouteOptimizationResponse(CamelModel):
    routes: List[OptimizedRouteModel]
    total_distance: float
    total_time: float
    recommendations: List[str]
    metadata: RouteMetadataModel

    @classmethod
    def from_result(cls, result: RouteOptimizationResult) -> "RouteOptimizationResponse":
        meta = result.metadata
        return cls(
            routes=[OptimizedRouteModel.from_domain(route) for route in result.routes],
            total_distance=result.total_distance,
            total_time=result.total_time,
            recommendations=list(result.recommendations),
            metadata=RouteMetadataModel(
                algorithm=meta.algorithm,
                processing_time=meta.processing_time,
                optimization_score=meta.optimization_score,
                time_window_check=meta.time_window_check,
                improvement_passes=meta.improvement_passes,
                improvement_stop_reason=meta.improvement_stop_reason,
            ),
        )
