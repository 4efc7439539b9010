"""Routing result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ...models.domain import Location

OPTIMIZED_ALGORITHM = "Nearest Neighbor + 2-opt"
FALLBACK_ALGORITHM = "Fallback Sequential"


@dataclass(slots=True)
class OptimizedRoute:
    route: List[Location]
    total_distance: float
    total_time: float
    estimated_fuel_cost: float
    efficiency: float


@dataclass(slots=True)
class RouteMetadata:
    algorithm: str
    processing_time: float
    optimization_score: float
    time_window_check: str = "reference"
    improvement_passes: int = 0
    improvement_stop_reason: Optional[str] = None


@dataclass(slots=True)
class RouteOptimizationResult:
    routes: List[OptimizedRoute]
    total_distance: float
    total_time: float
    recommendations: List[str]
    metadata: RouteMetadata

    @property
    def is_fallback(self) -> bool:
        return self.metadata.algorithm == FALLBACK_ALGORITHM


@dataclass(slots=True)
class ImprovementOutcome:
    """Route returned by 2-opt together with how the search ended."""

    route: List[Location]
    passes: int
    stop_reason: str
    swaps: int = 0
