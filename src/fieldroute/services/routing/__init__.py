"""Route optimization engine."""

from .errors import ComputationError, InvalidInputError
from .models import RouteOptimizationResult
from .service import optimize_route, optimize_route_async

__all__ = [
    "optimize_route",
    "optimize_route_async",
    "RouteOptimizationResult",
    "InvalidInputError",
    "ComputationError",
]
