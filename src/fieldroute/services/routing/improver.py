"""2-opt local search over a constructed route."""

from __future__ import annotations

import logging
import math
import time
from typing import Optional, Sequence

from ...config import settings
from ...models.domain import Location
from .distance import location_distance_km
from .errors import ComputationError
from .models import ImprovementOutcome

logger = logging.getLogger(__name__)

STOP_CONVERGED = "converged"
STOP_MAX_PASSES = "max_passes"
STOP_DEADLINE = "deadline"


def _edge_pair_cost(first: tuple[Location, Location], second: tuple[Location, Location]) -> float:
    cost = location_distance_km(*first) + location_distance_km(*second)
    if not math.isfinite(cost):
        raise ComputationError(
            f"Non-finite edge cost around '{first[0].id}' and '{second[0].id}'."
        )
    return cost


def improve_route(
    route: Sequence[Location],
    *,
    max_passes: Optional[int] = None,
    time_limit_seconds: Optional[float] = None,
) -> ImprovementOutcome:
    """Apply 2-opt moves until a full pass finds no shorter reconnection.

    Index 0 is the start location and never moves; route[1] is never moved
    either, since every reversal begins at ``i + 1`` with ``i >= 1``. Only
    strictly shorter swaps are accepted, so stopping early at the pass cap or
    the deadline never returns a longer route than the input.
    """

    current = list(route)
    size = len(current)
    pass_limit = settings.improver_max_passes if max_passes is None else max_passes
    limit_seconds = time_limit_seconds if time_limit_seconds is not None else settings.improver_time_limit_seconds
    deadline = time.monotonic() + limit_seconds if limit_seconds else None

    passes = 0
    swaps = 0
    improved = True
    while improved:
        if passes >= pass_limit:
            logger.warning(
                "2-opt stopped after %d passes without converging (%d stops); using best route found",
                passes,
                size,
            )
            return ImprovementOutcome(route=current, passes=passes, stop_reason=STOP_MAX_PASSES, swaps=swaps)

        improved = False
        passes += 1
        for i in range(1, size - 2):
            if deadline is not None and time.monotonic() >= deadline:
                logger.warning(
                    "2-opt time limit of %.3fs reached during pass %d; using best route found",
                    limit_seconds,
                    passes,
                )
                return ImprovementOutcome(route=current, passes=passes, stop_reason=STOP_DEADLINE, swaps=swaps)
            for j in range(i + 2, size - 1):
                current_cost = _edge_pair_cost((current[i], current[i + 1]), (current[j], current[j + 1]))
                swap_cost = _edge_pair_cost((current[i], current[j]), (current[i + 1], current[j + 1]))
                if swap_cost < current_cost:
                    current[i + 1 : j + 1] = current[i + 1 : j + 1][::-1]
                    swaps += 1
                    improved = True

    return ImprovementOutcome(route=current, passes=passes, stop_reason=STOP_CONVERGED, swaps=swaps)
