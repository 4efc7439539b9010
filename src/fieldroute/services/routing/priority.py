"""Priority weights used to bias stop selection."""

from __future__ import annotations

from ...models.domain import Location

PRIORITY_SCORES: dict[str, float] = {
    "urgent": 1.0,
    "high": 0.8,
    "medium": 0.6,
    "low": 0.4,
}
DEFAULT_PRIORITY = "medium"


def score_priority(location: Location) -> float:
    return PRIORITY_SCORES[location.priority or DEFAULT_PRIORITY]
