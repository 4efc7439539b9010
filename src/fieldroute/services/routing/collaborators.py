"""Contracts for the external services the optimizer sits beside.

The optimizer never geocodes addresses itself; callers resolve coordinates
before building a request. Traffic data is optional and only scales travel
time estimates.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Optional, Protocol

from ...models.domain import Location

logger = logging.getLogger(__name__)

_ADDRESS_STRIP_PATTERN = re.compile(r"[^\w\s,]")


class Geocoder(Protocol):
    def geocode(self, address: str) -> Optional[tuple[float, float]]:
        """Return ``(latitude, longitude)`` for an address, or None when unresolved."""
        ...


class TrafficProvider(Protocol):
    def factor(self, origin: Location, destination: Location) -> float:
        """Multiplier applied to the free-flow travel time between two stops."""
        ...


def format_address_for_geocoding(address: str) -> str:
    return _ADDRESS_STRIP_PATTERN.sub("", address).strip()


class NullGeocoder:
    """Placeholder used until a real geocoding service is wired in."""

    def geocode(self, address: str) -> Optional[tuple[float, float]]:
        logger.debug("No geocoder configured; cannot resolve '%s'", format_address_for_geocoding(address))
        return None


def resolve_traffic_factor(
    traffic: Optional[TrafficProvider],
    origin: Location,
    destination: Location,
) -> float:
    """Ask the provider for a factor, falling back to 1.0 for missing or unusable values."""

    if traffic is None:
        return 1.0
    try:
        value = traffic.factor(origin, destination)
    except Exception as exc:
        logger.warning(
            "Traffic provider failed for %s -> %s, using 1.0: %s",
            origin.id,
            destination.id,
            exc,
        )
        return 1.0
    if not isinstance(value, (int, float)) or not math.isfinite(value) or value <= 0:
        logger.warning(
            "Ignoring traffic factor %r for %s -> %s; using 1.0",
            value,
            origin.id,
            destination.id,
        )
        return 1.0
    return float(value)
