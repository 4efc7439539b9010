"""Great-circle distance and travel time estimates."""

from __future__ import annotations

import math
from typing import Optional

from ...config import settings
from ...models.domain import Location

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # rounding can push near-antipodal pairs just past 1
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def location_distance_km(origin: Location, destination: Location) -> float:
    return haversine_km(origin.latitude, origin.longitude, destination.latitude, destination.longitude)


def travel_time_minutes(
    distance_km: float,
    traffic_factor: float = 1.0,
    *,
    speed_kmh: Optional[float] = None,
) -> float:
    """Estimate driving minutes for a distance at the configured city speed.

    ``traffic_factor`` scales the estimate; it stays at 1.0 unless a traffic
    provider supplies a value.
    """

    speed = speed_kmh or settings.average_speed_kmh
    return (distance_km / speed) * 60.0 * traffic_factor
