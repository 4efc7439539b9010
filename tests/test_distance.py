import math

import pytest

from fieldroute.config import settings
from fieldroute.models.domain import Location
from fieldroute.services.routing.distance import (
    EARTH_RADIUS_KM,
    haversine_km,
    location_distance_km,
    travel_time_minutes,
)

TACOMA = (47.2529, -122.4443)
SEATTLE = (47.6062, -122.3321)


def test_haversine_identical_points_is_exactly_zero():
    assert haversine_km(*TACOMA, *TACOMA) == 0.0
    assert haversine_km(0.0, 0.0, 0.0, 0.0) == 0.0


def test_haversine_is_symmetric():
    forward = haversine_km(*TACOMA, *SEATTLE)
    backward = haversine_km(*SEATTLE, *TACOMA)

    assert forward == pytest.approx(backward, abs=1e-9)
    assert 38 < forward < 42


def test_haversine_one_degree_of_longitude_on_equator():
    expected = EARTH_RADIUS_KM * math.pi / 180

    assert haversine_km(0.0, 0.0, 0.0, 1.0) == pytest.approx(expected, rel=1e-12)


def test_location_distance_uses_coordinates():
    a = Location(id="a", address="A", latitude=TACOMA[0], longitude=TACOMA[1])
    b = Location(id="b", address="B", latitude=SEATTLE[0], longitude=SEATTLE[1])

    assert location_distance_km(a, b) == haversine_km(*TACOMA, *SEATTLE)


def test_travel_time_at_city_speed():
    assert settings.average_speed_kmh == 45.0
    assert travel_time_minutes(45.0) == pytest.approx(60.0)
    assert travel_time_minutes(0.0) == 0.0


def test_travel_time_scales_with_traffic_factor():
    assert travel_time_minutes(9.0, 1.5) == pytest.approx(18.0)


def test_travel_time_follows_configured_speed(monkeypatch):
    monkeypatch.setattr(settings, "average_speed_kmh", 30.0)

    assert travel_time_minutes(30.0) == pytest.approx(60.0)
    assert travel_time_minutes(30.0, speed_kmh=60.0) == pytest.approx(30.0)


@pytest.mark.parametrize(
    "lat, lon",
    [(-87.5, 0.0), (0.0, 0.0), (45.0, 90.0), (-33.8688, 151.2093), (89.9, -179.9)],
)
def test_haversine_antipodal_points_reach_half_circumference(lat, lon):
    antipode_lon = lon - 180.0 if lon > 0 else lon + 180.0

    distance = haversine_km(lat, lon, -lat, antipode_lon)

    assert distance == pytest.approx(math.pi * EARTH_RADIUS_KM, rel=1e-6)
