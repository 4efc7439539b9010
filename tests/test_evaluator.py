import math

import pytest

from fieldroute.config import settings
from fieldroute.models.domain import Location
from fieldroute.services.routing.distance import haversine_km, travel_time_minutes
from fieldroute.services.routing.evaluator import (
    efficiency_score,
    evaluate_route,
    fuel_cost,
    theoretical_min_distance,
)


def _location(lid: str, lat: float, lon: float, **kwargs) -> Location:
    return Location(id=lid, address=f"{lid} Main St", latitude=lat, longitude=lon, **kwargs)


def test_evaluate_route_recomputes_totals_from_order():
    route = [
        _location("S", 47.2529, -122.4443),
        _location("A", 47.2729, -122.4443, estimated_service_time=15),
        _location("B", 47.2729, -122.4143),
    ]

    evaluated = evaluate_route(route)

    leg_one = haversine_km(47.2529, -122.4443, 47.2729, -122.4443)
    leg_two = haversine_km(47.2729, -122.4443, 47.2729, -122.4143)
    assert evaluated.total_distance == pytest.approx(leg_one + leg_two, abs=1e-6)
    assert evaluated.total_time == pytest.approx(
        travel_time_minutes(leg_one) + 15 + travel_time_minutes(leg_two) + 30, abs=1e-6
    )
    assert evaluated.estimated_fuel_cost == pytest.approx(evaluated.total_distance * 0.15)
    assert [location.id for location in evaluated.route] == ["S", "A", "B"]


def test_zero_service_time_is_kept():
    route = [_location("S", 0.0, 0.0), _location("A", 0.0, 0.0, estimated_service_time=0)]

    assert evaluate_route(route).total_time == 0.0


def test_efficiency_uses_fixed_baseline_per_stop():
    assert theoretical_min_distance(4) == 4 * settings.baseline_km_per_stop
    assert efficiency_score(20.0, 2) == pytest.approx(0.5)
    assert efficiency_score(5.0, 3) == 1.0


def test_efficiency_sentinel_for_zero_distance():
    assert efficiency_score(0.0, 0) == 1.0
    assert efficiency_score(0.0, 3) == 1.0


@pytest.mark.parametrize("distance", [1e-9, 0.5, 3.0, 250.0, 1e7])
def test_efficiency_is_bounded_and_finite(distance):
    value = efficiency_score(distance, 6)

    assert 0.0 <= value <= 1.0
    assert math.isfinite(value)


def test_fuel_cost_rate_is_configurable(monkeypatch):
    assert fuel_cost(10.0, cost_per_km=0.3) == pytest.approx(3.0)
    monkeypatch.setattr(settings, "cost_per_km", 0.2)
    assert fuel_cost(10.0) == pytest.approx(2.0)
