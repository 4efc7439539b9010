import itertools
import logging
from types import SimpleNamespace

import pytest

from fieldroute.models.domain import Location
from fieldroute.services.routing import improver
from fieldroute.services.routing.constructor import construct_route
from fieldroute.services.routing.evaluator import route_totals
from fieldroute.services.routing.improver import improve_route


def _point(lid: str, lat: float, lon: float) -> Location:
    return Location(id=lid, address=f"{lid} Main St", latitude=lat, longitude=lon)


def _on_equator(*positions: int) -> list[Location]:
    # stops along the equator, 0.01 degrees apart per unit
    return [_point(f"P{position}", 0.0, 0.01 * position) for position in positions]


def _ids(route):
    return [location.id for location in route]


def test_two_opt_uncrosses_a_detour():
    route = _on_equator(0, 1, 3, 2, 4)

    outcome = improve_route(route)

    assert _ids(outcome.route) == ["P0", "P1", "P2", "P3", "P4"]
    assert outcome.stop_reason == "converged"
    assert outcome.passes == 2
    assert outcome.swaps == 1


def test_two_opt_leaves_short_routes_untouched():
    for route in (_on_equator(0), _on_equator(0, 2), _on_equator(0, 2, 1)):
        outcome = improve_route(route)
        assert _ids(outcome.route) == _ids(route)
        assert outcome.stop_reason == "converged"


def test_two_opt_keeps_start_fixed():
    route = _on_equator(5, 1, 3, 2, 4, 0)

    outcome = improve_route(route)

    assert outcome.route[0].id == "P5"
    assert sorted(_ids(outcome.route)) == sorted(_ids(route))


def test_two_opt_never_increases_distance():
    start = _point("S", 47.2529, -122.4443)
    offsets = [(0.03, 0.01), (-0.02, 0.04), (0.05, -0.03), (0.0, 0.06), (-0.04, -0.02), (0.02, 0.02), (0.06, 0.05)]
    destinations = [
        _point(f"D{index}", start.latitude + dlat, start.longitude + dlon)
        for index, (dlat, dlon) in enumerate(offsets)
    ]
    constructed = construct_route(start, destinations)

    outcome = improve_route(constructed.route)
    before, _ = route_totals(constructed.route)
    after, _ = route_totals(outcome.route)

    assert after <= before + 1e-9
    assert outcome.route[0] is start
    assert len(outcome.route) == len(destinations) + 1


def test_two_opt_pass_cap_stops_with_warning(caplog):
    route = _on_equator(0, 1, 3, 2, 4)

    with caplog.at_level(logging.WARNING, logger=improver.__name__):
        outcome = improve_route(route, max_passes=1)

    assert outcome.stop_reason == "max_passes"
    assert outcome.passes == 1
    assert _ids(outcome.route) == ["P0", "P1", "P2", "P3", "P4"]
    assert any("without converging" in record.getMessage() for record in caplog.records)


def test_two_opt_deadline_returns_partial_route(monkeypatch, caplog):
    clock = itertools.chain([0.0], itertools.repeat(5.0))
    monkeypatch.setattr(improver, "time", SimpleNamespace(monotonic=lambda: next(clock)))
    route = _on_equator(0, 1, 3, 2, 4)

    with caplog.at_level(logging.WARNING, logger=improver.__name__):
        outcome = improve_route(route, time_limit_seconds=1.0)

    assert outcome.stop_reason == "deadline"
    assert _ids(outcome.route) == _ids(route)
    assert any("time limit" in record.getMessage() for record in caplog.records)


def test_two_opt_does_not_mutate_input():
    route = _on_equator(0, 1, 3, 2, 4)
    original = list(route)

    improve_route(route)

    assert route == original


@pytest.mark.parametrize("limit", [None, 30.0])
def test_two_opt_converges_within_generous_limits(limit):
    route = _on_equator(0, 4, 2, 6, 1, 5, 3, 7)

    outcome = improve_route(route, time_limit_seconds=limit)

    assert outcome.stop_reason == "converged"
    before, _ = route_totals(route)
    after, _ = route_totals(outcome.route)
    assert after <= before


def test_two_opt_zero_pass_cap_returns_input_order():
    route = _on_equator(0, 1, 3, 2, 4)

    outcome = improve_route(route, max_passes=0)

    assert outcome.stop_reason == "max_passes"
    assert outcome.passes == 0
    assert _ids(outcome.route) == _ids(route)
