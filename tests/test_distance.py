from __future__ import annotations

import math

import pytest

from spotmatch.compute import EARTH_RADIUS_M, distance, local_offset_m
from spotmatch.models import Coordinate

from conftest import SEOUL, north_of

PAIRS = [
    (Coordinate(0.0, 0.0), Coordinate(0.0, 1.0)),
    (SEOUL, Coordinate(35.1796, 129.0756)),
    (Coordinate(51.5, -0.12), Coordinate(-33.86, 151.2)),
    (Coordinate(10.0, 179.9), Coordinate(10.0, -179.9)),
    (Coordinate(90.0, 0.0), Coordinate(-90.0, 0.0)),
]


@pytest.mark.parametrize(("a", "b"), PAIRS)
def test_distance_is_symmetric(a: Coordinate, b: Coordinate) -> None:
    assert distance(a, b) == pytest.approx(distance(b, a))


@pytest.mark.parametrize(("a", "_b"), PAIRS)
def test_distance_to_self_is_zero(a: Coordinate, _b: Coordinate) -> None:
    assert distance(a, a) == pytest.approx(0.0, abs=1e-9)


def test_one_degree_of_latitude() -> None:
    d = distance(Coordinate(0.0, 0.0), Coordinate(1.0, 0.0))
    assert d == pytest.approx(math.pi * EARTH_RADIUS_M / 180)


def test_pole_to_pole_is_half_circumference() -> None:
    d = distance(Coordinate(90.0, 0.0), Coordinate(-90.0, 0.0))
    assert d == pytest.approx(math.pi * EARTH_RADIUS_M)


def test_antipodal_points_do_not_exceed_half_circumference() -> None:
    d = distance(Coordinate(0.0, 0.0), Coordinate(0.0, 180.0))
    assert d == pytest.approx(math.pi * EARTH_RADIUS_M)
    assert d <= math.pi * EARTH_RADIUS_M + 1e-6


def test_short_hop_across_antimeridian() -> None:
    d = distance(Coordinate(0.0, 179.999), Coordinate(0.0, -179.999))
    assert d == pytest.approx(222.4, abs=0.5)


def test_local_offset_due_north() -> None:
    east, north = local_offset_m(SEOUL, north_of(SEOUL, 500.0))
    assert east == pytest.approx(0.0, abs=1e-6)
    assert north == pytest.approx(500.0, abs=1e-6)


def test_local_offset_matches_distance_at_short_range() -> None:
    point = Coordinate(SEOUL.latitude + 0.003, SEOUL.longitude - 0.004)
    east, north = local_offset_m(SEOUL, point)
    assert east < 0 < north
    assert math.hypot(east, north) == pytest.approx(distance(SEOUL, point), rel=1e-3)


def test_local_offset_wraps_antimeridian() -> None:
    east, _ = local_offset_m(Coordinate(0.0, 179.999), Coordinate(0.0, -179.999))
    assert east == pytest.approx(222.4, abs=0.5)
