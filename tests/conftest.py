from __future__ import annotations

import math

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from spotmatch.compute import EARTH_RADIUS_M  # noqa: E402
from spotmatch.models import Coordinate, Spot  # noqa: E402

SEOUL = Coordinate(latitude=37.5665, longitude=126.9780)


def north_of(origin: Coordinate, metres: float) -> Coordinate:
    """Coordinate exactly `metres` due north of origin along the meridian."""
    return Coordinate(
        latitude=origin.latitude + math.degrees(metres / EARTH_RADIUS_M),
        longitude=origin.longitude,
    )


def make_spots(tags: list[str], origin: Coordinate = SEOUL) -> list[Spot]:
    return [Spot(id=f"s{i}", location=origin, tag=tag) for i, tag in enumerate(tags)]


@pytest.fixture
def viewer() -> Coordinate:
    return SEOUL
