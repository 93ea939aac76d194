"""Deterministic spot-set generator for the app, the snapshot CLI, and tests."""

import math

import numpy as np

from spotmatch.compute import EARTH_RADIUS_M
from spotmatch.models import PERSONALITY_TAGS, Coordinate, Spot

DEFAULT_SPOT_COUNT = 40
DEFAULT_RADIUS_M = 1500.0


def generate_spots(
    center: Coordinate,
    count: int = DEFAULT_SPOT_COUNT,
    radius_m: float = DEFAULT_RADIUS_M,
    seed: int = 0,
) -> tuple[Spot, ...]:
    """Scatter spots uniformly over a disc around center.

    The same (center, count, radius_m, seed) always yields the same spots.

    Args:
        center: Disc centre, usually the viewer location.
        count: Number of spots to create.
        radius_m: Disc radius in metres.
        seed: numpy Generator seed.

    Returns:
        Spots with ids ``spot-000``, ``spot-001``, ... and random canonical tags.
    """
    if count < 0:
        raise ValueError("count must be non-negative")
    if radius_m < 0:
        raise ValueError("radius_m must be non-negative")

    rng = np.random.default_rng(seed)
    # sqrt keeps density uniform over the disc instead of bunching at the centre
    dists = radius_m * np.sqrt(rng.random(count))
    bearings = rng.random(count) * 2 * np.pi
    tag_idx = rng.integers(0, len(PERSONALITY_TAGS), size=count)

    cos_lat = max(math.cos(math.radians(center.latitude)), 1e-6)
    dlat = np.degrees(dists * np.cos(bearings) / EARTH_RADIUS_M)
    dlon = np.degrees(dists * np.sin(bearings) / (EARTH_RADIUS_M * cos_lat))

    spots: list[Spot] = []
    for i in range(count):
        lat = float(np.clip(center.latitude + dlat[i], -90.0, 90.0))
        lng = float(center.longitude + dlon[i])
        lng = (lng + 180.0) % 360.0 - 180.0
        spots.append(
            Spot(
                id=f"spot-{i:03d}",
                location=Coordinate(latitude=lat, longitude=lng),
                tag=PERSONALITY_TAGS[int(tag_idx[i])],
            )
        )
    return tuple(spots)
