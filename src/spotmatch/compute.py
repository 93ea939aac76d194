"""Scoring layer: which spots are visible in a mode, and how strongly each is drawn.

Every function here is pure: callers pass the viewer location, tag, and mode
explicitly and get a fresh result back. Nothing is cached between calls.
"""

import logging
import math
from collections.abc import Iterable, Sequence

from spotmatch.models import (
    ContractViolation,
    Coordinate,
    DisplayMode,
    MapData,
    ScoredSpot,
    Spot,
    SpotStyle,
    StyledSpot,
    ViewerContext,
    validate_mode,
    validate_tag,
)

log = logging.getLogger(__name__)

EARTH_RADIUS_M = 6_371_000.0

STRONG_AFFINITY = 3
RELAXED_AFFINITY = 2
MIN_STRONG_MATCHES = 10
MODE_CAPS: dict[str, int] = {"near": 18, "focused": 5}

WIDE_MAX_DISTANCE_M = 2000.0
DENSE_MAX_DISTANCE_M = 600.0

MIN_OPACITY = 0.10
OPACITY_SPAN = 0.80
MIN_RADIUS = 5.0
RADIUS_SPAN = 10.0


def distance(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance in metres between two coordinates (haversine)."""
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlat = lat2 - lat1
    dlon = math.radians(b.longitude - a.longitude)

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    # Rounding can push h a hair above 1 for antipodal points
    return 2 * EARTH_RADIUS_M * math.asin(math.sqrt(min(h, 1.0)))


def local_offset_m(origin: Coordinate, point: Coordinate) -> tuple[float, float]:
    """Project point onto a flat plane centred on origin.

    Equirectangular approximation; accurate to well under a metre at the
    few-kilometre ranges spots are drawn at.

    Returns:
        (east_m, north_m) offset of point from origin.
    """
    mean_lat = math.radians((origin.latitude + point.latitude) / 2)
    dlon = point.longitude - origin.longitude
    # Take the short way across the antimeridian
    if dlon > 180:
        dlon -= 360
    elif dlon < -180:
        dlon += 360
    east = math.radians(dlon) * math.cos(mean_lat) * EARTH_RADIUS_M
    north = math.radians(point.latitude - origin.latitude) * EARTH_RADIUS_M
    return east, north


def affinity(a: str, b: str) -> int:
    """Count the axis positions where two personality tags agree (0..4)."""
    validate_tag(a)
    validate_tag(b)
    return sum(1 for x, y in zip(a, b) if x == y)


def score_spots(
    viewer_location: Coordinate, viewer_tag: str, spots: Iterable[Spot]
) -> tuple[ScoredSpot, ...]:
    """Project every spot to its affinity and distance against the viewer, in input order."""
    return tuple(
        ScoredSpot(
            spot=s,
            affinity=affinity(viewer_tag, s.tag),
            distance_m=distance(viewer_location, s.location),
        )
        for s in spots
    )


def select(mode: DisplayMode, viewer_tag: str, spots: Sequence[Spot]) -> tuple[Spot, ...]:
    """Pick and rank the spots visible in a display mode.

    ``wide`` shows everything as given. Denser modes rank by affinity with
    the viewer (stable, so ties keep input order), keep matches of 3 or
    more axes, fall back to 2 or more when that leaves fewer than 10, then
    cap the result at the mode's limit.

    Args:
        mode: Display mode.
        viewer_tag: The viewer's personality tag.
        spots: Candidate spots.

    Returns:
        Visible spots, most relevant first.
    """
    validate_mode(mode)
    validate_tag(viewer_tag)
    if mode == "wide":
        return tuple(spots)

    ranked = sorted(
        ((affinity(viewer_tag, s.tag), s) for s in spots),
        key=lambda pair: pair[0],
        reverse=True,
    )
    visible = [s for score, s in ranked if score >= STRONG_AFFINITY]
    if len(visible) < MIN_STRONG_MATCHES:
        visible = [s for score, s in ranked if score >= RELAXED_AFFINITY]
    return tuple(visible[: MODE_CAPS[mode]])


def max_distance(mode: DisplayMode) -> float:
    """Distance (metres) at which a spot reaches minimum weighting."""
    validate_mode(mode)
    return WIDE_MAX_DISTANCE_M if mode == "wide" else DENSE_MAX_DISTANCE_M


def proximity_weight(mode: DisplayMode, distance_m: float) -> float:
    """Normalised closeness: 1.0 when coincident, 0.0 at or beyond max range."""
    ratio = distance_m / max_distance(mode)
    return 1.0 - max(0.0, min(ratio, 1.0))


def tag_hue(tag: str) -> int:
    """Stable hue for a tag, from its perception and judging letters."""
    validate_tag(tag)
    return (ord(tag[1]) * 31 + ord(tag[2]) * 17) % 360


def style_for_distance(mode: DisplayMode, distance_m: float, tag: str) -> SpotStyle:
    t = proximity_weight(mode, distance_m)
    return SpotStyle(
        opacity=MIN_OPACITY + t * OPACITY_SPAN,
        radius=MIN_RADIUS + t * RADIUS_SPAN,
        color_hue=tag_hue(tag),
    )


def style(mode: DisplayMode, viewer_location: Coordinate, spot: Spot) -> SpotStyle:
    """Derive opacity, radius, and hue for a spot seen from viewer_location."""
    return style_for_distance(mode, distance(viewer_location, spot.location), spot.tag)


def evaluate(context: ViewerContext, spots: Sequence[Spot]) -> MapData:
    """Top-level entry point: select, score, and style spots for one render.

    Args:
        context: Viewer location, tag, and display mode.
        spots: Full candidate set. Ids must be unique.

    Returns:
        MapData with the visible spots in rank order.

    Raises:
        ContractViolation: When two spots share an id.
    """
    seen: set[str] = set()
    for s in spots:
        if s.id in seen:
            raise ContractViolation(f"Duplicate spot id: {s.id!r}")
        seen.add(s.id)

    visible = select(context.mode, context.tag, spots)
    styled = tuple(
        StyledSpot(
            scored=scored,
            style=style_for_distance(context.mode, scored.distance_m, scored.spot.tag),
        )
        for scored in score_spots(context.location, context.tag, visible)
    )
    log.debug(
        "mode=%s tag=%s: %d of %d spots visible",
        context.mode,
        context.tag,
        len(styled),
        len(spots),
    )
    return MapData(
        context=context,
        spots=styled,
        total_count=len(spots),
        max_distance_m=max_distance(context.mode),
    )
