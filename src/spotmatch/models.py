"""Data model definitions. Frozen values passed between the compute and render layers."""

import math
from dataclasses import dataclass
from itertools import product
from typing import Literal


class ContractViolation(ValueError):
    """Caller passed a value outside the domain the core accepts."""


# One letter per axis: attitude, perception, judging, lifestyle.
AXES: tuple[tuple[str, str], ...] = (("E", "I"), ("N", "S"), ("T", "F"), ("J", "P"))

PERSONALITY_TAGS: tuple[str, ...] = tuple("".join(letters) for letters in product(*AXES))
_TAG_SET = frozenset(PERSONALITY_TAGS)

DisplayMode = Literal["wide", "near", "focused"]
DISPLAY_MODES: tuple[DisplayMode, ...] = ("wide", "near", "focused")


def validate_tag(tag: str) -> str:
    """Return tag unchanged, or raise ContractViolation if it is not canonical."""
    if tag not in _TAG_SET:
        raise ContractViolation(f"Unknown personality tag: {tag!r}")
    return tag


def validate_mode(mode: str) -> DisplayMode:
    if mode not in DISPLAY_MODES:
        raise ContractViolation(f"Unknown display mode: {mode!r}")
    return mode  # type: ignore[return-value]


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 position in decimal degrees."""

    latitude: float  # [-90, 90]
    longitude: float  # [-180, 180]

    def __post_init__(self) -> None:
        if not (math.isfinite(self.latitude) and math.isfinite(self.longitude)):
            raise ContractViolation(
                f"Non-finite coordinate: ({self.latitude}, {self.longitude})"
            )
        if not -90.0 <= self.latitude <= 90.0:
            raise ContractViolation(f"Latitude out of range: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ContractViolation(f"Longitude out of range: {self.longitude}")


@dataclass(frozen=True)
class Spot:
    """A simulated presence. Created by a generator, only read by the core."""

    id: str  # Unique within a spot set; used as render key
    location: Coordinate
    tag: str  # One of PERSONALITY_TAGS

    def __post_init__(self) -> None:
        validate_tag(self.tag)


@dataclass(frozen=True)
class ViewerContext:
    """Everything one evaluation depends on besides the spot set."""

    location: Coordinate
    tag: str
    mode: DisplayMode

    def __post_init__(self) -> None:
        validate_tag(self.tag)
        validate_mode(self.mode)


@dataclass(frozen=True)
class ScoredSpot:
    """Per-evaluation projection of a spot against the viewer."""

    spot: Spot
    affinity: int  # Matching axis count, 0..4
    distance_m: float  # Great-circle distance to the viewer (metres)


@dataclass(frozen=True)
class SpotStyle:
    """Display weighting for a single spot."""

    opacity: float  # 0.10 (far) .. 0.90 (coincident)
    radius: float  # 5 (far) .. 15 (coincident)
    color_hue: int  # [0, 360), depends on tag only


@dataclass(frozen=True)
class StyledSpot:
    scored: ScoredSpot
    style: SpotStyle


@dataclass(frozen=True)
class MapData:
    """The sole input to renderers. Fully computed state."""

    context: ViewerContext
    spots: tuple[StyledSpot, ...]  # Visible subset, rank order
    total_count: int  # Spots considered before filtering
    max_distance_m: float  # Range at which weighting bottoms out for this mode
