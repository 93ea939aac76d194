"""Runtime settings read from the environment (and a local .env file)."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from spotmatch.models import ContractViolation, Coordinate, validate_tag

_PREFIX = "SPOTMATCH_"
_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    viewer_tag: str = "INTJ"
    latitude: float = 37.5665  # Seoul City Hall
    longitude: float = 126.9780
    spot_count: int = 40
    spot_radius_m: float = 1500.0
    seed: int = 42
    log_level: str = "WARNING"
    results_dir: Path = Path("results")

    def validate(self) -> None:
        try:
            validate_tag(self.viewer_tag)
        except ContractViolation as e:
            raise ValueError(f"viewer_tag: {e}") from e
        try:
            Coordinate(latitude=self.latitude, longitude=self.longitude)
        except ContractViolation as e:
            raise ValueError(f"latitude/longitude: {e}") from e
        if self.spot_count < 0:
            raise ValueError("spot_count must be non-negative")
        if self.spot_radius_m <= 0:
            raise ValueError("spot_radius_m must be positive")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"log_level is not a logging level: {self.log_level}")

    @property
    def viewer_location(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from SPOTMATCH_* variables.

    With no explicit mapping, a .env file in the working directory is
    loaded first and os.environ is read.

    Raises:
        ValueError: When a variable cannot be parsed or fails validation.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    def get(name: str) -> str | None:
        return environ.get(_PREFIX + name)

    defaults = Settings()
    try:
        settings = Settings(
            viewer_tag=get("VIEWER_TAG") or defaults.viewer_tag,
            latitude=float(get("LATITUDE") or defaults.latitude),
            longitude=float(get("LONGITUDE") or defaults.longitude),
            spot_count=int(get("SPOT_COUNT") or defaults.spot_count),
            spot_radius_m=float(get("SPOT_RADIUS_M") or defaults.spot_radius_m),
            seed=int(get("SEED") or defaults.seed),
            log_level=get("LOG_LEVEL") or defaults.log_level,
            results_dir=Path(get("RESULTS_DIR") or defaults.results_dir),
        )
    except ValueError as e:
        raise ValueError(f"Invalid {_PREFIX}* setting: {e}") from e
    settings.validate()
    return settings


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(level=level.upper(), format=_LOG_FORMAT)
