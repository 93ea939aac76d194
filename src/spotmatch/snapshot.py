"""CLI entry point: render every display mode to PNG.

Settings come from SPOTMATCH_* environment variables or a .env file, then run:
    uv run spotmatch-snapshot
"""

import logging
import sys

from spotmatch.compute import evaluate
from spotmatch.config import configure_logging, load_settings
from spotmatch.fixtures import generate_spots
from spotmatch.models import DISPLAY_MODES, ContractViolation, ViewerContext
from spotmatch.renderers.static import save_static_chart

log = logging.getLogger(__name__)


def main() -> int:
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 2
    configure_logging(settings.log_level)

    location = settings.viewer_location
    spots = generate_spots(
        location,
        count=settings.spot_count,
        radius_m=settings.spot_radius_m,
        seed=settings.seed,
    )
    log.info("Generated %d spots (seed=%d)", len(spots), settings.seed)

    for mode in DISPLAY_MODES:
        try:
            map_data = evaluate(
                ViewerContext(location=location, tag=settings.viewer_tag, mode=mode),
                spots,
            )
        except ContractViolation as e:
            print(f"Cannot evaluate {mode}: {e}", file=sys.stderr)
            return 2
        path = save_static_chart(
            map_data, settings.results_dir / f"{settings.viewer_tag}_{mode}.png"
        )
        print(f"Saved: {path} ({len(map_data.spots)}/{map_data.total_count} spots)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
