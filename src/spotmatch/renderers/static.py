"""Matplotlib static PNG renderer."""

import colorsys
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure
from matplotlib.patches import Circle

from spotmatch.compute import local_offset_m
from spotmatch.models import MapData


def _hue_rgba(hue: int, alpha: float) -> tuple[float, float, float, float]:
    r, g, b = colorsys.hls_to_rgb(hue / 360, 0.6, 0.7)
    return r, g, b, alpha


def render_static_chart(map_data: MapData, chart_size: int = 8) -> Figure:
    """Render MapData as a static matplotlib image.

    Args:
        map_data: Fully computed evaluation result.
        chart_size: Output image size in inches.

    Returns:
        matplotlib Figure object.
    """
    fig, ax = plt.subplots(figsize=(chart_size, chart_size))
    fig.patch.set_facecolor("#0d1b35")
    ax.set_facecolor("#0d1b35")

    r = map_data.max_distance_m
    ax.add_patch(
        Circle((0, 0), r, fill=False, color="#c9a96e", linestyle=":", alpha=0.5)
    )

    if map_data.spots:
        origin = map_data.context.location
        offsets = np.array(
            [local_offset_m(origin, s.scored.spot.location) for s in map_data.spots]
        )
        colors = [_hue_rgba(s.style.color_hue, s.style.opacity) for s in map_data.spots]
        # scatter sizes are in points^2; style radius is in points
        sizes = np.array([s.style.radius for s in map_data.spots]) ** 2
        ax.scatter(
            offsets[:, 0], offsets[:, 1], s=sizes, c=colors, linewidths=0, zorder=2
        )
    ax.scatter([0], [0], s=120, color="#f0e0b0", marker="*", zorder=3)

    extent = r * 1.1
    ax.set_xlim(-extent, extent)
    ax.set_ylim(-extent, extent)
    ax.set_aspect("equal")
    ax.axis("off")

    return fig


def save_static_chart(map_data: MapData, output_path: Path) -> Path:
    """Save MapData as a PNG file.

    Args:
        map_data: Fully computed evaluation result.
        output_path: Destination path; parent directories are created.

    Returns:
        Path to the saved file.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_chart(map_data)
    fig.savefig(output_path, facecolor=fig.get_facecolor())
    plt.close(fig)
    return output_path
