"""Plotly 2D interactive spot chart renderer.

Spots are placed on a flat local plane in metres around the viewer
(east = +x, north = +y). There are no map tiles; the chart only conveys
relative position, proximity weighting, and tag colour.
"""

import numpy as np
import plotly.graph_objects as go

from spotmatch.compute import local_offset_m
from spotmatch.models import MapData

_BG = "#0d1b35"
_VIEWER_COLOR = "#f0e0b0"
_RANGE_COLOR = "#c9a96e"


def hue_color(hue: int) -> str:
    """CSS colour string for a spot hue."""
    return f"hsl({hue}, 70%, 60%)"


def render_plotly_chart(map_data: MapData) -> go.Figure:
    """Render MapData as a Plotly 2D interactive chart.

    Marker size and opacity come straight from each spot's style; the dashed
    circle marks the mode's max range. Wheel zoom and drag panning are enabled.

    Args:
        map_data: Fully computed evaluation result.

    Returns:
        Plotly Figure object.
    """
    origin = map_data.context.location
    offsets = [local_offset_m(origin, s.scored.spot.location) for s in map_data.spots]
    x_vals = [east for east, _ in offsets]
    y_vals = [north for _, north in offsets]

    spot_trace = go.Scatter(
        x=x_vals,
        y=y_vals,
        mode="markers",
        marker=dict(
            size=[s.style.radius * 2 for s in map_data.spots],
            color=[hue_color(s.style.color_hue) for s in map_data.spots],
            opacity=[s.style.opacity for s in map_data.spots],
            line=dict(width=0),
        ),
        customdata=[
            (s.scored.spot.id, s.scored.spot.tag, s.scored.affinity, s.scored.distance_m)
            for s in map_data.spots
        ],
        hovertemplate="%{customdata[1]} · %{customdata[2]}/4 · %{customdata[3]:.0f} m"
        "<extra>%{customdata[0]}</extra>",
        name="spots",
    )

    viewer_trace = go.Scatter(
        x=[0.0],
        y=[0.0],
        mode="markers",
        marker=dict(size=12, color=_VIEWER_COLOR, symbol="star", line=dict(width=0)),
        hoverinfo="skip",
        name="viewer",
    )

    # Range ring: single trace, closed polyline
    r = map_data.max_distance_m
    theta = np.linspace(0, 2 * np.pi, 121)
    ring_trace = go.Scatter(
        x=list(r * np.cos(theta)),
        y=list(r * np.sin(theta)),
        mode="lines",
        line=dict(color=_RANGE_COLOR, width=1, dash="dot"),
        opacity=0.5,
        hoverinfo="skip",
        name="range",
    )

    fig = go.Figure(data=[ring_trace, spot_trace, viewer_trace])

    # 10% margin so spots sitting on the ring are not clipped
    extent = r * 1.1
    fig.update_layout(
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        width=700,
        height=700,
        dragmode="pan",
        xaxis=dict(visible=False, range=[-extent, extent], fixedrange=False),
        yaxis=dict(
            visible=False,
            range=[-extent, extent],
            scaleanchor="x",
            scaleratio=1,
            fixedrange=False,
        ),
    )
    fig._config = {"scrollZoom": True, "displayModeBar": False}  # type: ignore[attr-defined]

    return fig
