from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import pytest

from spotmatch.compute import evaluate
from spotmatch.fixtures import generate_spots
from spotmatch.models import ViewerContext
from spotmatch.renderers.plotly_2d import hue_color, render_plotly_chart
from spotmatch.renderers.static import render_static_chart, save_static_chart

from conftest import SEOUL


def _map_data(mode: str = "near", count: int = 40):
    spots = generate_spots(SEOUL, count=count, seed=9)
    return evaluate(ViewerContext(location=SEOUL, tag="INFJ", mode=mode), spots)  # type: ignore[arg-type]


def test_plotly_chart_carries_spot_styles() -> None:
    map_data = _map_data("near")
    fig = render_plotly_chart(map_data)

    names = [trace.name for trace in fig.data]
    assert names == ["range", "spots", "viewer"]
    spot_trace = fig.data[1]
    assert len(spot_trace.x) == len(map_data.spots)
    assert list(spot_trace.marker.opacity) == [s.style.opacity for s in map_data.spots]
    assert list(spot_trace.marker.size) == [s.style.radius * 2 for s in map_data.spots]
    assert spot_trace.marker.color[0] == hue_color(map_data.spots[0].style.color_hue)


def test_plotly_axes_follow_mode_range() -> None:
    fig = render_plotly_chart(_map_data("wide"))
    assert fig.layout.xaxis.range == pytest.approx((-2200.0, 2200.0))


def test_static_chart_renders_and_saves(tmp_path: Path) -> None:
    map_data = _map_data("focused")
    fig = render_static_chart(map_data)
    assert fig.axes
    plt.close(fig)

    path = save_static_chart(map_data, tmp_path / "nested" / "focused.png")
    assert path.exists()
    assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_static_chart_with_no_spots(tmp_path: Path) -> None:
    path = save_static_chart(_map_data("near", count=0), tmp_path / "empty.png")
    assert path.exists()
