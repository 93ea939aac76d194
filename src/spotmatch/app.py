"""SpotMatch: Streamlit app showing nearby spots that match your personality type."""

import html

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from spotmatch.compute import evaluate  # noqa: E402
from spotmatch.config import configure_logging, load_settings  # noqa: E402
from spotmatch.fixtures import generate_spots  # noqa: E402
from spotmatch.i18n import t  # noqa: E402
from spotmatch.models import (  # noqa: E402
    DISPLAY_MODES,
    PERSONALITY_TAGS,
    ContractViolation,
    Coordinate,
    ViewerContext,
)
from spotmatch.renderers.plotly_2d import hue_color, render_plotly_chart  # noqa: E402

_settings = load_settings()
configure_logging(_settings.log_level)

# --- Language detection (browser-first via streamlit-js-eval) ---
# On the first run the JS call returns None; the rerun triggered by
# streamlit_js_eval fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "ko" if _browser_lang.lower().startswith("ko") else "en"

_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="✦",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# --- Session state initialization ---
# The core is stateless; the app owns the viewer location, tag, mode and spot set.
if "viewer_location" not in st.session_state:
    st.session_state.viewer_location = None
if "spots" not in st.session_state:
    st.session_state.spots = ()
if "error_msg" not in st.session_state:
    st.session_state.error_msg = None

# --- Dark theme CSS ---
st.markdown(
    """
    <style>
    iframe[src*="streamlit_js_eval"] { display: none !important; }
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {
        background-color: #0d1b35 !important;
    }
    [data-testid="stHeader"], [data-testid="stToolbar"] {
        display: none !important;
    }
    .overlay-box {
        border-top: 1px solid rgba(201,169,110,0.18);
        padding: 1.2rem 1.6rem;
        color: #e8d5a3;
        margin-bottom: 0.5rem;
    }
    .match-row { color: #e8d5a3; font-size: 0.95rem; line-height: 1.8; }
    .match-dot {
        display: inline-block; width: 0.7rem; height: 0.7rem;
        border-radius: 50%; margin-right: 0.5rem;
    }
    label, [data-testid="stWidgetLabel"] p {
        color: #aaaaaa !important;
        font-size: 0.85rem !important;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

# --- Input bar ---
col1, col2, col3, col4 = st.columns([2, 2, 2, 1])
with col1:
    viewer_tag = st.selectbox(
        t("label_tag", _lang),
        PERSONALITY_TAGS,
        index=PERSONALITY_TAGS.index(_settings.viewer_tag),
    )
with col2:
    lat_val = st.number_input(
        t("label_latitude", _lang),
        min_value=-90.0,
        max_value=90.0,
        value=_settings.latitude,
        format="%.5f",
    )
with col3:
    lng_val = st.number_input(
        t("label_longitude", _lang),
        min_value=-180.0,
        max_value=180.0,
        value=_settings.longitude,
        format="%.5f",
    )
with col4:
    st.markdown("<div style='height:1.9rem'></div>", unsafe_allow_html=True)
    submitted = st.button(t("btn_locate", _lang), key="locate_btn", use_container_width=True)

mode = st.radio(
    t("label_mode", _lang),
    DISPLAY_MODES,
    format_func=lambda m: t(f"mode_{m}", _lang),
    horizontal=True,
    key="mode",
)

# --- Form submission handler ---
if submitted:
    st.session_state.error_msg = None
    try:
        location = Coordinate(latitude=float(lat_val), longitude=float(lng_val))
    except ContractViolation as e:
        st.session_state.error_msg = t("error_input", _lang).format(error=e)
    else:
        st.session_state.viewer_location = location
        st.session_state.spots = generate_spots(
            location,
            count=_settings.spot_count,
            radius_m=_settings.spot_radius_m,
            seed=_settings.seed,
        )

# --- Error message ---
if st.session_state.error_msg:
    st.markdown(
        f"<div class='overlay-box' style='border:1px solid #ff6b6b; color:#ff9999;'>"
        f"{html.escape(st.session_state.error_msg)}</div>",
        unsafe_allow_html=True,
    )

# --- Chart area ---
# No location yet: nothing is evaluated.
if st.session_state.viewer_location is None:
    st.markdown(
        "<div style='height:60vh; display:flex; align-items:center; justify-content:center;"
        f" color:#334466; font-size:1.2rem;'>{t('placeholder', _lang)}</div>",
        unsafe_allow_html=True,
    )
    st.stop()

map_data = evaluate(
    ViewerContext(location=st.session_state.viewer_location, tag=viewer_tag, mode=mode),
    st.session_state.spots,
)

chart_col, list_col = st.columns([3, 1])
with chart_col:
    fig = render_plotly_chart(map_data)
    st.plotly_chart(
        fig,
        use_container_width=False,
        config={"scrollZoom": True, "displayModeBar": False},
    )
with list_col:
    rows = [
        f"<div class='match-row'><span class='match-dot' style='background:"
        f"{hue_color(s.style.color_hue)}; opacity:{s.style.opacity:.2f}'></span>"
        + t("match_row", _lang).format(
            tag=s.scored.spot.tag,
            affinity=s.scored.affinity,
            distance=f"{s.scored.distance_m:.0f}",
        )
        + "</div>"
        for s in map_data.spots
    ]
    summary = t("summary", _lang).format(
        visible=len(map_data.spots), total=map_data.total_count
    )
    st.markdown(
        f"<div class='overlay-box'><p>{summary}</p>{''.join(rows)}</div>",
        unsafe_allow_html=True,
    )
