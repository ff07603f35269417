# Project: weather-dashboard
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
app.py — Streamlit historical weather dashboard with Apple-inspired dark UI.

Run with: streamlit run app/app.py
Requires: pip install -e ".[ui]"
Data source: Open-Meteo Historical Weather API (free, no key).
"""

import html
import sys
from pathlib import Path

# Ensure the src/ package is importable when running from the project root
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from datetime import date, timedelta
from functools import partial

import streamlit as st

from weather_dashboard.archive import fetch_daily_series
from weather_dashboard.chart import build_temperature_figure, render_table_html
from weather_dashboard.config import default_config, load_config
from weather_dashboard.dashboard import DashboardController
from weather_dashboard.pagination import PAGE_SIZE_OPTIONS


# ─────────────────────────────────────────────────────────────
# Page config — must be first Streamlit call
# ─────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Weather Analytics",
    page_icon="🌡",
    layout="wide",
    initial_sidebar_state="collapsed",
)


# ─────────────────────────────────────────────────────────────
# CSS injection
# ─────────────────────────────────────────────────────────────

CUSTOM_CSS = """
<style>
  /* ── Reset Streamlit chrome ── */
  #MainMenu, footer, header { visibility: hidden; }
  .block-container { padding-top: 2rem; padding-bottom: 4rem; max-width: 1100px; }

  /* ── Typography & base ── */
  html, body, [class*="css"] {
    font-family: -apple-system, BlinkMacSystemFont, "SF Pro Display",
                 "SF Pro Text", "Segoe UI", Roboto, sans-serif;
    background-color: #0a0a0a;
    color: #f5f5f7;
  }

  .wa-title {
    font-size: 2.4rem;
    font-weight: 700;
    letter-spacing: -0.03em;
    text-align: center;
    margin-bottom: 0.25rem;
  }
  .wa-subtitle {
    color: #8e8e93;
    text-align: center;
    margin-bottom: 2rem;
  }

  /* ── Primary button ── */
  .stButton > button {
    background: #0a84ff !important;
    color: #ffffff !important;
    border: none !important;
    border-radius: 980px !important;
    font-weight: 600 !important;
    transition: opacity 0.15s ease;
  }
  .stButton > button:hover { opacity: 0.85; }
  .stButton > button:disabled { opacity: 0.4; }

  /* ── Error card ── */
  .error-card {
    background: rgba(255, 69, 58, 0.1);
    border: 1px solid rgba(255, 69, 58, 0.3);
    border-radius: 12px;
    color: #ff453a;
    font-size: 1rem;
    padding: 16px 24px;
    margin: 1rem 0;
  }

  /* ── Section heading ── */
  .section-label {
    font-size: 0.72rem;
    text-transform: uppercase;
    letter-spacing: 0.1em;
    color: #636366;
    font-weight: 600;
    margin: 1.5rem 0 0.75rem;
  }

  /* ── Results table ── */
  .wa-table { width: 100%; border-collapse: collapse; font-size: 0.9rem; }
  .wa-table th {
    font-size: 0.65rem;
    text-transform: uppercase;
    letter-spacing: 0.1em;
    color: #636366;
    font-weight: 600;
    padding: 8px 12px;
    text-align: right;
    border-bottom: 1px solid #2c2c2e;
  }
  .wa-table th:first-child { text-align: left; }
  .wa-table td {
    padding: 10px 12px;
    color: #f5f5f7;
    text-align: right;
    border-bottom: 1px solid #1c1c1e;
    font-variant-numeric: tabular-nums;
  }
  .wa-table td:first-child { text-align: left; }
  .wa-table tr:hover td { background: #2c2c2e; }

  .page-summary { color: #8e8e93; font-size: 0.85rem; }

  /* ── Footer ── */
  .wa-footer {
    text-align: center;
    color: #48484a;
    font-size: 0.8rem;
    padding: 3rem 0 1rem;
  }
</style>
"""

st.markdown(CUSTOM_CSS, unsafe_allow_html=True)


# ─────────────────────────────────────────────────────────────
# Config + session state initialisation
# ─────────────────────────────────────────────────────────────

try:
    config = load_config()
except FileNotFoundError:
    config = default_config()
except ValueError as e:
    st.warning(f"Ignoring config.toml: {e}")
    config = default_config()

if "controller" not in st.session_state:
    provider = partial(
        fetch_daily_series,
        url=config["provider"]["archive_url"],
        timeout=config["provider"]["timeout_seconds"],
        log_path=Path(config["log"]["path"]),
    )
    st.session_state.controller = DashboardController(
        provider=provider,
        page_size=config["table"]["page_size"],
    )

controller: DashboardController = st.session_state.controller
today = date.today()
defaults = config.get("location", {})


# ─────────────────────────────────────────────────────────────
# SECTION 1: Query form
# ─────────────────────────────────────────────────────────────

st.markdown('<div class="wa-title">Weather Analytics Dashboard</div>', unsafe_allow_html=True)
st.markdown(
    '<div class="wa-subtitle">Historical weather data visualization and analysis</div>',
    unsafe_allow_html=True,
)

lat_col, lon_col, start_col, end_col = st.columns(4)
with lat_col:
    latitude = st.text_input(
        "Latitude",
        value=str(defaults.get("latitude", "")),
        placeholder="e.g., 40.7128",
        help="Range: -90 to 90",
    )
with lon_col:
    longitude = st.text_input(
        "Longitude",
        value=str(defaults.get("longitude", "")),
        placeholder="e.g., -74.0060",
        help="Range: -180 to 180",
    )
with start_col:
    start_date = st.date_input(
        "Start Date",
        value=today - timedelta(days=30),
        max_value=today,
    )
with end_col:
    end_date = st.date_input(
        "End Date",
        value=today,
        min_value=start_date,
        max_value=today,
    )

_, btn_col, _ = st.columns([2, 1, 2])
with btn_col:
    label = "Loading..." if controller.state.is_busy else "Fetch Weather Data"
    if st.button(label, disabled=controller.state.is_busy, use_container_width=True):
        with st.spinner("Fetching weather data..."):
            controller.submit(latitude, longitude, start_date, end_date)

state = controller.state

if state.error:
    st.markdown(f'<div class="error-card">⚠️ {html.escape(state.error)}</div>', unsafe_allow_html=True)


# ─────────────────────────────────────────────────────────────
# SECTION 2: Chart
# ─────────────────────────────────────────────────────────────

if state.has_data:
    units = state.series.units

    st.markdown('<div class="section-label">Temperature trends</div>', unsafe_allow_html=True)
    fig = build_temperature_figure(list(state.chart_points), units)
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})

    # ─────────────────────────────────────────────────────────
    # SECTION 3: Paginated table
    # ─────────────────────────────────────────────────────────

    st.markdown('<div class="section-label">Daily data</div>', unsafe_allow_html=True)

    size_col, _ = st.columns([1, 4])
    with size_col:
        page_size = st.selectbox(
            "Rows per page",
            options=PAGE_SIZE_OPTIONS,
            index=PAGE_SIZE_OPTIONS.index(state.page_size),
        )
    if page_size != state.page_size:
        controller.set_page_size(page_size)
        st.rerun()

    view = state.page_view
    st.markdown(render_table_html(view, units), unsafe_allow_html=True)

    st.markdown(
        f'<div class="page-summary">Showing {view.first_row_number} to '
        f'{view.last_row_number} of {view.total_rows} results</div>',
        unsafe_allow_html=True,
    )

    nav_cols = st.columns(len(view.window) + 2)
    with nav_cols[0]:
        if st.button("‹ Prev", disabled=not view.has_previous, key="page_prev"):
            controller.previous_page()
            st.rerun()
    for col, page in zip(nav_cols[1:-1], view.window):
        with col:
            marker = f"[{page}]" if page == view.page_number else str(page)
            if st.button(marker, key=f"page_{page}"):
                controller.go_to_page(page)
                st.rerun()
    with nav_cols[-1]:
        if st.button("Next ›", disabled=not view.has_next, key="page_next"):
            controller.next_page()
            st.rerun()


# ─────────────────────────────────────────────────────────────
# Footer
# ─────────────────────────────────────────────────────────────

st.markdown(
    '<div class="wa-footer">'
    'Powered by <a href="https://open-meteo.com" style="color:#0a84ff;text-decoration:none;">Open-Meteo</a>'
    ' &nbsp;·&nbsp; Historical Weather API &nbsp;·&nbsp; No API key required'
    '</div>',
    unsafe_allow_html=True,
)
