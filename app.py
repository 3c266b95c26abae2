"""HealthMonitor Streamlit app.

This file is the Streamlit *entrypoint*.

What this app does
------------------
- Simulates a 24h batch of hourly vitals (HR, BP, Temp, SpO2), regenerated every 30 s.
- Derives status/trend cards from the newest readings.
- Generates a 25-patient directory once per session, searchable by name/ID/email
  and filterable by risk level.

How it runs
-----------
    `python -m streamlit run app.py`

Settings come from HEALTHMON_* environment variables (or a `.env` file).
"""

import os
import sys

import streamlit as st
from streamlit_autorefresh import st_autorefresh

# Ensure `src/` is on sys.path when running from a plain checkout.
SRC_DIR = os.path.join(os.path.dirname(__file__), "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from healthmon.config.settings import configure_logging, load_settings
from healthmon.state.init import ensure_init
from healthmon.ui import render as ui_render
from healthmon.ui import styles as ui_styles


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)

    st.set_page_config(page_title="HealthMonitor Pro", layout="wide")
    ui_styles.inject()

    # Timers mutate the controller in the background; this rerun repaints it.
    st_autorefresh(interval=int(settings.clock_interval_sec * 1000), key="refresh")

    ctl = ensure_init(settings)

    # one read per rerun, so every card shows the same batch
    snap = ctl.snapshot()
    ui_render.navbar(snap)
    ui_render.render_metrics(snap)
    ui_render.render_overview(snap)
    ui_render.render_recent_readings(snap)
    ui_render.render_directory(ctl)


if __name__ == "__main__":
    main()
