from __future__ import annotations

from typing import Sequence

import altair as alt
import pandas as pd
import streamlit as st

from healthmon.models.app_types import VitalSample
from healthmon.scoring.metrics import samples_frame

SERIES_LABELS = {
    "heart_rate": "Heart Rate (bpm)",
    "bp_systolic": "BP Systolic (mmHg)",
    "bp_diastolic": "BP Diastolic (mmHg)",
    "temperature": "Temperature (°C)",
    "oxygen_saturation": "SpO2 (%)",
}


def long_frame(samples: Sequence[VitalSample]) -> pd.DataFrame:
    df = samples_frame(samples)
    return df.melt(id_vars="timestamp", var_name="series", value_name="value").assign(
        series=lambda d: d["series"].map(SERIES_LABELS)
    )


def render_vitals_trend(samples: Sequence[VitalSample]) -> None:
    if not samples:
        st.info("No vitals yet.")
        return

    df = long_frame(samples)

    # one small panel per vital, each with its own y domain
    chart = (
        alt.Chart(df)
        .mark_line(interpolate="monotone", strokeWidth=2, point=alt.OverlayMarkDef(size=16))
        .encode(
            x=alt.X("timestamp:T", axis=alt.Axis(format="%H:%M", title=None)),
            y=alt.Y("value:Q", title=None, scale=alt.Scale(zero=False)),
            tooltip=[
                alt.Tooltip("timestamp:T", title="Time", format="%H:%M"),
                alt.Tooltip("value:Q", title="Value", format=".1f"),
            ],
        )
        .properties(height=110)
        .facet(row=alt.Row("series:N", title=None, header=alt.Header(labelAngle=0, labelAlign="left")))
        .resolve_scale(y="independent")
    )
    st.altair_chart(chart, use_container_width=True)
