from __future__ import annotations

import streamlit as st

from healthmon.models.app_types import RISK_FILTER_ALL, RISK_LEVELS, DashboardSnapshot, Patient
from healthmon.scoring.metrics import metric_alerts, summarize_vitals
from healthmon.scoring.report import build_health_report, report_file_name, report_json
from healthmon.state.controller import DashboardController
from healthmon.sim.vitals import recent_readings
from healthmon.ui.charts import render_vitals_trend
from healthmon.ui.helpers import (
    metric_value_text,
    patient_status_class,
    risk_class,
    status_class,
    trend_arrow,
)

RISK_OPTIONS = [RISK_FILTER_ALL, *RISK_LEVELS]


def navbar(snap: DashboardSnapshot) -> None:
    left, right = st.columns([4, 1])

    with left:
        st.markdown("### HealthMonitor Pro")
        st.caption("Real-time Health Dashboard")

    with right:
        now = snap.current_time
        st.markdown(f"**{now.strftime('%H:%M:%S')}**")
        st.caption(now.strftime("%Y-%m-%d"))


def render_metrics(snap: DashboardSnapshot) -> None:
    st.markdown("#### Current Status")
    cols = st.columns(4)
    for col, m in zip(cols, snap.metrics):
        with col:
            st.markdown(
                f"""
                <div class="rm-card rm-v">
                  <div class="lab">{m.name}</div>
                  <div class="val {status_class(m.status)}">{metric_value_text(m.id, m.value)}
                    <span style="font-size:13px">{m.unit}</span> {trend_arrow(m.trend)}</div>
                  <div class="rm-sub">Normal: {m.normal_range} · {m.status}</div>
                </div>
                """,
                unsafe_allow_html=True,
            )


def render_overview(snap: DashboardSnapshot) -> None:
    left, right = st.columns([3, 1])

    with left:
        st.markdown("**Vital Signs Trends (24h)**")
        render_vitals_trend(snap.samples)

        s = summarize_vitals(snap.samples)
        if s.sample_count:
            c1, c2, c3, c4 = st.columns(4)
            c1.metric("Avg HR", f"{s.avg_heart_rate:.0f} BPM")
            c2.metric("Peak BP", f"{s.peak_bp_systolic:.0f}/{s.peak_bp_diastolic:.0f}")
            c3.metric("Min Temp", f"{s.min_temperature:.1f}°C")
            c4.metric("O2 Sat", f"{s.avg_oxygen_saturation:.1f}%")

    with right:
        st.markdown("**Alerts**")
        alerts = metric_alerts(snap.metrics)
        if not alerts:
            st.success("All vitals normal")
        for m in alerts:
            msg = f"{m.name}: {metric_value_text(m.id, m.value)} {m.unit} (normal {m.normal_range})"
            if m.status == "critical":
                st.error(msg)
            else:
                st.warning(msg)

        report = build_health_report(snap.samples, snap.current_time)
        st.download_button(
            "Export Health Report",
            data=report_json(report),
            file_name=report_file_name(snap.current_time),
            mime="application/json",
            key="report_json",
            use_container_width=True,
        )


def render_recent_readings(snap: DashboardSnapshot) -> None:
    st.markdown("**Recent Readings**")
    readings = recent_readings(list(snap.samples), 4)
    if not readings:
        st.caption("(no readings yet)")
        return

    cols = st.columns(len(readings))
    for col, r in zip(cols, readings):
        with col:
            st.markdown(
                f"""
                <div class="rm-card">
                  <div class="rm-sub">{r.timestamp.strftime('%H:%M:%S')}</div>
                  <div>HR <b>{r.heart_rate:.0f}</b> BPM</div>
                  <div>BP <b>{r.bp_systolic:.0f}/{r.bp_diastolic:.0f}</b></div>
                  <div>Temp <b>{r.temperature:.1f}</b>°C</div>
                  <div>O2 <b>{r.oxygen_saturation:.1f}</b>%</div>
                </div>
                """,
                unsafe_allow_html=True,
            )


def _patient_card(p: Patient) -> None:
    v = p.current_vitals
    next_appt = (
        f"<div class='rm-sub'>Next: {p.next_appointment.isoformat()}</div>" if p.next_appointment else ""
    )
    st.markdown(
        f"""
        <div class="rm-card">
          <div class="rm-id-left">
            <div class="rm-avatar">{p.initials}</div>
            <div>
              <div class="rm-name">{p.name}</div>
              <div class="rm-sub">{p.id}</div>
            </div>
          </div>
          <div style="margin:6px 0">
            <span class="pill {patient_status_class(p.status)}">{p.status}</span>
            <span class="pill {risk_class(p.risk_level)}">{p.risk_level} Risk</span>
          </div>
          <div class="rm-sub">{p.age} years · {p.gender} · {p.blood_type}</div>
          <div class="rm-sub">{p.email}</div>
          <div class="rm-sub">{p.phone}</div>
          <div class="rm-sub">Allergies: {", ".join(p.allergies)}</div>
          <div style="margin-top:6px; font-size:13px">
            HR <b>{v.heart_rate}</b> · BP <b>{v.blood_pressure}</b> ·
            Temp <b>{v.temperature:.1f}</b> · O2 <b>{v.oxygen_saturation:.1f}%</b>
          </div>
          <div class="rm-sub">Last visit: {p.last_visit.isoformat()}</div>
          {next_appt}
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_directory(ctl: DashboardController) -> None:
    counts = ctl.counts()
    st.markdown("#### Patient Management")
    st.caption(f"{counts.total} Total Patients · {counts.active} Active · {counts.critical} Critical")

    search_col, risk_col = st.columns([3, 1])
    with search_col:
        st.text_input(
            "Search",
            value=ctl.search_text,
            key="search_text",
            placeholder="Search patients by name, ID, or email...",
            on_change=lambda: ctl.set_search_text(st.session_state.search_text),
        )
    with risk_col:
        st.selectbox(
            "Risk level",
            RISK_OPTIONS,
            index=RISK_OPTIONS.index(ctl.risk_filter),
            key="risk_filter",
            format_func=lambda r: "All Risk Levels" if r == RISK_FILTER_ALL else f"{r} Risk",
            on_change=lambda: ctl.set_risk_filter(st.session_state.risk_filter),
        )

    show_all = st.session_state.get("show_all_patients", False)
    page = ctl.page(limit=len(ctl.roster) if show_all else None)

    if page.total == 0:
        st.info("No patients found. Try adjusting your search or filter criteria.")
        return

    cols = st.columns(3)
    for i, p in enumerate(page.items):
        with cols[i % 3]:
            _patient_card(p)

    if page.truncated:
        if st.button(f"View All {page.total} Patients", key="view_all"):
            st.session_state.show_all_patients = True
            st.rerun()
    elif show_all and page.total > ctl.settings.display_limit:
        if st.button("Show fewer", key="view_fewer"):
            st.session_state.show_all_patients = False
            st.rerun()
