# evaluate_metrics(): latest sample -> 4 HealthMetric cards (status + trend)
# summarize_vitals(): aggregate stats over the whole batch for the chart panel
# metric_alerts(): the non-normal cards, worst first

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from healthmon.config.ranges import (
    FALLBACK_VITALS,
    METRIC_THRESHOLDS,
    NORMAL_RANGE_LABELS,
    TREND_DEAD_BAND,
)
from healthmon.models.app_types import HealthMetric, VitalSample, VitalsSummary
from healthmon.scoring.severity import metric_status, severity_rank, trend_direction


# (metric id, display name, VitalSample field), in presentation order
METRIC_FIELDS = [
    ("heart-rate", "Heart Rate", "heart_rate"),
    ("blood-pressure", "Blood Pressure", "bp_systolic"),
    ("temperature", "Body Temperature", "temperature"),
    ("oxygen", "Blood Oxygen", "oxygen_saturation"),
]


def _value(sample: Optional[VitalSample], field: str) -> Optional[float]:
    if sample is None:
        return None
    return float(getattr(sample, field))


def _unit(metric_id: str, latest: Optional[VitalSample]) -> str:
    if metric_id == "heart-rate":
        return "BPM"
    if metric_id == "blood-pressure":
        dia = _value(latest, "bp_diastolic")
        if dia is None:
            dia = FALLBACK_VITALS["bp_diastolic"]
        return f"/{dia:.0f} mmHg"
    if metric_id == "temperature":
        return "°C"
    return "%"


def evaluate_metrics(
    latest: Optional[VitalSample],
    previous: Optional[VitalSample] = None,
) -> List[HealthMetric]:
    """
    One HealthMetric per vital type, always in METRIC_FIELDS order.

    latest=None (empty history) falls back to FALLBACK_VITALS with a stable trend.
    Trend needs both samples; otherwise it is "stable".
    """
    metrics: List[HealthMetric] = []
    for metric_id, name, field in METRIC_FIELDS:
        value = _value(latest, field)
        if value is None:
            value = float(FALLBACK_VITALS[field])
            prev_value = None
        else:
            prev_value = _value(previous, field)

        metrics.append(
            HealthMetric(
                id=metric_id,
                name=name,
                value=value,
                unit=_unit(metric_id, latest),
                normal_range=NORMAL_RANGE_LABELS[metric_id],
                status=metric_status(value, METRIC_THRESHOLDS[metric_id]),
                trend=trend_direction(value, prev_value, TREND_DEAD_BAND[metric_id]),
            )
        )
    return metrics


def evaluate_batch(samples: Sequence[VitalSample]) -> List[HealthMetric]:
    """evaluate_metrics() on the last two samples of a batch (oldest first)."""
    latest = samples[-1] if samples else None
    previous = samples[-2] if len(samples) >= 2 else None
    return evaluate_metrics(latest, previous)


def metric_alerts(metrics: Sequence[HealthMetric]) -> List[HealthMetric]:
    flagged = [m for m in metrics if m.status != "normal"]
    return sorted(flagged, key=lambda m: severity_rank(m.status), reverse=True)


def samples_frame(samples: Sequence[VitalSample]) -> pd.DataFrame:
    cols = ["timestamp", "heart_rate", "bp_systolic", "bp_diastolic", "temperature", "oxygen_saturation"]
    if not samples:
        return pd.DataFrame(columns=cols)
    rows: List[Dict[str, Any]] = [
        {c: getattr(s, c) for c in cols} for s in samples
    ]
    df = pd.DataFrame(rows, columns=cols)
    df["timestamp"] = pd.to_datetime(df["timestamp"])
    return df


def summarize_vitals(samples: Sequence[VitalSample]) -> VitalsSummary:
    df = samples_frame(samples)
    if df.empty:
        return VitalsSummary()

    return VitalsSummary(
        sample_count=int(len(df)),
        avg_heart_rate=round(float(df["heart_rate"].mean()), 1),
        peak_bp_systolic=round(float(df["bp_systolic"].max()), 1),
        peak_bp_diastolic=round(float(df["bp_diastolic"].max()), 1),
        min_temperature=round(float(df["temperature"].min()), 1),
        avg_oxygen_saturation=round(float(df["oxygen_saturation"].mean()), 1),
        window=[samples[0].timestamp.isoformat(), samples[-1].timestamp.isoformat()],
    )
