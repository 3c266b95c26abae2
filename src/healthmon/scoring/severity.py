from __future__ import annotations
from typing import Iterable, Optional

from healthmon.models.app_types import Thresholds


def metric_status(value: float, t: Thresholds) -> str:
    if t.critical_above is not None and value > t.critical_above:
        return "critical"
    if t.critical_below is not None and value < t.critical_below:
        return "critical"
    if t.warning_above is not None and value > t.warning_above:
        return "warning"
    if t.warning_below is not None and value < t.warning_below:
        return "warning"
    return "normal"


def trend_direction(latest: float, previous: Optional[float], dead_band: float) -> str:
    if previous is None:
        return "stable"
    delta = latest - previous
    if delta > dead_band:
        return "up"
    if delta < -dead_band:
        return "down"
    return "stable"


def severity_rank(status: str) -> int:
    return {"normal": 0, "warning": 1, "critical": 2}[status]


def overall_status(statuses: Iterable[str]) -> str:
    worst = "normal"
    for s in statuses:
        if severity_rank(s) > severity_rank(worst):
            worst = s
    return worst
