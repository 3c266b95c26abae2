def status_class(status: str) -> str:
    return {"normal": "val-ok", "warning": "val-mod", "critical": "val-sev"}[status]


def trend_arrow(trend: str) -> str:
    return {"up": "▲", "down": "▼", "stable": ""}[trend]


def patient_status_class(status: str) -> str:
    return {"Active": "pill-ok", "Inactive": "pill-muted", "Critical": "pill-sev"}.get(status, "pill-muted")


def risk_class(risk_level: str) -> str:
    return {"Low": "pill-ok", "Medium": "pill-mod", "High": "pill-sev"}.get(risk_level, "pill-muted")


def metric_value_text(metric_id: str, value: float) -> str:
    # blood pressure reads as "120/80 mmHg", so the systolic part is a whole number
    if metric_id == "blood-pressure":
        return f"{value:.0f}"
    return f"{value:.1f}"
