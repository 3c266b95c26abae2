from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Dict, Sequence

from healthmon.models.app_types import VitalSample
from healthmon.scoring.metrics import evaluate_batch, metric_alerts, summarize_vitals


def build_health_report(samples: Sequence[VitalSample], generated_at: datetime) -> Dict[str, Any]:
    """
    Exportable snapshot of the current batch:
    summary stats + current metric cards + alerts + every reading.
    """
    metrics = evaluate_batch(samples)
    return {
        "generatedAt": generated_at.isoformat(),
        "summary": summarize_vitals(samples).to_dict(),
        "metrics": [m.to_dict() for m in metrics],
        "alerts": [m.id for m in metric_alerts(metrics)],
        "readings": [s.to_dict() for s in samples],
    }


def report_json(report: Dict[str, Any]) -> str:
    return json.dumps(report, indent=2)


def report_file_name(generated_at: datetime) -> str:
    return f"health_report_{generated_at.strftime('%Y-%m-%d_%H%M%S')}.json"
