import json
from datetime import datetime

import pytest

from healthmon.scoring.report import build_health_report, report_file_name, report_json
from healthmon.sim.random_source import NumpyRandomSource
from healthmon.sim.vitals import generate_vital_samples
from healthmon.ui.helpers import metric_value_text, risk_class, status_class, trend_arrow

GENERATED = datetime(2024, 5, 1, 12, 0, 0)


def test_report_structure():
    samples = generate_vital_samples(24, 3600, GENERATED, NumpyRandomSource(seed=3))
    report = build_health_report(samples, GENERATED)

    assert set(report) == {"generatedAt", "summary", "metrics", "alerts", "readings"}
    assert report["generatedAt"] == "2024-05-01T12:00:00"
    assert report["summary"]["sample_count"] == 24
    assert [m["id"] for m in report["metrics"]] == ["heart-rate", "blood-pressure", "temperature", "oxygen"]
    assert report["readings"][-1]["timestamp"] == "2024-05-01T12:00:00"
    # generated ranges never breach a threshold except temperature > 37.5
    assert set(report["alerts"]) <= {"temperature"}


def test_report_for_empty_batch():
    report = build_health_report([], GENERATED)
    assert report["readings"] == []
    assert report["summary"]["avg_heart_rate"] is None
    assert [m["value"] for m in report["metrics"]] == [72, 120, 36.8, 98]


def test_report_json_round_trip():
    samples = generate_vital_samples(2, 3600, GENERATED, NumpyRandomSource(seed=3))
    text = report_json(build_health_report(samples, GENERATED))
    assert json.loads(text)["summary"]["sample_count"] == 2


def test_report_file_name():
    assert report_file_name(GENERATED) == "health_report_2024-05-01_120000.json"


def test_ui_helper_classes():
    assert status_class("normal") == "val-ok"
    assert status_class("warning") == "val-mod"
    assert status_class("critical") == "val-sev"
    assert trend_arrow("stable") == ""
    assert risk_class("High") == "pill-sev"
    assert risk_class("unknown") == "pill-muted"


@pytest.mark.parametrize("metric_id, value, expected", [
    ("blood-pressure", 123.4, "123"),
    ("blood-pressure", 139.6, "140"),
    ("heart-rate", 72.25, "72.2"),
    ("temperature", 36.84, "36.8"),
    ("oxygen", 98.0, "98.0"),
])
def test_metric_value_text(metric_id, value, expected):
    assert metric_value_text(metric_id, value) == expected
