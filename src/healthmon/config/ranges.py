from __future__ import annotations

from typing import Dict

from healthmon.models.app_types import Ranges, Thresholds


# Uniform sampling ranges for the hourly vitals batch
SAMPLE_RANGES: Dict[str, Ranges] = {
    "heart_rate": Ranges(65, 95),
    "bp_systolic": Ranges(110, 140),
    "bp_diastolic": Ranges(70, 90),
    "temperature": Ranges(36.1, 37.6),
    "oxygen_saturation": Ranges(95, 100),
}

# Ranges for the vitals embedded in each directory record.
# heart_rate / bp are integer draws.
PATIENT_VITAL_RANGES: Dict[str, Ranges] = {
    "heart_rate": Ranges(60, 100),
    "bp_systolic": Ranges(110, 150),
    "bp_diastolic": Ranges(70, 90),
    "temperature": Ranges(36.1, 37.6),
    "oxygen_saturation": Ranges(95, 100),
}

# Keyed by HealthMetric.id
METRIC_THRESHOLDS: Dict[str, Thresholds] = {
    "heart-rate": Thresholds(warning_above=100, warning_below=60),
    "blood-pressure": Thresholds(warning_above=140),
    "temperature": Thresholds(warning_above=37.5),
    "oxygen": Thresholds(critical_below=95),
}

# Minimum |delta| between the last two samples before a trend is up/down
TREND_DEAD_BAND: Dict[str, float] = {
    "heart-rate": 1.0,
    "blood-pressure": 1.0,
    "temperature": 0.1,
    "oxygen": 0.2,
}

# Shown when there is no sample yet
FALLBACK_VITALS: Dict[str, float] = {
    "heart_rate": 72,
    "bp_systolic": 120,
    "bp_diastolic": 80,
    "temperature": 36.8,
    "oxygen_saturation": 98,
}

NORMAL_RANGE_LABELS: Dict[str, str] = {
    "heart-rate": "60-100 BPM",
    "blood-pressure": "120/80 mmHg",
    "temperature": "36.1-37.2°C",
    "oxygen": "95-100%",
}


# Directory generation pools
FIRST_NAMES = [
    "John", "Jane", "Michael", "Sarah", "David", "Emily", "Robert", "Lisa",
    "James", "Maria", "William", "Jessica", "Richard", "Ashley", "Thomas", "Amanda",
]
LAST_NAMES = [
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis",
    "Rodriguez", "Martinez", "Hernandez", "Lopez", "Gonzalez", "Wilson", "Anderson", "Thomas",
]
BLOOD_TYPES = ["A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-"]
ALLERGIES = ["None", "Penicillin", "Shellfish", "Nuts", "Dairy", "Pollen"]

AGE_RANGE = (18, 88)
VISIT_WINDOW_DAYS = 30
NEXT_APPOINTMENT_PROB = 0.7
