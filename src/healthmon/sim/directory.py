from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Optional

from healthmon.config.ranges import (
    AGE_RANGE,
    ALLERGIES,
    BLOOD_TYPES,
    FIRST_NAMES,
    LAST_NAMES,
    NEXT_APPOINTMENT_PROB,
    PATIENT_VITAL_RANGES,
    VISIT_WINDOW_DAYS,
)
from healthmon.models.app_types import (
    GENDERS,
    PATIENT_STATUSES,
    RISK_LEVELS,
    CurrentVitals,
    Patient,
)
from healthmon.sim.random_source import NumpyRandomSource, RandomSource, randrange, uniform


def patient_id(index: int) -> str:
    """1-based index -> PAT-001 style id."""
    return f"PAT-{index:03d}"


def generate_patients(
    count: int,
    now: datetime,
    rng: Optional[RandomSource] = None,
) -> List[Patient]:
    """Synthetic roster PAT-001..PAT-{count}. High risk patients are always Critical."""
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if rng is None:
        rng = NumpyRandomSource()
    return [_build_patient(i, now, rng) for i in range(1, count + 1)]


def _build_patient(index: int, now: datetime, rng: RandomSource) -> Patient:
    first = rng.choice(FIRST_NAMES)
    last = rng.choice(LAST_NAMES)
    age = randrange(rng, *AGE_RANGE)

    hr_r = PATIENT_VITAL_RANGES["heart_rate"]
    sys_r = PATIENT_VITAL_RANGES["bp_systolic"]
    dia_r = PATIENT_VITAL_RANGES["bp_diastolic"]
    heart_rate = randrange(rng, int(hr_r.low), int(hr_r.high))
    systolic = randrange(rng, int(sys_r.low), int(sys_r.high))
    diastolic = randrange(rng, int(dia_r.low), int(dia_r.high))

    risk_level = rng.choice(RISK_LEVELS)
    gender = GENDERS[0] if rng.next_float() > 0.5 else GENDERS[1]

    phone = "+1 ({}) {}-{}".format(
        randrange(rng, 100, 1000), randrange(rng, 100, 1000), randrange(rng, 1000, 10000)
    )
    address = "{} {} St, City, State {}".format(
        randrange(rng, 1, 10000), last, randrange(rng, 10000, 100000)
    )

    window = timedelta(days=VISIT_WINDOW_DAYS)
    last_visit = (now - rng.next_float() * window).date()
    next_appointment = None
    if rng.next_float() < NEXT_APPOINTMENT_PROB:
        next_appointment = (now + rng.next_float() * window).date()

    temp_r = PATIENT_VITAL_RANGES["temperature"]
    spo2_r = PATIENT_VITAL_RANGES["oxygen_saturation"]
    vitals = CurrentVitals(
        heart_rate=heart_rate,
        blood_pressure=f"{systolic}/{diastolic}",
        temperature=uniform(rng, temp_r.low, temp_r.high),
        oxygen_saturation=uniform(rng, spo2_r.low, spo2_r.high),
    )

    # drawn for every record, High risk overrides it
    status = rng.choice(PATIENT_STATUSES)
    if risk_level == "High":
        status = "Critical"

    return Patient(
        id=patient_id(index),
        name=f"{first} {last}",
        age=age,
        gender=gender,
        email=f"{first.lower()}.{last.lower()}@email.com",
        phone=phone,
        address=address,
        blood_type=rng.choice(BLOOD_TYPES),
        allergies=(rng.choice(ALLERGIES),),
        last_visit=last_visit,
        next_appointment=next_appointment,
        risk_level=risk_level,
        status=status,
        current_vitals=vitals,
    )
