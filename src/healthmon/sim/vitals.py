from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Optional

from healthmon.config.ranges import SAMPLE_RANGES
from healthmon.models.app_types import VitalSample
from healthmon.sim.random_source import NumpyRandomSource, RandomSource, uniform


def generate_vital_samples(
    count: int,
    interval_seconds: float,
    now: datetime,
    rng: Optional[RandomSource] = None,
) -> List[VitalSample]:
    """
    Build a fresh batch of `count` samples, oldest first, the last one stamped `now`
    and each earlier one `interval_seconds` before the next.

    Every field is an independent uniform draw from SAMPLE_RANGES; there is
    no correlation across fields or across time.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if interval_seconds <= 0:
        raise ValueError(f"interval_seconds must be > 0, got {interval_seconds}")
    if rng is None:
        rng = NumpyRandomSource()

    step = timedelta(seconds=interval_seconds)
    samples: List[VitalSample] = []
    for i in range(count - 1, -1, -1):
        samples.append(
            VitalSample(
                timestamp=now - i * step,
                heart_rate=_draw(rng, "heart_rate"),
                bp_systolic=_draw(rng, "bp_systolic"),
                bp_diastolic=_draw(rng, "bp_diastolic"),
                temperature=_draw(rng, "temperature"),
                oxygen_saturation=_draw(rng, "oxygen_saturation"),
            )
        )
    return samples


def _draw(rng: RandomSource, field_name: str) -> float:
    r = SAMPLE_RANGES[field_name]
    return uniform(rng, r.low, r.high)


def recent_readings(samples: List[VitalSample], n: int = 4) -> List[VitalSample]:
    """Last `n` samples, most recent first."""
    if n <= 0:
        return []
    return list(reversed(samples[-n:]))
