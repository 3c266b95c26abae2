from datetime import timedelta

import pytest

from healthmon.config.ranges import SAMPLE_RANGES
from healthmon.sim.random_source import NumpyRandomSource
from healthmon.sim.vitals import generate_vital_samples, recent_readings

from conftest import FixedRandom

FIELDS = ["heart_rate", "bp_systolic", "bp_diastolic", "temperature", "oxygen_saturation"]


# 1) Batch shape
@pytest.mark.parametrize("count", [0, 1, 2, 24, 100])
def test_batch_length_and_ascending_timestamps(count, now):
    samples = generate_vital_samples(count, 3600, now, NumpyRandomSource(seed=7))

    assert len(samples) == count
    for a, b in zip(samples, samples[1:]):
        assert a.timestamp < b.timestamp
        assert b.timestamp - a.timestamp == timedelta(hours=1)
    if samples:
        assert samples[-1].timestamp == now


def test_every_field_within_range(now):
    samples = generate_vital_samples(500, 60, now, NumpyRandomSource(seed=3))
    for s in samples:
        for f in FIELDS:
            r = SAMPLE_RANGES[f]
            assert r.low <= getattr(s, f) < r.high, f


def test_fixed_random_hits_lower_bounds(now):
    s = generate_vital_samples(1, 3600, now, FixedRandom(0.0))[0]
    assert s.heart_rate == 65
    assert s.bp_systolic == 110
    assert s.bp_diastolic == 70
    assert s.temperature == pytest.approx(36.1)
    assert s.oxygen_saturation == 95


# 2) Determinism
def test_same_seed_same_batch(now):
    a = generate_vital_samples(24, 3600, now, NumpyRandomSource(seed=42))
    b = generate_vital_samples(24, 3600, now, NumpyRandomSource(seed=42))
    assert a == b


def test_different_seed_different_batch(now):
    a = generate_vital_samples(24, 3600, now, NumpyRandomSource(seed=1))
    b = generate_vital_samples(24, 3600, now, NumpyRandomSource(seed=2))
    assert a != b


def test_default_random_source_is_used(now):
    samples = generate_vital_samples(3, 3600, now)
    assert len(samples) == 3


# 3) Bad inputs
@pytest.mark.parametrize("count, interval", [(-1, 3600), (5, 0), (5, -10)])
def test_invalid_arguments_raise(count, interval, now):
    with pytest.raises(ValueError):
        generate_vital_samples(count, interval, now, FixedRandom())


# 4) Recent readings view
def test_recent_readings_most_recent_first(now):
    samples = generate_vital_samples(24, 3600, now, NumpyRandomSource(seed=5))
    recent = recent_readings(samples, 4)

    assert recent == [samples[-1], samples[-2], samples[-3], samples[-4]]
    assert recent[0].timestamp == now


@pytest.mark.parametrize("count, n, expected", [(2, 4, 2), (0, 4, 0), (10, 0, 0)])
def test_recent_readings_short_batches(count, n, expected, now):
    samples = generate_vital_samples(count, 3600, now, FixedRandom())
    assert len(recent_readings(samples, n)) == expected


def test_to_dict_uses_iso_timestamp(now):
    s = generate_vital_samples(1, 3600, now, FixedRandom())[0]
    d = s.to_dict()
    assert d["timestamp"] == "2024-05-01T12:00:00"
    assert set(d) == {"timestamp", *FIELDS}
