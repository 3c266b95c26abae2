from datetime import date, datetime

import pytest

from healthmon.models.app_types import CurrentVitals, Patient
from healthmon.query.patients import (
    DISPLAY_LIMIT,
    filter_patients,
    matches_search,
    roster_counts,
    truncate,
)
from healthmon.sim.directory import generate_patients
from healthmon.sim.random_source import NumpyRandomSource

VITALS = CurrentVitals(heart_rate=72, blood_pressure="120/80", temperature=36.8, oxygen_saturation=98)


def make_patient(i, name="John Smith", risk="Low", status="Active"):
    first, last = name.split()
    return Patient(
        id=f"PAT-{i:03d}",
        name=name,
        age=40,
        gender="Male",
        email=f"{first.lower()}.{last.lower()}@email.com",
        phone="+1 (555) 555-5555",
        address="1 Main St, City, State 12345",
        blood_type="O+",
        allergies=("None",),
        last_visit=date(2024, 4, 20),
        next_appointment=None,
        risk_level=risk,
        status=status,
        current_vitals=VITALS,
    )


@pytest.fixture
def roster():
    return [
        make_patient(1, "John Smith", "Low", "Active"),
        make_patient(2, "Jane Brown", "Medium", "Inactive"),
        make_patient(3, "Lisa Smith", "High", "Critical"),
        make_patient(4, "David Jones", "Low", "Critical"),
        make_patient(5, "Maria Lopez", "High", "Critical"),
    ]


# 1) Basic filter properties
def test_empty_filters_return_full_roster_in_order(roster):
    assert filter_patients(roster, "", "All") == roster


def test_filter_is_idempotent(roster):
    assert filter_patients(roster, "smith", "Low") == filter_patients(roster, "smith", "Low")


def test_filter_does_not_mutate_roster(roster):
    before = list(roster)
    filter_patients(roster, "jane", "Medium")
    assert roster == before


def test_empty_roster():
    assert filter_patients([], "john", "High") == []
    assert filter_patients([], "", "All") == []


# 2) Search
@pytest.mark.parametrize("text", ["john", "SMITH", "John Smith", "PAT-001", "pat-001", "john.smith@", "EMAIL.COM"])
def test_search_is_case_insensitive_over_name_id_email(text):
    assert matches_search(make_patient(1, "John Smith"), text)


@pytest.mark.parametrize("text", ["johnny", "PAT-002", "gmail"])
def test_search_non_matches(text):
    assert not matches_search(make_patient(1, "John Smith"), text)


def test_search_preserves_roster_order(roster):
    result = filter_patients(roster, "smith", "All")
    assert [p.id for p in result] == ["PAT-001", "PAT-003"]


def test_no_results_is_empty_list(roster):
    assert filter_patients(roster, "zzz", "All") == []


# 3) Risk facet
@pytest.mark.parametrize("risk, ids", [
    ("Low", ["PAT-001", "PAT-004"]),
    ("Medium", ["PAT-002"]),
    ("High", ["PAT-003", "PAT-005"]),
])
def test_risk_filter(roster, risk, ids):
    assert [p.id for p in filter_patients(roster, "", risk)] == ids


def test_search_and_risk_combined(roster):
    assert [p.id for p in filter_patients(roster, "smith", "High")] == ["PAT-003"]


def test_unknown_risk_matches_nothing(roster):
    assert filter_patients(roster, "", "Extreme") == []


# 4) Truncation
def test_truncate_fifteen_to_twelve():
    patients = [make_patient(i) for i in range(1, 16)]
    page = truncate(patients, 12)

    assert len(page.items) == 12
    assert [p.id for p in page.items] == [f"PAT-{i:03d}" for i in range(1, 13)]
    assert page.total == 15
    assert page.truncated is True
    assert len(patients) == 15


@pytest.mark.parametrize("n, truncated", [(0, False), (11, False), (12, False), (13, True)])
def test_truncate_flag(n, truncated):
    page = truncate([make_patient(i) for i in range(1, n + 1)])
    assert page.truncated is truncated
    assert len(page.items) == min(n, DISPLAY_LIMIT)
    assert page.total == n


def test_truncate_negative_limit_raises():
    with pytest.raises(ValueError):
        truncate([], -1)


# 5) Counts
def test_roster_counts(roster):
    c = roster_counts(roster)
    assert (c.total, c.active, c.critical) == (5, 1, 3)


def test_roster_counts_empty():
    c = roster_counts([])
    assert (c.total, c.active, c.critical) == (0, 0, 0)


# 6) Scenario: generated roster, High filter
@pytest.mark.parametrize("seed", [1, 2, 3])
def test_high_filter_on_generated_roster(seed):
    roster = generate_patients(25, datetime(2024, 5, 1), NumpyRandomSource(seed=seed))
    result = filter_patients(roster, "", "High")

    assert len(result) == sum(1 for p in roster if p.risk_level == "High")
    assert all(p.status == "Critical" for p in result)
