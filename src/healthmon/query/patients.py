from __future__ import annotations

from typing import List, Sequence

from healthmon.models.app_types import (
    RISK_FILTER_ALL,
    Patient,
    PatientPage,
    RosterCounts,
)

DISPLAY_LIMIT = 12


def matches_search(patient: Patient, search_text: str) -> bool:
    if not search_text:
        return True
    needle = search_text.lower()
    return (
        needle in patient.name.lower()
        or needle in patient.id.lower()
        or needle in patient.email.lower()
    )


def matches_risk(patient: Patient, risk_filter: str) -> bool:
    return risk_filter == RISK_FILTER_ALL or patient.risk_level == risk_filter


def filter_patients(roster: Sequence[Patient], search_text: str, risk_filter: str) -> List[Patient]:
    """Patients matching both the search text and the risk facet, in roster order."""
    return [
        p for p in roster
        if matches_search(p, search_text) and matches_risk(p, risk_filter)
    ]


def truncate(patients: Sequence[Patient], limit: int = DISPLAY_LIMIT) -> PatientPage:
    """First `limit` patients for display; `truncated` tells the UI to offer "view all"."""
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    return PatientPage(
        items=tuple(patients[:limit]),
        total=len(patients),
        truncated=len(patients) > limit,
    )


def roster_counts(roster: Sequence[Patient]) -> RosterCounts:
    return RosterCounts(
        total=len(roster),
        active=sum(1 for p in roster if p.status == "Active"),
        critical=sum(1 for p in roster if p.status == "Critical"),
    )
