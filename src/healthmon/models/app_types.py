from __future__ import annotations

from dataclasses import dataclass, asdict, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple


# Status / facet vocabularies shared by the core and the UI
METRIC_STATUSES = ("normal", "warning", "critical")
TRENDS = ("up", "down", "stable")
RISK_LEVELS = ("Low", "Medium", "High")
RISK_FILTER_ALL = "All"
PATIENT_STATUSES = ("Active", "Inactive", "Critical")
GENDERS = ("Male", "Female")


@dataclass
class Ranges:
    """Uniform sampling interval [low, high)."""
    low: float
    high: float


@dataclass
class Thresholds:
    """
    Status thresholds for one vital type. A value strictly beyond a bound
    takes that status; critical bounds are checked before warning bounds.
    """
    warning_above: Optional[float] = None
    warning_below: Optional[float] = None
    critical_above: Optional[float] = None
    critical_below: Optional[float] = None


@dataclass(frozen=True)
class VitalSample:
    timestamp: datetime
    heart_rate: float         # bpm
    bp_systolic: float        # mmHg
    bp_diastolic: float       # mmHg
    temperature: float        # °C
    oxygen_saturation: float  # %

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["timestamp"] = self.timestamp.isoformat()
        return d


@dataclass(frozen=True)
class HealthMetric:
    id: str
    name: str
    value: float
    unit: str
    normal_range: str
    status: str = "normal"
    trend: str = "stable"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CurrentVitals:
    heart_rate: int
    blood_pressure: str  # "S/D"
    temperature: float
    oxygen_saturation: float


@dataclass(frozen=True)
class Patient:
    id: str
    name: str
    age: int
    gender: str
    email: str
    phone: str
    address: str
    blood_type: str
    allergies: Tuple[str, ...]
    last_visit: date
    next_appointment: Optional[date]
    risk_level: str
    status: str
    current_vitals: CurrentVitals

    @property
    def initials(self) -> str:
        return "".join(part[0] for part in self.name.split() if part).upper()


@dataclass(frozen=True)
class PatientPage:
    """A display window over a filtered patient sequence."""
    items: Tuple[Patient, ...]
    total: int
    truncated: bool


@dataclass(frozen=True)
class RosterCounts:
    total: int
    active: int
    critical: int


@dataclass
class VitalsSummary:
    sample_count: int = 0
    avg_heart_rate: Optional[float] = None
    peak_bp_systolic: Optional[float] = None
    peak_bp_diastolic: Optional[float] = None
    min_temperature: Optional[float] = None
    avg_oxygen_saturation: Optional[float] = None
    window: List[str] = field(default_factory=list)  # [first_iso, last_iso]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DashboardSnapshot:
    """One consistent read of the clock, the sample batch and the metrics derived from it."""
    current_time: datetime
    samples: Tuple[VitalSample, ...]
    metrics: Tuple[HealthMetric, ...]
