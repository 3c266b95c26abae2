from __future__ import annotations

import logging
import threading
import weakref
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Tuple

from healthmon.config.settings import Settings
from healthmon.models.app_types import (
    RISK_FILTER_ALL,
    RISK_LEVELS,
    DashboardSnapshot,
    HealthMetric,
    Patient,
    PatientPage,
    RosterCounts,
    VitalSample,
    VitalsSummary,
)
from healthmon.query.patients import filter_patients, roster_counts, truncate
from healthmon.scoring.metrics import evaluate_batch, metric_alerts, summarize_vitals
from healthmon.scoring.report import build_health_report
from healthmon.sim.directory import generate_patients
from healthmon.sim.random_source import NumpyRandomSource, RandomSource
from healthmon.sim.scheduler import RefreshScheduler, TimerFactory
from healthmon.sim.vitals import generate_vital_samples, recent_readings

logger = logging.getLogger(__name__)


class DashboardController:
    """
    Owns the dashboard state: sample batch, roster, search text, risk filter, clock.

    Derived views (metrics, filtered roster) are recomputed eagerly whenever
    their inputs change, under one lock, and published by swapping a reference.
    Readers never see a partially built batch.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        rng: Optional[RandomSource] = None,
        clock: Callable[[], datetime] = datetime.now,
        timer_factory: TimerFactory = threading.Timer,
    ):
        self.settings = settings or Settings()
        self._rng = rng if rng is not None else NumpyRandomSource(self.settings.seed)
        self._clock = clock
        self._lock = threading.RLock()

        now = clock()
        self._current_time = now
        self._search_text = ""
        self._risk_filter = RISK_FILTER_ALL

        self._roster: Tuple[Patient, ...] = tuple(
            generate_patients(self.settings.roster_size, now, self._rng)
        )
        self._filtered: Tuple[Patient, ...] = ()
        self._refilter()

        self._samples: Tuple[VitalSample, ...] = ()
        self._metrics: Tuple[HealthMetric, ...] = ()
        self.regenerate_vitals(now)

        self._scheduler = RefreshScheduler(
            on_clock=self.tick,
            on_refresh=self.regenerate_vitals,
            clock_interval=self.settings.clock_interval_sec,
            refresh_interval=self.settings.refresh_interval_sec,
            clock=clock,
            timer_factory=timer_factory,
        )
        # an abandoned controller (e.g. a closed Streamlit session) stops its own timers
        weakref.finalize(self, self._scheduler.stop)

    # lifecycle
    def start(self) -> None:
        self._scheduler.start()

    def stop(self) -> None:
        self._scheduler.stop()

    @property
    def running(self) -> bool:
        return self._scheduler.running

    # tick handlers
    def tick(self, now: datetime) -> None:
        with self._lock:
            self._current_time = now

    def regenerate_vitals(self, now: datetime) -> None:
        batch = tuple(
            generate_vital_samples(
                self.settings.sample_count,
                self.settings.sample_interval_sec,
                now,
                self._rng,
            )
        )
        metrics = tuple(evaluate_batch(batch))
        with self._lock:
            self._samples = batch
            self._metrics = metrics
        logger.debug("Regenerated %d vital samples at %s", len(batch), now.isoformat())

    def regenerate_roster(self, now: Optional[datetime] = None) -> None:
        now = now or self._clock()
        roster = tuple(generate_patients(self.settings.roster_size, now, self._rng))
        with self._lock:
            self._roster = roster
            self._refilter()
        logger.debug("Regenerated roster of %d patients", len(roster))

    # setters
    def set_search_text(self, text: str) -> None:
        with self._lock:
            self._search_text = text or ""
            self._refilter()

    def set_risk_filter(self, level: str) -> None:
        if level != RISK_FILTER_ALL and level not in RISK_LEVELS:
            raise ValueError(
                f"Unknown risk filter {level!r}; expected one of {(RISK_FILTER_ALL,) + RISK_LEVELS}"
            )
        with self._lock:
            self._risk_filter = level
            self._refilter()

    def _refilter(self) -> None:
        self._filtered = tuple(filter_patients(self._roster, self._search_text, self._risk_filter))

    # read accessors
    @property
    def current_time(self) -> datetime:
        return self._current_time

    @property
    def search_text(self) -> str:
        return self._search_text

    @property
    def risk_filter(self) -> str:
        return self._risk_filter

    @property
    def samples(self) -> Tuple[VitalSample, ...]:
        return self._samples

    @property
    def roster(self) -> Tuple[Patient, ...]:
        return self._roster

    def metrics(self) -> List[HealthMetric]:
        return list(self._metrics)

    def alerts(self) -> List[HealthMetric]:
        return metric_alerts(self._metrics)

    def summary(self) -> VitalsSummary:
        return summarize_vitals(self._samples)

    def recent_readings(self, n: int = 4) -> List[VitalSample]:
        return recent_readings(list(self._samples), n)

    def filtered_patients(self) -> List[Patient]:
        return list(self._filtered)

    def page(self, limit: Optional[int] = None) -> PatientPage:
        return truncate(self._filtered, self.settings.display_limit if limit is None else limit)

    def counts(self) -> RosterCounts:
        return roster_counts(self._roster)

    def snapshot(self) -> DashboardSnapshot:
        """Clock, batch and its metrics read together, so one render never mixes two batches."""
        with self._lock:
            return DashboardSnapshot(
                current_time=self._current_time,
                samples=self._samples,
                metrics=self._metrics,
            )

    def report(self) -> Dict[str, Any]:
        snap = self.snapshot()
        return build_health_report(snap.samples, snap.current_time)
