from __future__ import annotations

import inspect
import logging
import threading
import weakref
from datetime import datetime
from typing import Callable, Optional

logger = logging.getLogger(__name__)

TickCallback = Callable[[datetime], None]
TimerFactory = Callable[[float, Callable[[], None]], threading.Timer]


class PeriodicTask:
    """
    Re-arms a one-shot timer after every firing.

    A firing and stop() share one re-entrant lock, so once stop() returns
    no callback is running and none will start. stop() may be called from
    inside the callback.

    Bound-method callbacks are held weakly: when their owner is collected
    the task stops itself and its timer thread exits.
    """

    def __init__(
        self,
        name: str,
        interval: float,
        callback: TickCallback,
        clock: Callable[[], datetime] = datetime.now,
        timer_factory: TimerFactory = threading.Timer,
    ):
        if interval <= 0:
            raise ValueError(f"interval must be > 0, got {interval}")
        self.name = name
        self.interval = interval
        if inspect.ismethod(callback):
            self._callback_ref = weakref.WeakMethod(callback)
        else:
            self._callback_ref = lambda: callback
        self._clock = clock
        self._timer_factory = timer_factory
        self._timer: Optional[threading.Timer] = None
        self._running = False
        self._lock = threading.RLock()

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        with self._lock:
            if self._running:
                return
            self._running = True
            self._arm()

    def stop(self) -> None:
        with self._lock:
            self._running = False
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _arm(self) -> None:
        timer = self._timer_factory(self.interval, self._fire)
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _fire(self) -> None:
        with self._lock:
            if not self._running:
                return
            callback = self._callback_ref()
            if callback is None:
                logger.debug("%s tick owner is gone, stopping", self.name)
                self.stop()
                return
            try:
                callback(self._clock())
            except Exception:
                logger.exception("%s tick failed", self.name)
            del callback
            if self._running:
                self._arm()


class RefreshScheduler:
    """Clock tick (display time) + regeneration tick, started and stopped together."""

    def __init__(
        self,
        on_clock: TickCallback,
        on_refresh: TickCallback,
        clock_interval: float = 1.0,
        refresh_interval: float = 30.0,
        clock: Callable[[], datetime] = datetime.now,
        timer_factory: TimerFactory = threading.Timer,
    ):
        self.clock_task = PeriodicTask("clock", clock_interval, on_clock, clock, timer_factory)
        self.refresh_task = PeriodicTask("refresh", refresh_interval, on_refresh, clock, timer_factory)

    @property
    def running(self) -> bool:
        return self.clock_task.running or self.refresh_task.running

    def start(self) -> None:
        if self.running:
            return
        self.clock_task.start()
        self.refresh_task.start()
        logger.info(
            "Refresh scheduler started (clock=%.1fs, refresh=%.1fs)",
            self.clock_task.interval,
            self.refresh_task.interval,
        )

    def stop(self) -> None:
        was_running = self.running
        self.clock_task.stop()
        self.refresh_task.stop()
        if was_running:
            logger.info("Refresh scheduler stopped")
