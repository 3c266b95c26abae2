from datetime import datetime

import pytest


class FixedRandom:
    """RandomSource stub: constant next_float(); choice() looks up `picks` by options."""
    def __init__(self, value=0.5, picks=None):
        self.value = value
        self.picks = picks or {}

    def next_float(self):
        return self.value

    def choice(self, options):
        return self.picks.get(tuple(options), options[0])


class FakeTimer:
    """Stands in for threading.Timer; tests fire it by hand."""
    def __init__(self, interval, function):
        self.interval = interval
        self.function = function
        self.daemon = False
        self.started = False
        self.cancelled = False
        self.fired = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.fired = True
        if not self.cancelled:
            self.function()


class FakeTimerFactory:
    def __init__(self):
        self.timers = []

    def __call__(self, interval, function):
        t = FakeTimer(interval, function)
        self.timers.append(t)
        return t

    def pending(self, interval=None):
        return [
            t for t in self.timers
            if t.started and not t.cancelled and not t.fired and (interval is None or t.interval == interval)
        ]


NOW = datetime(2024, 5, 1, 12, 0, 0)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def timers():
    return FakeTimerFactory()
