from __future__ import annotations

import math
from typing import Optional, Protocol, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


class RandomSource(Protocol):
    def next_float(self) -> float: ...

    def choice(self, options: Sequence[T]) -> T: ...


class NumpyRandomSource:
    """RandomSource backed by numpy's Generator. seed=None is non-deterministic."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed=seed)

    def next_float(self) -> float:
        return float(self._rng.random())

    def choice(self, options: Sequence[T]) -> T:
        if not options:
            raise ValueError("choice() from an empty sequence")
        return options[int(self._rng.integers(0, len(options)))]


def uniform(rng: RandomSource, low: float, high: float) -> float:
    return low + rng.next_float() * (high - low)


def randrange(rng: RandomSource, low: int, high: int) -> int:
    """Integer in [low, high)."""
    return low + math.floor(rng.next_float() * (high - low))
