from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Iterable

import numpy as np


@dataclass(frozen=True)
class Interval:
    """Closed real interval ``[low, high]``."""

    low: float
    high: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.low) and math.isfinite(self.high)):
            raise ValueError(f"interval bounds must be finite, got [{self.low}, {self.high}]")
        if self.low > self.high:
            raise ValueError(f"interval low must be <= high, got [{self.low}, {self.high}]")

    @property
    def width(self) -> float:
        return self.high - self.low

    @property
    def midpoint(self) -> float:
        return (self.low + self.high) / 2.0

    @property
    def is_degenerate(self) -> bool:
        return self.low == self.high

    def contains(self, value: float) -> bool:
        return self.low <= value <= self.high


DEFAULT_INTERVAL = Interval(0.0, 1.0)


def infer_interval(values: Iterable[float], default: Interval = DEFAULT_INTERVAL) -> Interval:
    """Return the tightest interval holding every finite value, or ``default`` when there is none."""
    arr = np.asarray(list(values), dtype=np.float64)
    finite = arr[np.isfinite(arr)]
    if finite.size == 0:
        return default
    return Interval(float(np.min(finite)), float(np.max(finite)))


def map_value(value: float, from_interval: Interval, to_interval: Interval) -> float:
    """Linearly map ``value`` from ``from_interval`` onto ``to_interval``.

    A degenerate source interval has no slope; every value then lands on the
    midpoint of ``to_interval``.
    """
    if from_interval.is_degenerate:
        return to_interval.midpoint
    a, b = from_interval.low, from_interval.high
    c, d = to_interval.low, to_interval.high
    return c + (value - a) / (b - a) * (d - c)


def map_values(values: np.ndarray, from_interval: Interval, to_interval: Interval) -> np.ndarray:
    """Vectorized :func:`map_value` with the same degenerate-interval policy."""
    arr = np.asarray(values, dtype=np.float64)
    if from_interval.is_degenerate:
        return np.full(arr.shape, to_interval.midpoint, dtype=np.float64)
    a, b = from_interval.low, from_interval.high
    c, d = to_interval.low, to_interval.high
    return c + (arr - a) / (b - a) * (d - c)
