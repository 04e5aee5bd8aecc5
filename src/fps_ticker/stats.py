"""Rate statistics over a window of inter-tick durations.

Durations are integer nanoseconds. Every reduction converts them to float
seconds and returns a rate in Hz.

Sentinels:
    - empty window -> ``0.0`` (same as a tracker that has not ticked yet)
    - zero period  -> ``math.inf``
"""

from collections.abc import Collection
from dataclasses import dataclass

import numpy as np

NANOS_PER_SEC = 1_000_000_000


@dataclass(frozen=True)
class FpsStats:
    """Snapshot of the average, minimum and maximum rate of one window."""

    avg: float = 0.0
    min: float = 0.0
    max: float = 0.0


def _periods(window: Collection[int]) -> np.ndarray:
    return np.fromiter(window, dtype=np.float64, count=len(window)) / NANOS_PER_SEC


def _rate(period: np.float64) -> float:
    with np.errstate(divide="ignore"):
        return float(np.reciprocal(period))


def calc_avg(window: Collection[int]) -> float:
    """Mean rate: the reciprocal of the mean period."""
    if not window:
        return 0.0
    return _rate(_periods(window).mean())


def calc_min(window: Collection[int]) -> float:
    """Rate of the slowest tick (longest period)."""
    if not window:
        return 0.0
    return _rate(_periods(window).max())


def calc_max(window: Collection[int]) -> float:
    """Rate of the fastest tick (shortest period)."""
    if not window:
        return 0.0
    return _rate(_periods(window).min())


def calc_stats(window: Collection[int]) -> FpsStats:
    if not window:
        return FpsStats()
    periods = _periods(window)
    return FpsStats(
        avg=_rate(periods.mean()),
        min=_rate(periods.max()),
        max=_rate(periods.min()),
    )
