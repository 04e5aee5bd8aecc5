"""Average, minimum and maximum frame rate over a sliding window of ticks."""

from .errors import InvalidWindowLength
from .fps import DEFAULT_WINDOW_LEN, Fps
from .stats import FpsStats, calc_avg, calc_max, calc_min

__all__ = [
    "DEFAULT_WINDOW_LEN",
    "Fps",
    "FpsStats",
    "InvalidWindowLength",
    "calc_avg",
    "calc_max",
    "calc_min",
]
