"""Sliding-window FPS tracker for render and capture loops."""

import logging
import threading
import time
from collections import deque
from typing import Callable

from .errors import InvalidWindowLength
from .stats import NANOS_PER_SEC, FpsStats, calc_stats

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_LEN = 60


class Fps:
    """Average, minimum and maximum frame rate over the last ``window_len`` ticks.

    Usage::

        fps = Fps.with_window_len(100)

        while running:
            render()
            fps.tick()
            label = f"{fps.avg():.1f} fps (min {fps.min():.1f}, max {fps.max():.1f})"

    Each ``tick()`` samples the time since the previous tick (or since
    construction for the first one), pushes it into the window and recomputes
    the three rates. Reads return the values cached by the last tick and are
    ``0.0`` until the first tick. A larger window gives a smoother reading.

    One lock guards the window, the last timestamp and the cached rates, so a
    producer thread may tick while other threads read.
    """

    DEFAULT_WINDOW_LEN = DEFAULT_WINDOW_LEN

    def __init__(
        self,
        window_len: int = DEFAULT_WINDOW_LEN,
        *,
        clock: Callable[[], int] = time.monotonic_ns,
    ):
        if isinstance(window_len, bool) or not isinstance(window_len, int) or window_len < 1:
            raise InvalidWindowLength(window_len)
        if not callable(clock):
            raise TypeError(f"clock must be callable, got {type(clock).__name__}")

        self._window_len = window_len
        self._clock = clock
        self._lock = threading.Lock()
        self._window: deque[int] = deque()
        self._last = clock()
        self._stats = FpsStats()
        logger.debug("Created Fps tracker with window length %d", window_len)

    @classmethod
    def with_window_len(cls, window_len: int, **kwargs) -> "Fps":
        return cls(window_len, **kwargs)

    @classmethod
    def default(cls, **kwargs) -> "Fps":
        return cls(cls.DEFAULT_WINDOW_LEN, **kwargs)

    @property
    def window_len(self) -> int:
        return self._window_len

    def tick(self) -> None:
        """Call once per frame at the point where the rate should be measured."""
        with self._lock:
            now = self._clock()
            delta = now - self._last
            if delta < 0:
                logger.warning("Clock went backwards by %d ns; sampling zero duration", -delta)
                delta = 0
            elif delta == 0:
                logger.debug("Tick observed a zero-length duration")
            self._last = now

            while len(self._window) + 1 > self._window_len:
                self._window.popleft()
            self._window.append(delta)
            self._stats = calc_stats(self._window)

    def avg(self) -> float:
        """Average frames-per-second as of the last ``tick``."""
        with self._lock:
            return self._stats.avg

    def min(self) -> float:
        """Lowest frames-per-second reached within the window as of the last ``tick``."""
        with self._lock:
            return self._stats.min

    def max(self) -> float:
        """Highest frames-per-second reached within the window as of the last ``tick``."""
        with self._lock:
            return self._stats.max

    def stats(self) -> FpsStats:
        with self._lock:
            return self._stats

    def samples(self) -> tuple[float, ...]:
        """Window contents in seconds, oldest first."""
        with self._lock:
            return tuple(d / NANOS_PER_SEC for d in self._window)

    def copy(self) -> "Fps":
        with self._lock:
            other = Fps(self._window_len, clock=self._clock)
            other._window = deque(self._window)
            other._last = self._last
            other._stats = self._stats
        return other

    __copy__ = copy

    def __len__(self) -> int:
        with self._lock:
            return len(self._window)

    def __repr__(self) -> str:
        with self._lock:
            return (
                f"Fps(window_len={self._window_len}, samples={len(self._window)}, "
                f"avg={self._stats.avg:.2f}, min={self._stats.min:.2f}, max={self._stats.max:.2f})"
            )
