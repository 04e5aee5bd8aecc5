import pytest

NANOS_PER_SEC = 1_000_000_000


class FakeClock:
    """Monotonic nanosecond clock advanced by hand."""

    def __init__(self, start: int = 0):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += round(seconds * NANOS_PER_SEC)


@pytest.fixture()
def clock():
    return FakeClock(start=1_000 * NANOS_PER_SEC)


@pytest.fixture()
def tick_after(clock):
    """Return a helper that advances the clock by each delay and ticks."""

    def _tick_after(fps, *delays):
        for delay in delays:
            clock.advance(delay)
            fps.tick()

    return _tick_after
