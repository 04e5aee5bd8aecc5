import math

import pytest

from fps_ticker import FpsStats, calc_avg, calc_max, calc_min
from fps_ticker.stats import calc_stats

MS = 1_000_000


def test_empty_window_is_zero():
    assert calc_avg([]) == 0.0
    assert calc_min([]) == 0.0
    assert calc_max([]) == 0.0
    assert calc_stats([]) == FpsStats(0.0, 0.0, 0.0)


def test_reductions_pick_the_right_extreme():
    window = [100 * MS, 200 * MS, 50 * MS]
    assert calc_min(window) == pytest.approx(5.0)
    assert calc_max(window) == pytest.approx(20.0)
    assert calc_avg(window) == pytest.approx(3 / 0.35)


def test_zero_period_is_infinite():
    assert calc_avg([0, 0]) == math.inf
    assert calc_max([0, 100 * MS]) == math.inf
    assert calc_min([0, 100 * MS]) == pytest.approx(10.0)


def test_equal_durations_tie():
    window = [25 * MS] * 4
    stats = calc_stats(window)
    assert stats.avg == pytest.approx(40.0)
    assert stats.min == pytest.approx(40.0)
    assert stats.max == pytest.approx(40.0)


def test_results_are_plain_floats():
    stats = calc_stats([10 * MS, 20 * MS])
    assert type(stats.avg) is float
    assert type(calc_min([10 * MS])) is float


def test_snapshot_is_frozen():
    stats = FpsStats(1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        stats.avg = 5.0
