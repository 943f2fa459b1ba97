"""Tests for durations between time points."""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Any

import pytest

from float_duration import (
    FloatDuration,
    MonotonicInstant,
    TimePoint,
    TimePointError,
    difference_since,
)


@dataclass(frozen=True)
class SimulationTick:
    """A user-defined time point: a step counter with a fixed step length."""

    step: int
    dt: float = 0.5

    def float_duration_since(self, earlier: Any) -> FloatDuration:
        if not isinstance(earlier, SimulationTick):
            raise TimePointError("ticks only compare with ticks")
        return FloatDuration.seconds((self.step - earlier.step) * self.dt)


def test_datetime_difference():
    """Test the difference between two UTC datetimes."""
    earlier = datetime(2017, 5, 25, 10, 0, 0, tzinfo=timezone.utc)
    later = datetime(2017, 5, 26, 12, 0, 0, tzinfo=timezone.utc)

    assert difference_since(later, earlier) == FloatDuration.days(1.0) + FloatDuration.hours(2.0)
    assert difference_since(earlier, later) == -(FloatDuration.days(1.0) + FloatDuration.hours(2.0))
    assert difference_since(later, later) == FloatDuration.zero()


def test_datetime_difference_across_timezones():
    pacific = timezone(timedelta(hours=-8))
    noon_pacific = datetime(2025, 1, 1, 12, 0, tzinfo=pacific)
    noon_utc = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

    assert difference_since(noon_pacific, noon_utc) == FloatDuration.hours(8.0)


def test_naive_datetimes():
    earlier = datetime(2025, 1, 1, 0, 0, 0)
    later = datetime(2025, 1, 1, 0, 0, 1, 500000)
    assert difference_since(later, earlier) == FloatDuration.seconds(1.5)


def test_mixing_naive_and_aware_datetimes_fails():
    naive = datetime(2025, 1, 1)
    aware = datetime(2025, 1, 1, tzinfo=timezone.utc)

    with pytest.raises(TimePointError, match="timezone-aware or both naive"):
        difference_since(aware, naive)


def test_date_difference():
    assert difference_since(date(2024, 3, 1), date(2024, 2, 28)) == FloatDuration.days(2.0)
    assert difference_since(date(2023, 3, 1), date(2023, 2, 28)) == FloatDuration.days(1.0)


def test_time_of_day_difference():
    assert difference_since(time(12, 30), time(10, 0)) == FloatDuration.hours(2.5)
    assert difference_since(time(10, 0), time(12, 30)) == FloatDuration.hours(-2.5)


def test_mismatched_time_point_kinds_fail():
    with pytest.raises(TimePointError, match="same kind"):
        difference_since(datetime(2025, 1, 2), date(2025, 1, 1))
    with pytest.raises(TimePointError, match="same kind"):
        difference_since(date(2025, 1, 2), datetime(2025, 1, 1))
    with pytest.raises(TimePointError, match="same kind"):
        difference_since(time(1), datetime(2025, 1, 1))


def test_unsupported_type_fails():
    with pytest.raises(TimePointError, match="not a time point"):
        difference_since(5, 3)


def test_time_point_errors_are_value_errors():
    with pytest.raises(ValueError):
        difference_since("2025-01-02", "2025-01-01")


def test_user_defined_time_point():
    """Test any object with float_duration_since plugs into difference_since."""
    assert isinstance(SimulationTick(0), TimePoint)
    assert difference_since(SimulationTick(10), SimulationTick(4)) == FloatDuration.seconds(3.0)
    with pytest.raises(TimePointError):
        difference_since(SimulationTick(10), 4)


def test_monotonic_instant_difference():
    later = MonotonicInstant(1_500_000_000)
    earlier = MonotonicInstant(500_000_000)

    assert later.float_duration_since(earlier) == FloatDuration.seconds(1.0)
    assert difference_since(later, earlier) == FloatDuration.seconds(1.0)
    assert isinstance(later, TimePoint)


def test_monotonic_instant_difference_keeps_whole_nanoseconds():
    elapsed = MonotonicInstant(115).float_duration_since(MonotonicInstant(100))
    assert elapsed.to_monotonic_ns() == 15


def test_monotonic_instant_cannot_go_backwards():
    """Test measuring against a later reading fails instead of going negative."""
    with pytest.raises(TimePointError, match="is after"):
        MonotonicInstant(5).float_duration_since(MonotonicInstant(10))


def test_monotonic_instant_rejects_other_kinds():
    with pytest.raises(TimePointError, match="MonotonicInstant"):
        MonotonicInstant(5).float_duration_since(datetime(2025, 1, 1))


def test_monotonic_instant_now():
    start = MonotonicInstant.now()
    end = MonotonicInstant.now()

    assert end >= start
    assert end.float_duration_since(start) >= FloatDuration.zero()
    assert start.elapsed() >= FloatDuration.zero()
