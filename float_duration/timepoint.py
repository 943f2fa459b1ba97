"""Durations between points in time.

Any type with a ``float_duration_since(earlier)`` method satisfies the
:class:`TimePoint` protocol, no base class required. The standard library's
``datetime``, ``date`` and ``time`` cannot grow methods, so
:func:`difference_since` dispatches on them instead and falls back to the
protocol for everything else::

    difference_since(later, earlier)  # positive when later is after earlier

Failures (mismatched types, naive and aware datetimes, a clock that would run
backwards) raise :class:`TimePointError`.
"""

from __future__ import annotations

import logging
import time as _time
from dataclasses import dataclass
from datetime import date, datetime, time
from functools import singledispatch
from typing import Any, Protocol, runtime_checkable

from float_duration.duration import FloatDuration
from float_duration.errors import TimePointError
from float_duration.settings import require_feature

logger = logging.getLogger(__name__)

# Times of day are measured against this date; only their difference matters.
_TIME_ANCHOR = date(2000, 1, 1)


@runtime_checkable
class TimePoint(Protocol):
    """A specific point in time that can measure the duration since another.

    ``later.float_duration_since(earlier)`` is positive when ``later`` occurs
    after ``earlier``. Call :func:`difference_since` to get the same result
    for any time point, including the datetime types that cannot grow the
    method.
    """

    def float_duration_since(self, earlier: Any) -> FloatDuration:
        """Return the duration from ``earlier`` to this point.

        Raises:
            TimePointError: If the duration cannot be computed
        """
        ...


@dataclass(frozen=True, order=True)
class MonotonicInstant:
    """A reading of ``time.monotonic_ns()``.

    The monotonic clock never runs backwards, so the duration since a later
    reading does not exist and raises instead of going negative.

    Usage::

        start = MonotonicInstant.now()
        # ... some work ...
        elapsed = start.elapsed()
    """

    nanos: int

    @classmethod
    def now(cls) -> MonotonicInstant:
        require_feature("monotonic_interop")
        return cls(_time.monotonic_ns())

    def float_duration_since(self, earlier: Any) -> FloatDuration:
        """Raises TimePointError if ``earlier`` is not a MonotonicInstant or is
        after this reading."""
        require_feature("monotonic_interop")
        if not isinstance(earlier, MonotonicInstant):
            raise TimePointError(
                f"Cannot measure a MonotonicInstant against "
                f"{type(earlier).__name__!r}; both points must be MonotonicInstant"
            )
        if earlier.nanos > self.nanos:
            logger.debug("Monotonic underflow: %d is after %d", earlier.nanos, self.nanos)
            raise TimePointError(
                f"Monotonic reading {earlier.nanos}ns is after {self.nanos}ns.\n"
                f"Hint: call later.float_duration_since(earlier), not the reverse"
            )
        return FloatDuration.from_monotonic_ns(self.nanos - earlier.nanos)

    def elapsed(self) -> FloatDuration:
        """Return the duration from this reading until now."""
        return MonotonicInstant.now().float_duration_since(self)


@singledispatch
def difference_since(later: Any, earlier: Any) -> FloatDuration:
    """Return the signed duration from ``earlier`` to ``later``.

    Raises:
        TimePointError: If the points are of different kinds, cannot be
            subtracted, or ``later`` is not a time point at all
    """
    if isinstance(later, TimePoint):
        return later.float_duration_since(earlier)
    raise TimePointError(
        f"{type(later).__name__!r} is not a time point.\n"
        f"Supported: datetime, date, time, or any object with a "
        f"float_duration_since(earlier) method"
    )


def _require_same_kind(later: Any, earlier: Any, kind: type) -> None:
    if not isinstance(earlier, kind) or (
        isinstance(earlier, datetime) != isinstance(later, datetime)
    ):
        raise TimePointError(
            f"Cannot measure {type(later).__name__!r} against "
            f"{type(earlier).__name__!r}; both points must be the same kind"
        )


def _subtract(later: Any, earlier: Any) -> FloatDuration:
    try:
        delta = later - earlier
    except TypeError as exc:
        logger.debug("Time point subtraction failed: %s", exc)
        raise TimePointError(
            f"Cannot subtract {earlier!r} from {later!r}: {exc}.\n"
            f"Hint: make both values timezone-aware or both naive"
        ) from exc
    return FloatDuration.from_timedelta(delta)


@difference_since.register
def _datetime_since(later: datetime, earlier: Any) -> FloatDuration:
    require_feature("calendar_interop")
    _require_same_kind(later, earlier, datetime)
    return _subtract(later, earlier)


@difference_since.register
def _date_since(later: date, earlier: Any) -> FloatDuration:
    require_feature("calendar_interop")
    _require_same_kind(later, earlier, date)
    return _subtract(later, earlier)


@difference_since.register
def _time_since(later: time, earlier: Any) -> FloatDuration:
    require_feature("calendar_interop")
    _require_same_kind(later, earlier, time)
    return _subtract(
        datetime.combine(_TIME_ANCHOR, later),
        datetime.combine(_TIME_ANCHOR, earlier),
    )
