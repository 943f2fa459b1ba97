"""Floating-point duration type and helpers.

Unlike ``datetime.timedelta``, ``FloatDuration`` aims to be convenient in
simulation and mathematical expressions rather than to behave like a calendar
or to represent time scales with perfect accuracy. It stores a single float
count of seconds, so it is exactly as precise as a float.
"""

from __future__ import annotations

import math
import struct
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import timedelta
from numbers import Real
from typing import TYPE_CHECKING, Any

from typing_extensions import override

from float_duration.settings import require_feature
from float_duration.util import (
    MICROS_PER_SEC,
    MILLIS_PER_SEC,
    NANOS_PER_SEC,
    SECS_PER_DAY,
    SECS_PER_HOUR,
    SECS_PER_MINUTE,
    SECS_PER_WEEK,
    SECS_PER_YEAR,
    format_number,
    ieee_div,
)

if TYPE_CHECKING:
    from dateutil.relativedelta import relativedelta
    from pydantic import GetCoreSchemaHandler
    from pydantic_core import CoreSchema

    from float_duration.decomposed import DecomposedTime

DEFAULT_EPSILON = sys.float_info.epsilon
DEFAULT_MAX_RELATIVE = sys.float_info.epsilon
DEFAULT_MAX_ULPS = 4

# Display units, largest first: (seconds threshold, accessor, unit name)
_DISPLAY_UNITS = (
    (SECS_PER_YEAR, "as_years", "years"),
    (SECS_PER_DAY, "as_days", "days"),
    (SECS_PER_HOUR, "as_hours", "hours"),
    (SECS_PER_MINUTE, "as_minutes", "minutes"),
    (1.0, "as_seconds", "seconds"),
    (1.0e-3, "as_milliseconds", "milliseconds"),
    (1.0e-6, "as_microseconds", "microseconds"),
)


def _float_bits(value: float) -> int:
    return struct.unpack("<q", struct.pack("<d", value))[0]


@dataclass(frozen=True, eq=False, slots=True)
class FloatDuration:
    """A span of time stored as a floating-point number of seconds.

    The sign gives the direction. Any float is accepted, including infinities
    and NaN; those propagate through arithmetic by the usual float rules.

    Examples:
        >>> FloatDuration.hours(2.5) + FloatDuration.seconds(30.0)
        FloatDuration(secs=9030.0)
        >>> FloatDuration.hours(1.0) / FloatDuration.minutes(5.0)
        12.0
    """

    secs: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "secs", float(self.secs))

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def years(cls, years: float) -> FloatDuration:
        """Create a duration of ``years`` years of exactly 365 days each."""
        return cls(years * SECS_PER_YEAR)

    @classmethod
    def weeks(cls, weeks: float) -> FloatDuration:
        return cls(weeks * SECS_PER_WEEK)

    @classmethod
    def days(cls, days: float) -> FloatDuration:
        return cls(days * SECS_PER_DAY)

    @classmethod
    def hours(cls, hours: float) -> FloatDuration:
        return cls(hours * SECS_PER_HOUR)

    @classmethod
    def minutes(cls, minutes: float) -> FloatDuration:
        return cls(minutes * SECS_PER_MINUTE)

    @classmethod
    def seconds(cls, seconds: float) -> FloatDuration:
        return cls(seconds)

    @classmethod
    def milliseconds(cls, millis: float) -> FloatDuration:
        return cls(millis / MILLIS_PER_SEC)

    @classmethod
    def microseconds(cls, micros: float) -> FloatDuration:
        return cls(micros / MICROS_PER_SEC)

    @classmethod
    def nanoseconds(cls, nanos: float) -> FloatDuration:
        return cls(nanos / NANOS_PER_SEC)

    @classmethod
    def zero(cls) -> FloatDuration:
        """Return a duration representing no elapsed time."""
        return cls(0.0)

    @classmethod
    def min_value(cls) -> FloatDuration:
        """Return the most negative finite duration."""
        return cls(-sys.float_info.max)

    @classmethod
    def max_value(cls) -> FloatDuration:
        """Return the largest finite duration."""
        return cls(sys.float_info.max)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def as_years(self) -> float:
        """Return the fractional number of 365-day years."""
        return self.secs / SECS_PER_YEAR

    def as_weeks(self) -> float:
        return self.secs / SECS_PER_WEEK

    def as_days(self) -> float:
        return self.secs / SECS_PER_DAY

    def as_hours(self) -> float:
        return self.secs / SECS_PER_HOUR

    def as_minutes(self) -> float:
        return self.secs / SECS_PER_MINUTE

    def as_seconds(self) -> float:
        return self.secs

    def as_milliseconds(self) -> float:
        return self.secs * MILLIS_PER_SEC

    def as_microseconds(self) -> float:
        return self.secs * MICROS_PER_SEC

    def as_nanoseconds(self) -> float:
        return self.secs * NANOS_PER_SEC

    def is_zero(self) -> bool:
        return self.secs == 0.0

    def is_positive(self) -> bool:
        """True if the duration holds a positive amount of time (NaN is not)."""
        return self.secs > 0.0

    def is_negative(self) -> bool:
        """True if the duration holds a negative amount of time (NaN is not)."""
        return self.secs < 0.0

    def abs(self) -> FloatDuration:
        return FloatDuration(abs(self.secs))

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: FloatDuration) -> FloatDuration:
        if not isinstance(other, FloatDuration):
            return NotImplemented
        return FloatDuration(self.secs + other.secs)

    def __sub__(self, other: FloatDuration) -> FloatDuration:
        if not isinstance(other, FloatDuration):
            return NotImplemented
        return FloatDuration(self.secs - other.secs)

    def __mul__(self, factor: float) -> FloatDuration:
        if not isinstance(factor, Real):
            return NotImplemented
        return FloatDuration(self.secs * float(factor))

    def __rmul__(self, factor: float) -> FloatDuration:
        return self.__mul__(factor)

    def __truediv__(self, other: Any) -> Any:
        """Divide by a scalar (giving a duration) or by a duration (giving a ratio).

        Division by zero follows IEEE-754 and yields an infinity or NaN.
        """
        if isinstance(other, FloatDuration):
            return ieee_div(self.secs, other.secs)
        if isinstance(other, Real):
            return FloatDuration(ieee_div(self.secs, float(other)))
        return NotImplemented

    def __neg__(self) -> FloatDuration:
        return FloatDuration(-self.secs)

    def __pos__(self) -> FloatDuration:
        return self

    def __abs__(self) -> FloatDuration:
        return self.abs()

    def __bool__(self) -> bool:
        return self.secs != 0.0

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FloatDuration):
            return NotImplemented
        return self.secs == other.secs

    @override
    def __ne__(self, other: object) -> bool:
        if not isinstance(other, FloatDuration):
            return NotImplemented
        return self.secs != other.secs

    def __lt__(self, other: FloatDuration) -> bool:
        if not isinstance(other, FloatDuration):
            return NotImplemented
        return self.secs < other.secs

    def __le__(self, other: FloatDuration) -> bool:
        if not isinstance(other, FloatDuration):
            return NotImplemented
        return self.secs <= other.secs

    def __gt__(self, other: FloatDuration) -> bool:
        if not isinstance(other, FloatDuration):
            return NotImplemented
        return self.secs > other.secs

    def __ge__(self, other: FloatDuration) -> bool:
        if not isinstance(other, FloatDuration):
            return NotImplemented
        return self.secs >= other.secs

    @override
    def __hash__(self) -> int:
        return hash(self.secs)

    def approx_eq(
        self,
        other: FloatDuration,
        *,
        rel_tol: float = DEFAULT_MAX_RELATIVE,
        abs_tol: float = DEFAULT_EPSILON,
    ) -> bool:
        """Compare with a tolerance instead of exactly.

        Two durations are approximately equal when their difference is at most
        ``abs_tol`` seconds, or at most ``rel_tol`` times the larger magnitude.
        Prefer this over ``==`` for values produced by accumulation.

        Raises:
            FeatureDisabledError: If the ``approx`` feature is disabled
        """
        require_feature("approx")
        return math.isclose(self.secs, other.secs, rel_tol=rel_tol, abs_tol=abs_tol)

    def ulps_eq(
        self,
        other: FloatDuration,
        *,
        abs_tol: float = DEFAULT_EPSILON,
        max_ulps: int = DEFAULT_MAX_ULPS,
    ) -> bool:
        """Compare by distance in units in the last place.

        Durations within ``abs_tol`` seconds are equal; otherwise they must
        share a sign and be at most ``max_ulps`` representable floats apart.

        Raises:
            FeatureDisabledError: If the ``approx`` feature is disabled
        """
        require_feature("approx")
        a, b = self.secs, other.secs
        if math.isnan(a) or math.isnan(b):
            return False
        if a == b or abs(a - b) <= abs_tol:
            return True
        if math.copysign(1.0, a) != math.copysign(1.0, b):
            return False
        return abs(_float_bits(a) - _float_bits(b)) <= max_ulps

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    @override
    def __str__(self) -> str:
        magnitude = abs(self.secs)
        for threshold, accessor, name in _DISPLAY_UNITS:
            if magnitude > threshold:
                return f"{format_number(getattr(self, accessor)())} {name}"
        return f"{format_number(self.as_nanoseconds())} nanoseconds"

    def decompose(self) -> DecomposedTime:
        """Split into days, hours, minutes, seconds, and a fractional second."""
        from float_duration.decomposed import DecomposedTime

        return DecomposedTime.from_duration(self)

    # ------------------------------------------------------------------
    # External conversions
    # ------------------------------------------------------------------

    def to_monotonic_ns(self) -> int:
        """Convert to a non-negative whole number of nanoseconds.

        Raises:
            OutOfRangeError: If the duration is negative, not finite, or too large
        """
        from float_duration.interop.monotonic import to_monotonic_ns

        return to_monotonic_ns(self)

    @classmethod
    def from_monotonic_ns(cls, nanos: int) -> FloatDuration:
        from float_duration.interop.monotonic import from_monotonic_ns

        return from_monotonic_ns(nanos)

    def to_timedelta(self) -> timedelta:
        """Convert to a ``datetime.timedelta``, rounding to microseconds.

        Raises:
            OutOfRangeError: If the duration does not fit in a timedelta
        """
        from float_duration.interop.timedelta import to_timedelta

        return to_timedelta(self)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> FloatDuration:
        from float_duration.interop.timedelta import from_timedelta

        return from_timedelta(delta)

    def to_relativedelta(self) -> relativedelta:
        from float_duration.interop.relativedelta import to_relativedelta

        return to_relativedelta(self)

    @classmethod
    def from_relativedelta(cls, delta: relativedelta) -> FloatDuration:
        """Convert a ``relativedelta`` without calendar-dependent parts.

        Raises:
            OutOfRangeError: If ``delta`` has years, months, leap days,
                absolute fields or a weekday
        """
        from float_duration.interop.relativedelta import from_relativedelta

        return from_relativedelta(delta)

    def to_float(self) -> float:
        """Return the serialized form: the number of seconds."""
        from float_duration.interop.serde import to_float

        return to_float(self)

    @classmethod
    def from_float(cls, value: float) -> FloatDuration:
        from float_duration.interop.serde import from_float

        return from_float(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        from float_duration.interop.serde import pydantic_core_schema

        return pydantic_core_schema()


def sum_durations(durations: Iterable[FloatDuration]) -> FloatDuration:
    """Add up durations, starting from zero for an empty iterable."""
    total = FloatDuration.zero()
    for duration in durations:
        total = total + duration
    return total
