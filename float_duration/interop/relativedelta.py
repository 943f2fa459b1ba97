"""Conversions to and from ``dateutil.relativedelta.relativedelta``.

Only the fixed-length part of a relativedelta (days down to microseconds) has
a duration. Years, months, leap days, absolute fields such as ``month=3`` and
weekdays depend on the date they are applied to, so they are rejected rather
than guessed.
"""

import logging
from datetime import timedelta

from dateutil.relativedelta import relativedelta

from float_duration.duration import FloatDuration
from float_duration.errors import OutOfRangeError
from float_duration.settings import require_feature

logger = logging.getLogger(__name__)

_CALENDAR_FIELDS = ("years", "months", "leapdays")
_ABSOLUTE_FIELDS = (
    "year",
    "month",
    "day",
    "weekday",
    "hour",
    "minute",
    "second",
    "microsecond",
)


def to_relativedelta(duration: FloatDuration) -> relativedelta:
    """Convert to a normalized relativedelta with microsecond resolution.

    Every component carries the sign of the duration, e.g. ``hours(-2)``
    becomes ``relativedelta(hours=-2)``.

    Raises:
        OutOfRangeError: If the duration does not fit in a ``timedelta``
        FeatureDisabledError: If ``calendar_interop`` is disabled
    """
    require_feature("calendar_interop")
    try:
        delta = timedelta(seconds=abs(duration.secs))
    except (OverflowError, ValueError) as exc:
        logger.debug("relativedelta conversion of %r failed: %s", duration.secs, exc)
        raise OutOfRangeError(
            duration.secs, "dateutil.relativedelta", str(exc)
        ) from exc
    result = relativedelta(
        days=delta.days, seconds=delta.seconds, microseconds=delta.microseconds
    )
    return -result if duration.is_negative() else result


def from_relativedelta(delta: relativedelta) -> FloatDuration:
    """Convert the fixed-length part of a relativedelta.

    Raises:
        OutOfRangeError: If ``delta`` has calendar-dependent components
        FeatureDisabledError: If ``calendar_interop`` is disabled
    """
    require_feature("calendar_interop")

    relative = [name for name in _CALENDAR_FIELDS if getattr(delta, name)]
    absolute = [name for name in _ABSOLUTE_FIELDS if getattr(delta, name) is not None]
    if relative or absolute:
        fields = ", ".join(relative + absolute)
        logger.debug("Rejected calendar-dependent relativedelta %r", delta)
        raise OutOfRangeError(
            None,
            "a fixed-length duration",
            f"{fields} depend on the calendar date and have no fixed length.\n"
            f"Hint: apply the relativedelta to a datetime and use difference_since()",
        )

    total_micros = (
        ((delta.days * 24 + delta.hours) * 60 + delta.minutes) * 60 + delta.seconds
    ) * 10**6 + delta.microseconds
    return FloatDuration.seconds(total_micros / 10**6)
