"""Conversions to and from ``datetime.timedelta``.

A timedelta is signed with microsecond resolution and spans at most
999999999 days in either direction.
"""

import logging
from datetime import timedelta

from float_duration.duration import FloatDuration
from float_duration.errors import OutOfRangeError
from float_duration.settings import require_feature

logger = logging.getLogger(__name__)


def to_timedelta(duration: FloatDuration) -> timedelta:
    """Convert to a timedelta, rounding to the nearest microsecond.

    Raises:
        OutOfRangeError: If the duration is NaN, infinite, or beyond
            ``timedelta.min``/``timedelta.max``
        FeatureDisabledError: If ``calendar_interop`` is disabled
    """
    require_feature("calendar_interop")
    try:
        return timedelta(seconds=duration.secs)
    except (OverflowError, ValueError) as exc:
        logger.debug("timedelta conversion of %r failed: %s", duration.secs, exc)
        raise OutOfRangeError(duration.secs, "datetime.timedelta", str(exc)) from exc


def from_timedelta(delta: timedelta) -> FloatDuration:
    """Convert a timedelta. Always succeeds; very large values lose sub-microsecond
    precision to float rounding.

    Raises:
        FeatureDisabledError: If ``calendar_interop`` is disabled
    """
    require_feature("calendar_interop")
    return FloatDuration.seconds(delta.total_seconds())
