"""Conversions to and from monotonic-clock nanosecond counts.

``time.monotonic_ns()`` and ``time.perf_counter_ns()`` measure elapsed time as
a whole, non-negative number of nanoseconds. Such counts cannot express a
negative duration, so converting one fails instead of clamping to zero.
"""

import logging
import math

from float_duration.duration import FloatDuration
from float_duration.errors import OutOfRangeError
from float_duration.settings import require_feature
from float_duration.util import NANOS_PER_SEC

logger = logging.getLogger(__name__)

NANOS_PER_SEC_INT = 1_000_000_000

# Largest whole number of seconds a count may hold (an unsigned 64-bit value)
MAX_SECONDS = 2**64 - 1

_TARGET = "a monotonic nanosecond count"


def to_monotonic_ns(duration: FloatDuration) -> int:
    """Convert to whole nanoseconds, rounding to the nearest one.

    Raises:
        OutOfRangeError: If the duration is negative, NaN, infinite, or holds
            more than ``MAX_SECONDS`` whole seconds
        FeatureDisabledError: If ``monotonic_interop`` is disabled
    """
    require_feature("monotonic_interop")
    secs = duration.secs

    if math.isnan(secs):
        logger.debug("Rejected NaN duration for monotonic conversion")
        raise OutOfRangeError(secs, _TARGET, "NaN has no nanosecond count")
    if secs < 0.0:
        logger.debug("Rejected negative duration %r for monotonic conversion", secs)
        raise OutOfRangeError(secs, _TARGET, "monotonic durations cannot be negative")
    if secs > MAX_SECONDS:
        logger.debug("Rejected oversized duration %r for monotonic conversion", secs)
        raise OutOfRangeError(secs, _TARGET, f"more than {MAX_SECONDS} seconds")

    # A count read back by from_monotonic_ns converts to itself
    fraction, whole = math.modf(secs)
    return int(whole) * NANOS_PER_SEC_INT + round(fraction * NANOS_PER_SEC)


def from_monotonic_ns(nanos: int) -> FloatDuration:
    """Convert a nanosecond count into a duration.

    Raises:
        OutOfRangeError: If ``nanos`` is negative
        FeatureDisabledError: If ``monotonic_interop`` is disabled
    """
    require_feature("monotonic_interop")
    if nanos < 0:
        raise OutOfRangeError(
            nanos / NANOS_PER_SEC, _TARGET, "monotonic durations cannot be negative"
        )
    whole, remainder = divmod(nanos, NANOS_PER_SEC_INT)
    return FloatDuration.seconds(whole + remainder / NANOS_PER_SEC)
