from .decomposed import DecomposedTime
from .duration import FloatDuration, sum_durations
from .errors import (
    FeatureDisabledError,
    FloatDurationError,
    OutOfRangeError,
    TimePointError,
)
from .iter import Subdivide, subdivide, subdivide_with_step
from .settings import FeatureSettings, get_settings
from .timepoint import MonotonicInstant, TimePoint, difference_since
from .util import (
    MICROS_PER_SEC,
    MILLIS_PER_SEC,
    NANOS_PER_SEC,
    SECS_PER_DAY,
    SECS_PER_HOUR,
    SECS_PER_MINUTE,
    SECS_PER_WEEK,
    SECS_PER_YEAR,
)

__all__ = [
    "FloatDuration",
    "DecomposedTime",
    "sum_durations",
    "TimePoint",
    "MonotonicInstant",
    "difference_since",
    "Subdivide",
    "subdivide",
    "subdivide_with_step",
    "FeatureSettings",
    "get_settings",
    "FloatDurationError",
    "OutOfRangeError",
    "TimePointError",
    "FeatureDisabledError",
    "NANOS_PER_SEC",
    "MICROS_PER_SEC",
    "MILLIS_PER_SEC",
    "SECS_PER_MINUTE",
    "SECS_PER_HOUR",
    "SECS_PER_DAY",
    "SECS_PER_WEEK",
    "SECS_PER_YEAR",
]
