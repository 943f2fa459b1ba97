"""Utility constants and helpers for float_duration.

Time unit constants are floats. Units of a second or longer are given in
seconds; sub-second units are given as counts per second.
"""

import math

# Sub-second units (counts per second)
NANOS_PER_SEC = 1.0e9
MICROS_PER_SEC = 1.0e6
MILLIS_PER_SEC = 1.0e3

# Time unit constants (all values in seconds)
SECS_PER_MINUTE = 60.0
SECS_PER_HOUR = SECS_PER_MINUTE * 60.0
SECS_PER_DAY = SECS_PER_HOUR * 24.0
SECS_PER_WEEK = SECS_PER_DAY * 7.0
SECS_PER_YEAR = SECS_PER_DAY * 365.0


def ieee_div(numerator: float, denominator: float) -> float:
    """Divide like IEEE-754 instead of raising ZeroDivisionError.

    x / ±0.0 gives ±inf with the combined sign, 0/0 and nan/0 give nan.
    """
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def format_number(value: float) -> str:
    """Render a float the way a human writes it: 3.5, 100, -0.25, inf."""
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)
