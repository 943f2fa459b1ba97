"""Adapters between FloatDuration and external time representations.

Each adapter depends only on the core duration type and one external
representation, and each is gated by its own feature flag:

- ``monotonic``: non-negative nanosecond counts (``monotonic_interop``)
- ``timedelta``: ``datetime.timedelta`` (``calendar_interop``)
- ``relativedelta``: ``dateutil.relativedelta`` (``calendar_interop``)
- ``serde``: a float of seconds and the pydantic schema (``serde``)
"""

from float_duration.interop.monotonic import from_monotonic_ns, to_monotonic_ns
from float_duration.interop.relativedelta import from_relativedelta, to_relativedelta
from float_duration.interop.serde import from_float, to_float
from float_duration.interop.timedelta import from_timedelta, to_timedelta

__all__ = [
    "to_monotonic_ns",
    "from_monotonic_ns",
    "to_timedelta",
    "from_timedelta",
    "to_relativedelta",
    "from_relativedelta",
    "to_float",
    "from_float",
]
