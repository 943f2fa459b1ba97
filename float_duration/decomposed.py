from __future__ import annotations

import math
from dataclasses import dataclass, replace

from float_duration.duration import FloatDuration
from float_duration.errors import OutOfRangeError
from float_duration.util import SECS_PER_DAY, SECS_PER_HOUR, SECS_PER_MINUTE, format_number


@dataclass(frozen=True, kw_only=True)
class DecomposedTime:
    """A duration broken into days, hours, minutes and seconds.

    Mainly a human-readable, composable view of a ``FloatDuration``; the two
    convert back and forth freely. All components are non-negative and
    ``sign`` carries the direction.
    """

    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    fractional_seconds: float = 0.0
    sign: int = 1

    def __post_init__(self) -> None:
        if self.sign not in (1, -1):
            raise ValueError(f"DecomposedTime sign must be 1 or -1, got {self.sign}")
        for name in ("days", "hours", "minutes", "seconds"):
            if getattr(self, name) < 0:
                raise ValueError(
                    f"DecomposedTime {name} must be >= 0, got {getattr(self, name)}.\n"
                    f"Hint: use sign=-1 or negate() for negative durations"
                )
        if not 0.0 <= self.fractional_seconds < 1.0:
            raise ValueError(
                f"DecomposedTime fractional_seconds must be in [0, 1), "
                f"got {self.fractional_seconds}"
            )

    @classmethod
    def zero(cls) -> DecomposedTime:
        return cls()

    @classmethod
    def from_components(
        cls,
        days: int,
        hours: int,
        minutes: int,
        seconds: int,
        fractional_seconds: float = 0.0,
    ) -> DecomposedTime:
        return cls(
            days=days,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            fractional_seconds=fractional_seconds,
        )

    @classmethod
    def from_duration(cls, duration: FloatDuration) -> DecomposedTime:
        """Decompose a finite duration.

        Raises:
            OutOfRangeError: If the duration is infinite or NaN
        """
        if not math.isfinite(duration.secs):
            raise OutOfRangeError(
                duration.secs, "DecomposedTime", "only finite durations decompose"
            )

        remaining = abs(duration.secs)
        days, remaining = divmod(remaining, SECS_PER_DAY)
        hours, remaining = divmod(remaining, SECS_PER_HOUR)
        minutes, remaining = divmod(remaining, SECS_PER_MINUTE)
        seconds, fraction = divmod(remaining, 1.0)

        return cls(
            days=int(days),
            hours=int(hours),
            minutes=int(minutes),
            seconds=int(seconds),
            fractional_seconds=fraction,
            sign=-1 if duration.secs < 0 else 1,
        )

    def negate(self) -> DecomposedTime:
        return replace(self, sign=-self.sign)

    def to_duration(self) -> FloatDuration:
        total = (
            self.days * SECS_PER_DAY
            + self.hours * SECS_PER_HOUR
            + self.minutes * SECS_PER_MINUTE
            + self.seconds
            + self.fractional_seconds
        )
        return FloatDuration(self.sign * total)

    def __str__(self) -> str:
        """Clock-style text such as ``1d 02:30:05.25`` or ``-00:01:30``."""
        text = "-" if self.sign < 0 else ""
        if self.days > 0:
            text += f"{self.days}d "
        text += f"{self.hours:02}:{self.minutes:02}:"
        if self.fractional_seconds > 0.0:
            padding = "0" if self.seconds < 10 else ""
            text += f"{padding}{format_number(self.seconds + self.fractional_seconds)}"
        else:
            text += f"{self.seconds:02}"
        return text
