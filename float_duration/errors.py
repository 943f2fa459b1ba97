"""Exception hierarchy for float_duration.

Construction and arithmetic never raise for floating-point edge values; only
conversions to external representations, time-point differences, and
disabled features do.
"""


class FloatDurationError(Exception):
    """Base exception for float_duration errors."""


class OutOfRangeError(FloatDurationError, ValueError):
    """Raised when a duration cannot be represented by the target type."""

    def __init__(self, value: float | None, target: str, reason: str = "") -> None:
        subject = "Value" if value is None else f"Duration of {value!r} seconds"
        message = f"{subject} is out of range for {target}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.value = value
        self.target = target
        self.reason = reason


class TimePointError(FloatDurationError, ValueError):
    """Raised when the duration between two time points cannot be computed."""


class FeatureDisabledError(FloatDurationError, RuntimeError):
    """Raised when an operation behind a disabled feature flag is used."""

    def __init__(self, feature: str) -> None:
        env_var = f"FLOAT_DURATION_{feature.upper()}"
        super().__init__(
            f"The {feature!r} feature is disabled.\n"
            f"Hint: unset {env_var} or set it to true to enable it."
        )
        self.feature = feature
