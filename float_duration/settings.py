"""Feature flags via pydantic-settings.

Each optional interoperability surface can be switched off independently
through an environment variable. All features are enabled by default::

    FLOAT_DURATION_MONOTONIC_INTEROP=false
    FLOAT_DURATION_CALENDAR_INTEROP=false
    FLOAT_DURATION_APPROX=false
    FLOAT_DURATION_SERDE=false

Settings are read once and cached. Call ``get_settings.cache_clear()`` after
changing the environment to reload them.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from float_duration.errors import FeatureDisabledError

logger = logging.getLogger(__name__)

Feature = Literal["monotonic_interop", "calendar_interop", "approx", "serde"]


class FeatureSettings(BaseSettings):
    """Switches for the optional parts of float_duration."""

    model_config = SettingsConfigDict(
        env_prefix="FLOAT_DURATION_",
        extra="ignore",
        frozen=True,
    )

    monotonic_interop: bool = Field(
        default=True,
        description=(
            "Conversions to and from non-negative nanosecond counts, "
            "and MonotonicInstant time points."
        ),
    )
    calendar_interop: bool = Field(
        default=True,
        description=(
            "Conversions to and from datetime.timedelta and "
            "dateutil.relativedelta, and datetime time points."
        ),
    )
    approx: bool = Field(
        default=True,
        description="Tolerance-based equality (approx_eq, ulps_eq).",
    )
    serde: bool = Field(
        default=True,
        description="Float serialization and the pydantic field schema.",
    )

    def enabled(self, feature: Feature) -> bool:
        return bool(getattr(self, feature))


@lru_cache(maxsize=1)
def get_settings() -> FeatureSettings:
    """Return the process-wide feature settings, loading them on first use."""
    settings = FeatureSettings()
    logger.debug("Loaded float_duration feature settings: %s", settings.model_dump())
    return settings


def require_feature(feature: Feature) -> None:
    """Raise FeatureDisabledError unless ``feature`` is enabled."""
    if not get_settings().enabled(feature):
        raise FeatureDisabledError(feature)
