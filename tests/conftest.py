import pytest

from float_duration.settings import get_settings

FEATURE_ENV_VARS = (
    "FLOAT_DURATION_MONOTONIC_INTEROP",
    "FLOAT_DURATION_CALENDAR_INTEROP",
    "FLOAT_DURATION_APPROX",
    "FLOAT_DURATION_SERDE",
)


@pytest.fixture(autouse=True)
def fresh_feature_settings(monkeypatch: pytest.MonkeyPatch):
    """Run every test with all features at their defaults."""
    for name in FEATURE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def disable_feature(monkeypatch: pytest.MonkeyPatch):
    """Return a function that switches one feature off for the current test."""

    def disable(feature: str) -> None:
        monkeypatch.setenv(f"FLOAT_DURATION_{feature.upper()}", "false")
        get_settings.cache_clear()

    return disable
