"""Serialization of durations as a single float of seconds.

The float *is* the internal representation, so the round trip is exact. The
pydantic schema lets ``FloatDuration`` be used directly as a model field::

    class Step(BaseModel):
        dt: FloatDuration

    Step(dt=FloatDuration.milliseconds(10)).model_dump_json()  # '{"dt":0.01}'
    Step.model_validate_json('{"dt": 0.01}')

Infinite and NaN durations travel through JSON as the strings ``"inf"``,
``"-inf"`` and ``"nan"``.
"""

import math

from pydantic_core import CoreSchema, core_schema

from float_duration.duration import FloatDuration
from float_duration.settings import require_feature

_NON_FINITE_TEXT = frozenset(
    {"inf", "+inf", "-inf", "infinity", "+infinity", "-infinity", "nan"}
)


def to_float(duration: FloatDuration) -> float:
    """Raises FeatureDisabledError if ``serde`` is disabled."""
    require_feature("serde")
    return duration.secs


def from_float(value: float) -> FloatDuration:
    """Raises FeatureDisabledError if ``serde`` is disabled."""
    require_feature("serde")
    return FloatDuration.seconds(value)


def _non_finite_from_text(text: str) -> float:
    if text.strip().lower() not in _NON_FINITE_TEXT:
        raise ValueError(
            f"Expected a number of seconds, 'inf', '-inf' or 'nan', got {text!r}"
        )
    return float(text)


def _serialize(
    duration: FloatDuration, info: core_schema.SerializationInfo
) -> float | str:
    secs = to_float(duration)
    # JSON has no infinity or NaN literal
    if info.mode_is_json() and not math.isfinite(secs):
        return repr(secs)
    return secs


def pydantic_core_schema() -> CoreSchema:
    """Build the pydantic-core schema for ``FloatDuration`` fields.

    Validation accepts a number of seconds (or an existing FloatDuration in
    Python mode); serialization emits the number of seconds. In JSON, where
    floats cannot be infinite or NaN, those values are written as the strings
    ``"inf"``, ``"-inf"`` and ``"nan"`` and read back the same way.

    Raises:
        FeatureDisabledError: If ``serde`` is disabled when a model using
            FloatDuration is defined
    """
    require_feature("serde")
    from_number = core_schema.chain_schema(
        [
            core_schema.union_schema(
                [
                    core_schema.float_schema(allow_inf_nan=True),
                    core_schema.chain_schema(
                        [
                            core_schema.str_schema(),
                            core_schema.no_info_plain_validator_function(
                                _non_finite_from_text
                            ),
                        ]
                    ),
                ]
            ),
            core_schema.no_info_plain_validator_function(from_float),
        ]
    )
    return core_schema.json_or_python_schema(
        json_schema=from_number,
        python_schema=core_schema.union_schema(
            [core_schema.is_instance_schema(FloatDuration), from_number]
        ),
        serialization=core_schema.plain_serializer_function_ser_schema(
            _serialize, info_arg=True
        ),
    )
