import math
import typing

import pydantic as pc

from .errors import InputNaN

# Validation context flag: only accept JSON numbers, no bools or strings
NUMBERS_ONLY = "numbers_only"


def _require_number(value, info: pc.ValidationInfo):
    if info.context and info.context.get(NUMBERS_ONLY):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Expected a number, got {value!r}")
    return value


def _reject_nan(value: float) -> float:
    value = float(value)
    if math.isnan(value):
        raise InputNaN()
    return value


NotNanFloat: typing.TypeAlias = typing.Annotated[
    float, pc.BeforeValidator(_require_number), pc.AfterValidator(_reject_nan)
]

Pair: typing.TypeAlias = tuple[float, float]
