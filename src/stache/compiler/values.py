"""Value model for data contexts.

Every value looked up during rendering is classified once into a
`ValueKind`; the renderer dispatches on the kind.
"""

from __future__ import annotations

import enum
import math
from collections.abc import Mapping, Sequence
from datetime import date, time
from decimal import Decimal
from numbers import Integral, Real
from typing import Any


class ValueKind(enum.Enum):
    NULL = "null"
    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"
    DATE = "date"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    OTHER = "other"

    @property
    def is_scalar(self) -> bool:
        return self in (
            ValueKind.STRING,
            ValueKind.BOOLEAN,
            ValueKind.NUMBER,
            ValueKind.DATE,
        )


def classify(value: Any) -> ValueKind:
    if value is None:
        return ValueKind.NULL
    if isinstance(value, str):
        return ValueKind.STRING
    # bool is an Integral, so it must be checked first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (Real, Decimal)):
        return ValueKind.NUMBER
    # datetime is a date subclass
    if isinstance(value, (date, time)):
        return ValueKind.DATE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, (Sequence, set, frozenset)) and not isinstance(
        value, (bytes, bytearray)
    ):
        return ValueKind.SEQUENCE
    return ValueKind.OTHER


def format_number(value: Any) -> str:
    """Canonical decimal form of a number.

    Integral floats drop the fractional part (`2.0` -> `2`, `-0.0` -> `-0`),
    other floats use the shortest round-trip form with a signed exponent
    (`1e+21`).
    """
    if isinstance(value, Decimal):
        if value.is_nan():
            return "NaN"
        if value.is_infinite():
            return "-Inf" if value.is_signed() else "+Inf"
        return format(value.normalize(), "f")
    if isinstance(value, Integral):
        return str(int(value))

    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"
    if number.is_integer() and abs(number) < 1e21:
        sign = "-" if math.copysign(1.0, number) < 0 and number == 0 else ""
        return sign + str(int(number))
    return repr(number)


def format_scalar(kind: ValueKind, value: Any) -> str:
    if kind is ValueKind.STRING:
        return value
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind is ValueKind.NUMBER:
        return format_number(value)
    if kind is ValueKind.DATE:
        return value.isoformat()
    raise ValueError(f"Not a scalar kind: {kind.value}")
