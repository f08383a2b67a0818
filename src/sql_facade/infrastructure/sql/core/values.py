"""
Typed SQL scalar values.

Bind arguments and literal values are one of five explicit kinds. Raw
Python scalars are mapped onto them by ``to_sql_value``; anything else is
rejected rather than coerced.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Any, Union

from sql_facade.infrastructure.exceptions import UnsupportedArgumentType

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1


@dataclass(frozen=True)
class IntValue:
    """Signed 32-bit integer."""

    value: int

    def __post_init__(self) -> None:
        if not INT_MIN <= self.value <= INT_MAX:
            raise ValueError(f"{self.value} does not fit in a 32-bit integer")


@dataclass(frozen=True)
class LongValue:
    """Signed 64-bit integer."""

    value: int

    def __post_init__(self) -> None:
        if not LONG_MIN <= self.value <= LONG_MAX:
            raise ValueError(f"{self.value} does not fit in a 64-bit integer")


@dataclass(frozen=True)
class FloatValue:
    """Single-precision float; the bound value is rounded to 32 bits."""

    value: float

    @property
    def single(self) -> float:
        return struct.unpack("f", struct.pack("f", self.value))[0]


@dataclass(frozen=True)
class DoubleValue:
    """Double-precision float."""

    value: float


@dataclass(frozen=True)
class StringValue:
    """Text."""

    value: str


SqlValue = Union[IntValue, LongValue, FloatValue, DoubleValue, StringValue]

SQL_VALUE_TYPES = (IntValue, LongValue, FloatValue, DoubleValue, StringValue)


def to_sql_value(raw: Any) -> SqlValue:
    """
    Map a raw Python scalar onto its SQL value kind.

    Args:
        raw: int, float, str, or an already typed SQL value

    Returns:
        IntValue for ints in the 32-bit range, LongValue for larger ints,
        DoubleValue for floats, StringValue for strings

    Raises:
        UnsupportedArgumentType: For bool, None, dates and every other type

    Examples:
        >>> to_sql_value(1)
        IntValue(value=1)
        >>> to_sql_value(2**40)
        LongValue(value=1099511627776)
        >>> to_sql_value("male")
        StringValue(value='male')
    """
    if isinstance(raw, SQL_VALUE_TYPES):
        return raw
    # bool is an int subclass; callers must convert it explicitly
    if isinstance(raw, bool):
        raise UnsupportedArgumentType(raw)
    if isinstance(raw, int):
        if INT_MIN <= raw <= INT_MAX:
            return IntValue(raw)
        if LONG_MIN <= raw <= LONG_MAX:
            return LongValue(raw)
        raise UnsupportedArgumentType(raw)
    if isinstance(raw, float):
        return DoubleValue(raw)
    if isinstance(raw, str):
        return StringValue(raw)
    raise UnsupportedArgumentType(raw)
