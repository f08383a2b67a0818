"""
Parameter binding.

Dispatches each argument to the typed bind operation of a statement handle.
Arguments are bound strictly left to right, so the n-th argument fills the
n-th ``?`` placeholder. The number of arguments is not checked against the
number of placeholders; a mismatch surfaces as a driver error on execution.
"""

from __future__ import annotations

from typing import Any, Iterable

from sql_facade.infrastructure.exceptions import UnsupportedArgumentType
from sql_facade.infrastructure.sql.core.values import (
    DoubleValue,
    FloatValue,
    IntValue,
    LongValue,
    StringValue,
    to_sql_value,
)
from sql_facade.utils.logging import get_logger

from .statement import StatementHandle

logger = get_logger(__name__)


def bind(handle: StatementHandle, value: Any) -> StatementHandle:
    """
    Bind one argument at the handle's next position.

    Args:
        handle: Open statement handle
        value: int, float, str or an explicit SQL value

    Returns:
        The same handle, for chaining

    Raises:
        UnsupportedArgumentType: If the value is not a supported scalar
        ClosedHandleError: If the handle is closed
    """
    try:
        sql_value = to_sql_value(value)
    except UnsupportedArgumentType as e:
        logger.error("binder.unsupported_type", **e.to_dict())
        raise

    if isinstance(sql_value, IntValue):
        return handle.set_int(sql_value.value)
    if isinstance(sql_value, LongValue):
        return handle.set_long(sql_value.value)
    if isinstance(sql_value, FloatValue):
        return handle.set_float(sql_value.value)
    if isinstance(sql_value, DoubleValue):
        return handle.set_double(sql_value.value)
    if isinstance(sql_value, StringValue):
        return handle.set_string(sql_value.value)
    raise UnsupportedArgumentType(value)  # pragma: no cover - to_sql_value is exhaustive


def bind_all(handle: StatementHandle, values: Iterable[Any]) -> StatementHandle:
    """Bind every argument in order."""
    for value in values:
        bind(handle, value)
    return handle
