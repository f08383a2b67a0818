"""Table-name and column resolution for table descriptors."""

from __future__ import annotations

import inspect
from enum import Enum
from typing import Any, Sequence

from sql_facade.infrastructure.exceptions import ConfigurationError
from sql_facade.utils.logging import get_logger

from .core import DatabaseColumn, TableDescriptor

logger = get_logger(__name__)

TABLE_NAME_ACCESSOR = "table_name"


def resolve_table_name(table: Any) -> str:
    """
    Produce the canonical table name for a table descriptor.

    A ``TableDescriptor`` names itself. Any other table must be a class
    exposing a zero-argument ``table_name`` static or class method that
    returns a string.

    Args:
        table: TableDescriptor value or a class with a ``table_name`` accessor

    Returns:
        Table name

    Raises:
        ConfigurationError: If the accessor is missing, needs an instance,
            or does not return a string
    """
    if isinstance(table, TableDescriptor):
        if not isinstance(table.name, str) or not table.name:
            _fail(table, "descriptor name must be a non-empty string")
        return table.name

    if not isinstance(table, type):
        _fail(table, f"expected a TableDescriptor or a class, got {type(table).__name__}")

    try:
        raw = inspect.getattr_static(table, TABLE_NAME_ACCESSOR)
    except AttributeError:
        _fail(table, f"require a static '{TABLE_NAME_ACCESSOR}()' method")

    if not isinstance(raw, (staticmethod, classmethod)):
        _fail(table, f"'{TABLE_NAME_ACCESSOR}' must be a staticmethod or classmethod")

    try:
        name = getattr(table, TABLE_NAME_ACCESSOR)()
    except TypeError as e:
        raise _error(table, f"'{TABLE_NAME_ACCESSOR}()' is not callable without arguments") from e

    if not isinstance(name, str):
        _fail(table, f"'{TABLE_NAME_ACCESSOR}()' returned {type(name).__name__}, not str")
    return name


def resolve_columns(table: Any) -> Sequence[DatabaseColumn]:
    """Return the ordered columns of a table descriptor.

    Raises:
        ConfigurationError: If the table carries no column list
    """
    if isinstance(table, TableDescriptor):
        return table.columns
    if isinstance(table, type) and issubclass(table, Enum):
        return list(table)
    _fail(table, "no ordered column list to create the table from")


def _error(table: Any, reason: str) -> ConfigurationError:
    error = ConfigurationError(table, reason)
    logger.error("schema.resolve_failed", **error.to_dict())
    return error


def _fail(table: Any, reason: str) -> None:
    raise _error(table, reason)
