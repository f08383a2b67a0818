"""DDL statement builders."""

from typing import Iterable

from ...schema.core import DatabaseColumn
from .clauses import join_items


def build_create_table(table: str, columns: Iterable[DatabaseColumn]) -> str:
    """
    Build a CREATE TABLE statement from column definitions.

    Each column contributes its ``column_string()`` in the given order.

    Example:
        >>> from sql_facade.infrastructure.schema import ColumnSpec
        >>> build_create_table("t", [ColumnSpec("id", "int", "primary key"),
        ...                          ColumnSpec("saved", "datetime")])
        'CREATE TABLE t (id int primary key,saved datetime )'
    """
    fragments = join_items(column.column_string() for column in columns)
    return f"CREATE TABLE {table} ({fragments})"


def build_drop_table(table: str) -> str:
    return f"DROP TABLE {table}"
