"""
SQL module for statement generation.

Builders are pure functions: they take a table name, columns, an optional
predicate and values, and return SQL text. Predicates use ``?`` placeholders
that are rewritten for the driver's parameter style at execution time.
"""

from .core import (
    DoubleValue,
    FloatValue,
    IntValue,
    LongValue,
    SqlValue,
    StringValue,
    count_placeholders,
    render_literal,
    to_sql_value,
    translate_placeholders,
)
from .operations import (
    WILDCARD,
    build_aggregate,
    build_create_table,
    build_delete,
    build_drop_table,
    build_insert,
    build_select,
    build_update,
)

__all__ = [
    "IntValue",
    "LongValue",
    "FloatValue",
    "DoubleValue",
    "StringValue",
    "SqlValue",
    "to_sql_value",
    "render_literal",
    "count_placeholders",
    "translate_placeholders",
    "WILDCARD",
    "build_select",
    "build_aggregate",
    "build_insert",
    "build_update",
    "build_delete",
    "build_create_table",
    "build_drop_table",
]
