"""Core SQL utilities: typed values, literals and placeholders."""

from .literals import render_literal
from .parameters import PLACEHOLDER, count_placeholders, translate_placeholders
from .values import (
    DoubleValue,
    FloatValue,
    IntValue,
    LongValue,
    SqlValue,
    StringValue,
    to_sql_value,
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
    "PLACEHOLDER",
    "count_placeholders",
    "translate_placeholders",
]
