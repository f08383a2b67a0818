"""SQL INSERT statement builder."""

from typing import Any, Mapping

from ..core.literals import render_literal
from .clauses import join_items


def build_insert(table: str, values: Mapping[Any, Any]) -> str:
    """
    Build an INSERT statement with literal values.

    Columns and values are emitted positionally aligned, in the mapping's
    iteration order. String values are single-quoted without escaping.
    An empty mapping yields ``INSERT INTO t () VALUES ()``.

    Args:
        table: Table name
        values: Ordered mapping of column to value

    Returns:
        INSERT SQL statement

    Example:
        >>> build_insert("t", {"name": "a", "score": 56})
        "INSERT INTO t (name,score) VALUES ('a',56)"
    """
    columns = join_items(values.keys())
    literals = join_items(render_literal(v) for v in values.values())
    return f"INSERT INTO {table} ({columns}) VALUES ({literals})"
