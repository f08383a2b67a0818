"""SQL UPDATE statement builder."""

from typing import Any, Mapping, Optional

from ..core.literals import render_literal
from .clauses import join_items, where_clause


def build_update(
    table: str, values: Mapping[Any, Any], predicate: Optional[str] = None
) -> str:
    """
    Build an UPDATE statement with literal values.

    Assignments follow the mapping's iteration order. String values are
    single-quoted without escaping. An empty mapping yields ``UPDATE t SET ``.

    Args:
        table: Table name
        values: Ordered mapping of column to new value
        predicate: Optional WHERE clause text

    Returns:
        UPDATE SQL statement

    Example:
        >>> build_update("t", {"score": 43, "saved": "2014-11-9 14:32:42"})
        "UPDATE t SET score = 43,saved = '2014-11-9 14:32:42'"
    """
    assignments = join_items(
        f"{column} = {render_literal(value)}" for column, value in values.items()
    )
    return f"UPDATE {table} SET {assignments}{where_clause(predicate)}"
