"""
SQL SELECT statement builders.

Example:
    >>> build_select("test_table", ["id", "name", "score"], "id = ?")
    'SELECT id,name,score FROM test_table WHERE id = ?'
    >>> build_aggregate("count", "test_table", "*")
    'SELECT count(*) FROM test_table'
"""

from typing import Any, Optional, Sequence, Union

from .clauses import join_items, where_clause

WILDCARD = "*"


def build_select(
    table: str,
    columns: Union[str, Sequence[Any]],
    predicate: Optional[str] = None,
) -> str:
    """
    Build a SELECT statement.

    Args:
        table: Table name
        columns: Columns to select, or the wildcard ``"*"``
        predicate: Optional WHERE clause text, possibly with ``?`` placeholders

    Returns:
        SELECT SQL statement
    """
    if isinstance(columns, str):
        columns = [columns]
    return f"SELECT {join_items(columns)} FROM {table}{where_clause(predicate)}"


def build_aggregate(
    function: str,
    table: str,
    column: Any = WILDCARD,
    predicate: Optional[str] = None,
) -> str:
    """
    Build a single-aggregate SELECT statement.

    The function name is passed through as given; it is not checked
    against a list of known aggregates.

    Args:
        function: Aggregate name such as ``sum``, ``max``, ``min``, ``count``
        table: Table name
        column: Column to aggregate, ``"*"`` for ``count``
        predicate: Optional WHERE clause text

    Returns:
        SELECT <function>(<column>) SQL statement
    """
    return f"SELECT {function}({column}) FROM {table}{where_clause(predicate)}"
