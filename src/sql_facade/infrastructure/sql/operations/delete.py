"""SQL DELETE statement builder."""

from typing import Optional

from .clauses import where_clause


def build_delete(table: str, predicate: Optional[str] = None) -> str:
    """
    Build a DELETE statement; without a predicate every row is deleted.

    Example:
        >>> build_delete("t", "id = 2")
        'DELETE FROM t WHERE id = 2'
    """
    return f"DELETE FROM {table}{where_clause(predicate)}"
