"""Fragments shared by the statement builders."""

from typing import Any, Iterable, Optional

SEPARATOR = ","


def where_clause(predicate: Optional[str]) -> str:
    """
    Render the WHERE fragment for a predicate.

    The predicate is appended verbatim; it is never parsed or escaped.

    Examples:
        >>> where_clause("id = ?")
        ' WHERE id = ?'
        >>> where_clause("")
        ''
    """
    if not predicate:
        return ""
    return f" WHERE {predicate}"


def join_items(items: Iterable[Any]) -> str:
    """Join items with commas and no surrounding separators."""
    return SEPARATOR.join(str(item) for item in items)
