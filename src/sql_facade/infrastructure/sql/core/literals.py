"""
Literal rendering for values embedded directly into SQL text.

Textual values are wrapped in single quotes; every other value is emitted
through ``str()``. Embedded quote characters are NOT escaped, so only
trusted text may be rendered this way. Untrusted values belong in
placeholder-bound predicate arguments.
"""

from typing import Any

from .values import SQL_VALUE_TYPES, StringValue


def render_literal(value: Any) -> str:
    """
    Render one value as a SQL literal.

    Examples:
        >>> render_literal(43)
        '43'
        >>> render_literal("2014-11-9 14:32:42")
        "'2014-11-9 14:32:42'"
        >>> render_literal(None)
        'NULL'
    """
    if value is None:
        return "NULL"
    if isinstance(value, StringValue):
        return f"'{value.value}'"
    if isinstance(value, SQL_VALUE_TYPES):
        return str(value.value)
    if isinstance(value, str):
        return f"'{value}'"
    return str(value)
