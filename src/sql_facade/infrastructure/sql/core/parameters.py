"""
Positional placeholder handling.

Predicates are always written with ``?`` placeholders. DB-API drivers use
different parameter styles, so the text is rewritten for the target
driver right before execution.
"""

from typing import Any, Dict, List, Sequence, Tuple, Union

PLACEHOLDER = "?"

# Quote characters whose enclosed text is never scanned for placeholders
_QUOTES = ("'", '"', "`")

Parameters = Union[Tuple[Any, ...], Dict[str, Any]]


def _split_placeholders(sql: str) -> List[str]:
    """Split SQL text around the ``?`` placeholders outside quoted runs.

    A doubled quote inside a quoted run is treated as an escaped quote.
    Inside string literals a backslash escapes the next character, as in
    MySQL's default SQL mode; backtick identifiers have no escapes.
    """
    chunks: List[str] = []
    current: List[str] = []
    quote = None
    escaped = False
    for ch in sql:
        if quote is not None:
            current.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\" and quote != "`":
                escaped = True
            elif ch == quote:
                quote = None
            continue
        if ch in _QUOTES:
            quote = ch
            current.append(ch)
        elif ch == PLACEHOLDER:
            chunks.append("".join(current))
            current = []
        else:
            current.append(ch)
    chunks.append("".join(current))
    return chunks


def count_placeholders(sql: str) -> int:
    """
    Count the ``?`` placeholders outside quoted literals and identifiers.

    Examples:
        >>> count_placeholders("id = ? and name = '?'")
        1
    """
    return len(_split_placeholders(sql)) - 1


def translate_placeholders(
    sql: str, paramstyle: str, values: Sequence[Any]
) -> Tuple[str, Parameters]:
    """
    Rewrite ``?`` placeholders for a DB-API parameter style.

    Args:
        sql: SQL text using ``?`` placeholders
        paramstyle: DB-API paramstyle of the target driver
        values: Bound values in placeholder order

    Returns:
        Tuple of (rewritten SQL, parameters in the shape the driver expects)

    Raises:
        ValueError: If the paramstyle is unknown

    Examples:
        >>> translate_placeholders("id = ? and score > ?", "format", [1, 40])
        ('id = %s and score > %s', (1, 40))
        >>> translate_placeholders("id = ? and score > ?", "named", [1, 40])
        ('id = :p1 and score > :p2', {'p1': 1, 'p2': 40})
    """
    if paramstyle == "qmark":
        return sql, tuple(values)

    chunks = _split_placeholders(sql)
    if paramstyle in ("format", "pyformat"):
        # A literal percent sign is significant once parameters are passed
        chunks = [chunk.replace("%", "%%") for chunk in chunks]
        markers = ["%s"] * (len(chunks) - 1)
        params: Parameters = tuple(values)
    elif paramstyle == "numeric":
        markers = [f":{i}" for i in range(1, len(chunks))]
        params = tuple(values)
    elif paramstyle == "named":
        markers = [f":p{i}" for i in range(1, len(chunks))]
        params = {f"p{i}": value for i, value in enumerate(values, start=1)}
    else:
        raise ValueError(f"Unsupported paramstyle: {paramstyle}")

    parts = [chunks[0]]
    for marker, chunk in zip(markers, chunks[1:]):
        parts.append(marker)
        parts.append(chunk)
    return "".join(parts), params
