"""
Statement handles.

A ``StatementHandle`` wraps one SQL text prepared against a live SQLAlchemy
connection. Positional arguments are bound one at a time; each bind takes
the next 1-based position. The handle is ``Open`` until ``close()`` and
``Closed`` afterwards, where everything except ``close()`` fails.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Tuple

from sqlalchemy import Connection, CursorResult
from sqlalchemy.exc import SQLAlchemyError

from sql_facade.infrastructure.exceptions import (
    ClosedHandleError,
    StatementCreationError,
)
from sql_facade.infrastructure.sql.core.parameters import (
    count_placeholders,
    translate_placeholders,
)
from sql_facade.infrastructure.sql.core.values import FloatValue
from sql_facade.utils.logging import get_logger

logger = get_logger(__name__)


class StatementHandle:
    """
    One prepared statement and its bound arguments.

    Results returned by ``execute_query`` and ``generated_keys`` are only
    valid while the handle is open; closing the handle closes them too.

    Example:
        >>> handle = StatementHandle(conn, "SELECT * FROM users WHERE id = ?")
        >>> rows = handle.set_int(1).execute_query().all()
        >>> handle.close()
    """

    def __init__(self, connection: Connection, sql: str):
        """
        Prepare SQL text against a connection.

        Args:
            connection: Live SQLAlchemy Connection; not owned by the handle
            sql: SQL text with ``?`` placeholders

        Raises:
            StatementCreationError: If the text is empty or the connection
                is closed or unusable
        """
        if not sql or not sql.strip():
            raise self._creation_failed(sql, "empty statement")
        if connection.closed or connection.invalidated:
            raise self._creation_failed(sql, "connection is not usable")
        try:
            # Touch the DBAPI connection so a dead link fails here, not later
            connection.connection
        except SQLAlchemyError as e:
            raise self._creation_failed(sql, "connection is not usable") from e

        self.connection = connection
        self.sql = sql
        self._paramstyle: str = connection.dialect.paramstyle
        self._position = 0
        self._params: Dict[int, Any] = {}
        self._result: Optional[CursorResult[Any]] = None
        self._last_key: Optional[int] = None
        self._closed = False
        logger.debug("statement.prepared", sql=sql)

    @staticmethod
    def _creation_failed(sql: str, reason: str) -> StatementCreationError:
        error = StatementCreationError(sql, f"failed to prepare statement: {reason}")
        logger.error("statement.prepare_failed", reason=reason, sql=sql)
        return error

    @property
    def position(self) -> int:
        """Position taken by the most recent bind; 0 before any bind."""
        return self._position

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def parameters(self) -> Tuple[Any, ...]:
        """Bound values ordered by position."""
        return tuple(self._params[i] for i in range(1, self._position + 1))

    def _check_open(self, operation: str) -> None:
        if self._closed:
            raise ClosedHandleError(operation, self.sql)

    def _bind(self, value: Any) -> "StatementHandle":
        self._check_open("bind")
        self._position += 1
        self._params[self._position] = value
        return self

    # ── Typed binds ───────────────────────────────────────

    def set_int(self, x: int) -> "StatementHandle":
        return self._bind(int(x))

    def set_long(self, x: int) -> "StatementHandle":
        return self._bind(int(x))

    def set_float(self, x: float) -> "StatementHandle":
        return self._bind(FloatValue(float(x)).single)

    def set_double(self, x: float) -> "StatementHandle":
        return self._bind(float(x))

    def set_string(self, x: str) -> "StatementHandle":
        return self._bind(str(x))

    # ── Execution ─────────────────────────────────────────

    def _execute(self) -> CursorResult[Any]:
        if self._result is not None:
            # Re-executing invalidates the previous result, as a driver would
            self._result.close()
            self._result = None

        values: List[Any] = list(self.parameters)
        placeholders = count_placeholders(self.sql)
        if placeholders != len(values):
            # The driver reports the mismatch itself
            logger.debug(
                "statement.argument_mismatch",
                sql=self.sql,
                placeholders=placeholders,
                arguments=len(values),
            )
        if values:
            sql, params = translate_placeholders(self.sql, self._paramstyle, values)
            result = self.connection.exec_driver_sql(sql, params)
        else:
            result = self.connection.exec_driver_sql(
                self.sql, execution_options={"no_parameters": True}
            )
        self._result = result
        return result

    def execute_query(self) -> CursorResult[Any]:
        """
        Run the statement as a read.

        Returns:
            Forward-iterable result; rows expose columns by position and,
            through ``row._mapping``, by name
        """
        self._check_open("execute query")
        result = self._execute()
        logger.debug("statement.executed", kind="query", sql=self.sql)
        return result

    def execute_update(self) -> int:
        """
        Run the statement as a write.

        Returns:
            Number of affected rows as reported by the driver
        """
        self._check_open("execute update")
        result = self._execute()
        self._last_key = result.lastrowid or None
        logger.debug(
            "statement.executed", kind="update", sql=self.sql, rowcount=result.rowcount
        )
        return result.rowcount

    def generated_keys(self) -> Iterator[Tuple[int]]:
        """
        Keys generated by the most recent write.

        Returns:
            Iterator of one-element rows; empty when no key was generated
        """
        self._check_open("read generated keys")
        if self._last_key is None:
            return iter(())
        return iter([(self._last_key,)])

    def close(self) -> None:
        """Release the statement and any open result. Closing twice is a no-op."""
        if self._closed:
            return
        self._closed = True
        if self._result is not None:
            self._result.close()
            self._result = None
        logger.debug("statement.closed", sql=self.sql, position=self._position)

    def __enter__(self) -> "StatementHandle":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "Closed" if self._closed else "Open"
        return f"<StatementHandle {state} position={self._position} sql={self.sql!r}>"
