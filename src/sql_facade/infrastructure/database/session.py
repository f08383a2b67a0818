"""
Session facade.

A ``Session`` owns one connection and the registry of every statement
opened through it. Each operation resolves the table name, builds the SQL
text, opens and registers a statement handle, binds the predicate
arguments in order and executes.

Sessions are not thread-safe. Callers sharing one session across threads
or tasks must synchronize access themselves.

Literal values in ``insert``/``update`` mappings and raw predicate text are
embedded into the SQL without escaping. Pass untrusted values only as
predicate arguments, which are bound through ``?`` placeholders.
"""

from __future__ import annotations

import uuid
from typing import Any, Mapping, Optional, Sequence

from sqlalchemy import Connection, CursorResult, inspect

from sql_facade.infrastructure.exceptions import EmptyResultError
from sql_facade.infrastructure.schema.resolver import (
    resolve_columns,
    resolve_table_name,
)
from sql_facade.infrastructure.sql.operations import (
    WILDCARD,
    build_aggregate,
    build_create_table,
    build_delete,
    build_drop_table,
    build_insert,
    build_select,
    build_update,
)
from sql_facade.utils.logging import bind_context

from .binder import bind_all
from .connection import ConnectionProvider
from .registry import StatementRegistry
from .statement import StatementHandle

NO_KEY = -1


def _column_predicate(column: Any) -> str:
    return f"{column}=?"


class Session:
    """
    Caller-facing CRUD facade over one connection.

    Example:
        >>> with Session.connect("sqlite://") as db:
        ...     db.create(Users)
        ...     new_id = db.insert(Users, {Users.NAME: "name1", Users.SCORE: 80})
        ...     rows = db.select_by_column(Users, Users.ID, new_id).all()
    """

    def __init__(
        self,
        connection: Connection,
        *,
        provider: Optional[ConnectionProvider] = None,
    ) -> None:
        """
        Initialize the session.

        Args:
            connection: Live SQLAlchemy Connection, owned by the session
            provider: Provider that opened the connection; disposed on close
        """
        self.connection = connection
        self.registry = StatementRegistry()
        self._provider = provider
        self._closed = False
        self.logger = bind_context(session_id=uuid.uuid4().hex[:8])
        self.logger.info("session.opened", dialect=connection.dialect.name)

    @classmethod
    def connect(cls, url: Optional[str] = None, **provider_kwargs: Any) -> "Session":
        """
        Open a session on a fresh connection.

        Args:
            url: SQLAlchemy database URL; defaults to the configured one
            **provider_kwargs: Passed to ``ConnectionProvider``

        Raises:
            DatabaseConnectionError: If the connection cannot be established
        """
        provider = ConnectionProvider(url, **provider_kwargs)
        try:
            connection = provider.connect()
        except Exception:
            provider.dispose()
            raise
        return cls(connection, provider=provider)

    @property
    def closed(self) -> bool:
        return self._closed

    # ── Statements ────────────────────────────────────────

    def prepare(self, sql: str) -> StatementHandle:
        """
        Open a statement for arbitrary SQL and register it for cleanup.

        Registration happens before any execution, so a handle whose
        execution later fails is still released by ``clear()``.
        """
        handle = StatementHandle(self.connection, sql)
        return self.registry.register(handle)

    def _prepare_with_args(self, sql: str, args: Sequence[Any]) -> StatementHandle:
        return bind_all(self.prepare(sql), args)

    # ── Reads ─────────────────────────────────────────────

    def select(
        self, table: Any, columns: Sequence[Any], where: Optional[str] = None, *args: Any
    ) -> CursorResult[Any]:
        """
        Select columns from rows matching a predicate.

        Args:
            table: Table descriptor
            columns: Columns to select
            where: Predicate with ``?`` placeholders; None or "" selects all rows
            *args: Values for the placeholders, in order
        """
        sql = build_select(resolve_table_name(table), columns, where)
        return self._prepare_with_args(sql, args).execute_query()

    def select_all_columns(
        self, table: Any, where: Optional[str] = None, *args: Any
    ) -> CursorResult[Any]:
        """Select every column of the rows matching a predicate."""
        return self.select(table, [WILDCARD], where, *args)

    def select_by_column(self, table: Any, column: Any, value: Any) -> CursorResult[Any]:
        """Select every column of the rows whose ``column`` equals ``value``."""
        return self.select_all_columns(table, _column_predicate(column), value)

    def select_all(self, table: Any) -> CursorResult[Any]:
        """Select every column of every row."""
        return self.select_all_columns(table, "")

    def exists_record(self, table: Any, where: Optional[str] = None, *args: Any) -> bool:
        """Whether at least one row matches the predicate."""
        return self.select_all_columns(table, where, *args).first() is not None

    def exists_record_by_column(self, table: Any, column: Any, value: Any) -> bool:
        return self.exists_record(table, _column_predicate(column), value)

    def exists_table(self, table: Any) -> bool:
        """Whether the table exists in the connected database."""
        return inspect(self.connection).has_table(resolve_table_name(table))

    # ── Writes ────────────────────────────────────────────

    def update(
        self,
        table: Any,
        values: Mapping[Any, Any],
        where: Optional[str] = None,
        *args: Any,
    ) -> int:
        """
        Update rows matching a predicate.

        Args:
            table: Table descriptor
            values: Ordered mapping of column to new literal value
            where: Predicate with ``?`` placeholders
            *args: Values for the placeholders, in order

        Returns:
            Number of updated rows
        """
        sql = build_update(resolve_table_name(table), values, where)
        return self._prepare_with_args(sql, args).execute_update()

    def update_by_column(
        self, table: Any, values: Mapping[Any, Any], column: Any, value: Any
    ) -> int:
        return self.update(table, values, _column_predicate(column), value)

    def insert(self, table: Any, values: Mapping[Any, Any]) -> int:
        """
        Insert one row.

        Args:
            table: Table descriptor
            values: Ordered mapping of column to literal value

        Returns:
            The first generated key, or -1 when no row was written or no
            key was generated
        """
        sql = build_insert(resolve_table_name(table), values)
        handle = self.prepare(sql)
        if handle.execute_update() == 0:
            return NO_KEY
        row = next(handle.generated_keys(), None)
        if row is None:
            return NO_KEY
        return int(row[0])

    def delete(self, table: Any, where: Optional[str] = None, *args: Any) -> int:
        """Delete rows matching a predicate and return how many were deleted."""
        sql = build_delete(resolve_table_name(table), where)
        return self._prepare_with_args(sql, args).execute_update()

    def delete_by_column(self, table: Any, column: Any, value: Any) -> int:
        return self.delete(table, _column_predicate(column), value)

    def empty(self, table: Any) -> int:
        """Delete every row of the table."""
        return self.delete(table, "")

    # ── DDL ───────────────────────────────────────────────

    def create(self, table: Any) -> None:
        """Create the table from its ordered column definitions."""
        sql = build_create_table(resolve_table_name(table), resolve_columns(table))
        self.prepare(sql).execute_update()
        self.logger.info("table.created", table=resolve_table_name(table))

    def drop(self, table: Any) -> None:
        table_name = resolve_table_name(table)
        self.prepare(build_drop_table(table_name)).execute_update()
        self.logger.info("table.dropped", table=table_name)

    # ── Aggregates ────────────────────────────────────────

    def _aggregate(
        self,
        function: str,
        table: Any,
        column: Any,
        where: Optional[str],
        args: Sequence[Any],
    ) -> int:
        table_name = resolve_table_name(table)
        sql = build_aggregate(function, table_name, column, where)
        row = self._prepare_with_args(sql, args).execute_query().first()
        if row is None:
            error = EmptyResultError(function, table_name)
            self.logger.error("aggregate.empty_result", **error.to_dict())
            raise error
        # SQL NULL (e.g. sum over no rows) reads as 0
        return int(row[0] or 0)

    def sum(self, table: Any, column: Any, where: Optional[str] = None, *args: Any) -> int:
        return self._aggregate("sum", table, column, where, args)

    def max(self, table: Any, column: Any, where: Optional[str] = None, *args: Any) -> int:
        return self._aggregate("max", table, column, where, args)

    def min(self, table: Any, column: Any, where: Optional[str] = None, *args: Any) -> int:
        return self._aggregate("min", table, column, where, args)

    def count(
        self, table: Any, column: Any = WILDCARD, where: Optional[str] = None, *args: Any
    ) -> int:
        """Count rows; ``column`` defaults to ``*``."""
        return self._aggregate("count", table, column, where, args)

    # ── Lifecycle ─────────────────────────────────────────

    def clear(self) -> int:
        """
        Close every statement opened through this session, earliest first.

        Returns:
            Number of statements released

        Raises:
            Exception: The first close failure, after all handles were attempted
        """
        return self.registry.clear()

    def close(self) -> None:
        """Close the connection, then release every registered statement."""
        if self._closed:
            return
        self._closed = True
        try:
            self.connection.close()
        finally:
            try:
                released = self.clear()
            finally:
                if self._provider is not None:
                    self._provider.dispose()
        self.logger.info("session.closed", released=released)

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
