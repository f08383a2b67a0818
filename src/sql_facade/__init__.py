"""
SQL Facade - structured CRUD requests over a relational backend.

Translates table descriptors, column/value mappings and predicates into
parameterized SQL, executes them through SQLAlchemy and tracks every
prepared statement so a session can release them deterministically.

Usage:
    >>> from sql_facade import ColumnSpec, Session, TableDescriptor
    >>> users = TableDescriptor("users", [ColumnSpec("id", "integer", "primary key")])
    >>> with Session.connect("sqlite://") as db:
    ...     db.create(users)
"""

from sql_facade.infrastructure.database import (
    NO_KEY,
    ConnectionProvider,
    Session,
    StatementHandle,
    StatementRegistry,
    bind,
    bind_all,
)
from sql_facade.infrastructure.exceptions import (
    ClosedHandleError,
    ConfigurationError,
    DatabaseConnectionError,
    EmptyResultError,
    SqlFacadeError,
    StatementCreationError,
    UnsupportedArgumentType,
)
from sql_facade.infrastructure.schema import (
    ColumnEnum,
    ColumnSpec,
    TableDescriptor,
    resolve_table_name,
)
from sql_facade.infrastructure.sql import (
    DoubleValue,
    FloatValue,
    IntValue,
    LongValue,
    StringValue,
)
from sql_facade.utils.timestamps import format_timestamp

__version__ = "0.1.0"

__all__ = [
    "Session",
    "ConnectionProvider",
    "StatementHandle",
    "StatementRegistry",
    "bind",
    "bind_all",
    "NO_KEY",
    "ColumnSpec",
    "ColumnEnum",
    "TableDescriptor",
    "resolve_table_name",
    "IntValue",
    "LongValue",
    "FloatValue",
    "DoubleValue",
    "StringValue",
    "format_timestamp",
    "SqlFacadeError",
    "ConfigurationError",
    "DatabaseConnectionError",
    "StatementCreationError",
    "UnsupportedArgumentType",
    "ClosedHandleError",
    "EmptyResultError",
]
