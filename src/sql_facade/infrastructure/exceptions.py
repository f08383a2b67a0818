"""Error taxonomy for the SQL facade.

Every error raised by the facade itself derives from ``SqlFacadeError``.
Errors reported by the database backend while executing a statement are
SQLAlchemy ``DBAPIError`` subclasses and are passed through unchanged.
"""

from typing import Any, Dict, Optional


class SqlFacadeError(Exception):
    """Base class for errors raised by the facade."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to structured dict for logging."""
        data: Dict[str, Any] = {
            "error_type": type(self).__name__,
            "message": str(self),
        }
        cause = self.__cause__
        if cause is not None:
            data["original_error_type"] = type(cause).__name__
            data["original_error_message"] = str(cause)
        return data


class ConfigurationError(SqlFacadeError):
    """A table descriptor does not expose a usable table name.

    This is a schema authoring mistake, never a runtime condition.
    """

    def __init__(self, table: Any, reason: str):
        self.table = table
        self.reason = reason
        super().__init__(
            f"missing table-name accessor on {_describe(table)}: {reason}"
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["table"] = _describe(self.table)
        data["reason"] = self.reason
        return data


class DatabaseConnectionError(SqlFacadeError, ConnectionError):
    """The connection provider could not open a connection."""

    def __init__(self, url: str, message: str = "database failed to connect"):
        self.url = url
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.args[0]} ({self.url})"

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["url"] = self.url
        return data


class StatementCreationError(SqlFacadeError):
    """A statement could not be prepared against the connection."""

    def __init__(self, sql: str, message: str = "failed to prepare statement"):
        self.sql = sql
        super().__init__(message)


class UnsupportedArgumentType(SqlFacadeError, TypeError):
    """A bind value is not one of the supported scalar kinds."""

    def __init__(self, value: Any):
        self.value_type = type(value).__name__
        super().__init__(
            f"unsupported argument type {self.value_type!r}; "
            "expected int, float, str or an explicit SQL value"
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["value_type"] = self.value_type
        return data


class ClosedHandleError(SqlFacadeError):
    """An operation was attempted on a statement handle after it closed."""

    def __init__(self, operation: str, sql: Optional[str] = None):
        self.operation = operation
        self.sql = sql
        super().__init__(f"cannot {operation}: statement handle is closed")


class EmptyResultError(SqlFacadeError, LookupError):
    """An aggregate query returned no row at all."""

    def __init__(self, function: str, table: str):
        self.function = function
        self.table = table
        super().__init__(f"{function}() on {table} returned no row")


def _describe(table: Any) -> str:
    if isinstance(table, type):
        return f"{table.__module__}.{table.__qualname__}"
    return repr(table)
