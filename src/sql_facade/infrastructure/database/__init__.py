"""Statement lifecycle, parameter binding and the session facade."""

from .binder import bind, bind_all
from .connection import ConnectionProvider
from .registry import StatementRegistry
from .session import NO_KEY, Session
from .statement import StatementHandle

__all__ = [
    "bind",
    "bind_all",
    "ConnectionProvider",
    "StatementRegistry",
    "StatementHandle",
    "Session",
    "NO_KEY",
]
