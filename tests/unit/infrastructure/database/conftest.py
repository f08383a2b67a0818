"""
Test doubles for the statement and session layer.

FakeConnection mimics the parts of a SQLAlchemy Connection the facade uses
and records every statement it is asked to run.
"""

from types import SimpleNamespace
from typing import Any, List, Optional

import pytest


class FakeResult:
    """Minimal stand-in for a SQLAlchemy CursorResult."""

    def __init__(self, rows=None, rowcount: int = -1, lastrowid: Optional[int] = None):
        self.rows = list(rows or [])
        self.rowcount = rowcount
        self.lastrowid = lastrowid
        self.closed = False

    def __iter__(self):
        if self.closed:
            raise RuntimeError("result is closed")
        return iter(self.rows)

    def first(self):
        row = self.rows[0] if self.rows else None
        self.close()
        return row

    def close(self) -> None:
        self.closed = True


class FakeConnection:
    """Records executed statements and returns queued results."""

    def __init__(self, paramstyle: str = "qmark"):
        self.dialect = SimpleNamespace(paramstyle=paramstyle, name="fake")
        self.closed = False
        self.invalidated = False
        self.connection = object()
        self.executed: List[tuple] = []
        self.results: List[Any] = []

    def queue(self, result: Any) -> None:
        self.results.append(result)

    def exec_driver_sql(self, sql, parameters=None, execution_options=None):
        self.executed.append((sql, parameters, execution_options))
        if self.results:
            result = self.results.pop(0)
            if isinstance(result, Exception):
                raise result
            return result
        return FakeResult()

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_connection() -> FakeConnection:
    return FakeConnection()


@pytest.fixture
def fake_result_factory():
    return FakeResult
