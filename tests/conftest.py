"""Pytest configuration and shared fixtures.

.sqlf_env, when present, is loaded FIRST with override=True so test runs
never pick up a developer's real database settings by accident.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

_SQLF_ENV_FILE = Path(__file__).parent.parent / ".sqlf_env"
if _SQLF_ENV_FILE.exists():
    load_dotenv(_SQLF_ENV_FILE, override=True)

from typing import Generator

import pytest

from sql_facade.config import get_settings
from sql_facade.infrastructure.database import Session
from sql_facade.infrastructure.schema import ColumnEnum, ColumnSpec, TableDescriptor


class TestColumn(ColumnEnum):
    """Six-column table authored as an enum, MySQL flavoured."""

    ID = ColumnSpec("id", "int", "not null primary key auto_increment")
    NAME = ColumnSpec("name", "varchar(255)", "not null unique key")
    PASSWORD = ColumnSpec("password", "varchar(32)", "not null")
    SCORE = ColumnSpec("score", "int", "not null default 0")
    SEX = ColumnSpec("sex", "enum('male', 'female')", "default 'male'")
    SAVED = ColumnSpec("saved", "datetime", "")

    @staticmethod
    def table_name() -> str:
        return "test_table"


class FailedColumn(ColumnEnum):
    """Same columns as TestColumn but without a table_name accessor."""

    ID = ColumnSpec("id", "int", "not null primary key auto_increment")
    NAME = ColumnSpec("name", "varchar(255)", "not null unique key")


SQLITE_TABLE = TableDescriptor(
    "test_table",
    [
        ColumnSpec("id", "integer", "primary key autoincrement"),
        ColumnSpec("name", "varchar(255)", "not null unique"),
        ColumnSpec("password", "varchar(32)", "not null"),
        ColumnSpec("score", "int", "not null default 0"),
        ColumnSpec("sex", "varchar(6)", "default 'male'"),
        ColumnSpec("saved", "datetime", ""),
    ],
)


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Generator[None, None, None]:
    """Keep monkeypatched environment variables from leaking through the cache."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_columns() -> type[TestColumn]:
    return TestColumn


@pytest.fixture
def failed_columns() -> type[FailedColumn]:
    return FailedColumn


@pytest.fixture
def sqlite_table() -> TableDescriptor:
    return SQLITE_TABLE


@pytest.fixture
def sqlite_session() -> Generator[Session, None, None]:
    """Session on a private in-memory SQLite database."""
    session = Session.connect("sqlite://", echo=False)
    try:
        yield session
    finally:
        session.close()
