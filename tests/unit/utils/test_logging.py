"""Unit tests for the structured logging setup.

Tests cover:
- get_logger returns a structlog logger with its name preserved
- JSON output with ISO-8601 timestamps
- Sanitization of passwords, tokens and database URLs
- Context binding
"""

import json
import logging

import pytest
import structlog

from sql_facade.utils.logging import (
    REDACTED_VALUE,
    bind_context,
    get_logger,
    sanitize_for_logging,
)


def _last_event(caplog: pytest.LogCaptureFixture) -> dict:
    assert len(caplog.records) >= 1
    return json.loads(caplog.records[-1].message)


@pytest.mark.unit
def test_get_logger_name_preserved(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    get_logger("sql_facade.tests").info("statement.prepared")

    assert _last_event(caplog).get("logger") == "sql_facade.tests"


@pytest.mark.unit
def test_json_output_structure(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    get_logger("test_logger").info("session.opened", dialect="sqlite")
    log_data = _last_event(caplog)

    assert log_data["event"] == "session.opened"
    assert log_data["level"] == "info"
    assert log_data["dialect"] == "sqlite"
    assert "T" in log_data["timestamp"]


@pytest.mark.unit
@pytest.mark.parametrize(
    "key",
    ["password", "PASSWORD", "access_token", "api_key", "client_secret", "DATABASE_URL", "database_uri"],
)
def test_sanitize_redacts_sensitive_keys(key: str) -> None:
    sanitized = sanitize_for_logging({key: "value", "table": "users"})

    assert sanitized[key] == REDACTED_VALUE
    assert sanitized["table"] == "users"


@pytest.mark.unit
def test_sanitize_handles_nested_dicts() -> None:
    sanitized = sanitize_for_logging({"user": "root", "auth": {"password": "root"}})

    assert sanitized["user"] == "root"
    assert sanitized["auth"]["password"] == REDACTED_VALUE


@pytest.mark.unit
def test_sanitization_in_logged_output(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    get_logger("test_logger").info("connection.opened", user="root", password="root")
    log_data = _last_event(caplog)

    assert log_data["password"] == REDACTED_VALUE
    assert log_data["user"] == "root"


@pytest.mark.unit
def test_context_binding_persists(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    logger = bind_context(session_id="a1b2c3d4")
    assert isinstance(logger, structlog.stdlib.BoundLogger)

    logger.info("statement.prepared", sql="SELECT 1")
    logger.info("table.created", table="test_table")

    events = [json.loads(record.message) for record in caplog.records[-2:]]
    assert [e["session_id"] for e in events] == ["a1b2c3d4", "a1b2c3d4"]
    assert events[1]["table"] == "test_table"


@pytest.mark.unit
def test_log_levels_respected(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)

    logger = get_logger("test_logger")
    logger.debug("debug_message")
    logger.warning("warning_message")
    logger.error("error_message")

    levels = [json.loads(r.message).get("level") for r in caplog.records]
    assert {"debug", "warning", "error"} <= set(levels)
