"""
Unit tests for StatementHandle: binding positions, execution and lifecycle.
"""

import json
import logging

import pytest
from sqlalchemy.exc import ResourceClosedError

from sql_facade.infrastructure.database import StatementHandle
from sql_facade.infrastructure.exceptions import (
    ClosedHandleError,
    StatementCreationError,
)

pytestmark = pytest.mark.unit

SQL = "SELECT * FROM test_table WHERE id = ? and name = ?"


class _DeadConnection:
    closed = False
    invalidated = False

    @property
    def connection(self):
        raise ResourceClosedError("This Connection is closed")


class TestCreation:
    """Tests for preparing a handle."""

    def test_starts_open_at_position_zero(self, fake_connection):
        handle = StatementHandle(fake_connection, SQL)
        assert handle.position == 0
        assert not handle.closed

    def test_empty_sql(self, fake_connection):
        with pytest.raises(StatementCreationError):
            StatementHandle(fake_connection, "  ")

    def test_closed_connection(self, fake_connection):
        fake_connection.closed = True
        with pytest.raises(StatementCreationError, match="not usable"):
            StatementHandle(fake_connection, SQL)

    def test_dead_dbapi_connection(self):
        with pytest.raises(StatementCreationError) as exc_info:
            StatementHandle(_DeadConnection(), SQL)
        assert isinstance(exc_info.value.__cause__, ResourceClosedError)
        assert exc_info.value.sql == SQL


class TestBinding:
    """Tests for typed binds."""

    def test_each_bind_takes_next_position(self, fake_connection):
        handle = StatementHandle(fake_connection, SQL)
        handle.set_string("a").set_long(2**40).set_int(3).set_double(0.5).set_float(0.5)

        assert handle.position == 5
        assert handle.parameters == ("a", 2**40, 3, 0.5, 0.5)

    def test_float_bind_is_single_precision(self, fake_connection):
        handle = StatementHandle(fake_connection, SQL).set_float(0.1)
        assert handle.parameters[0] != 0.1
        assert abs(handle.parameters[0] - 0.1) < 1e-7

    def test_execution_passes_bound_values(self, fake_connection):
        handle = StatementHandle(fake_connection, SQL).set_int(1).set_string("x")
        handle.execute_query()

        sql, params, _ = fake_connection.executed[-1]
        assert sql == SQL
        assert params == (1, "x")

    def test_execution_rewrites_for_format_paramstyle(self, fake_connection):
        fake_connection.dialect.paramstyle = "format"
        handle = StatementHandle(fake_connection, SQL).set_int(1).set_string("x")
        handle.execute_query()

        sql, params, _ = fake_connection.executed[-1]
        assert sql == "SELECT * FROM test_table WHERE id = %s and name = %s"
        assert params == (1, "x")

    def test_no_parameters_executes_text_unchanged(self, fake_connection):
        fake_connection.dialect.paramstyle = "format"
        handle = StatementHandle(fake_connection, "SELECT * FROM t WHERE a LIKE '5%'")
        handle.execute_query()

        sql, params, options = fake_connection.executed[-1]
        assert sql == "SELECT * FROM t WHERE a LIKE '5%'"
        assert params is None
        assert options == {"no_parameters": True}


class TestExecution:
    """Tests for query/update execution and generated keys."""

    def test_execute_update_returns_rowcount(self, fake_connection, fake_result_factory):
        fake_connection.queue(fake_result_factory(rowcount=3))
        handle = StatementHandle(fake_connection, "DELETE FROM t")
        assert handle.execute_update() == 3

    def test_generated_keys(self, fake_connection, fake_result_factory):
        fake_connection.queue(fake_result_factory(rowcount=1, lastrowid=7))
        handle = StatementHandle(fake_connection, "INSERT INTO t (a) VALUES (1)")
        handle.execute_update()
        assert list(handle.generated_keys()) == [(7,)]

    def test_generated_keys_empty_when_none(self, fake_connection, fake_result_factory):
        fake_connection.queue(fake_result_factory(rowcount=1, lastrowid=0))
        handle = StatementHandle(fake_connection, "INSERT INTO t (a) VALUES (1)")
        handle.execute_update()
        assert list(handle.generated_keys()) == []

    def test_generated_keys_before_execution(self, fake_connection):
        handle = StatementHandle(fake_connection, "INSERT INTO t (a) VALUES (1)")
        assert list(handle.generated_keys()) == []

    def test_reexecution_closes_previous_result(self, fake_connection, fake_result_factory):
        first = fake_result_factory(rows=[(1,)])
        fake_connection.queue(first)
        handle = StatementHandle(fake_connection, "SELECT 1")
        handle.execute_query()
        handle.execute_query()
        assert first.closed

    def test_argument_mismatch_logged(self, fake_connection, caplog):
        caplog.set_level(logging.DEBUG)
        StatementHandle(fake_connection, SQL).set_int(1).execute_query()

        events = [json.loads(r.message) for r in caplog.records]
        mismatch = [e for e in events if e["event"] == "statement.argument_mismatch"]
        assert len(mismatch) == 1
        assert mismatch[0]["placeholders"] == 2
        assert mismatch[0]["arguments"] == 1
        # Execution still goes to the driver
        assert fake_connection.executed[-1][1] == (1,)

    def test_matching_arguments_not_flagged(self, fake_connection, caplog):
        caplog.set_level(logging.DEBUG)
        StatementHandle(fake_connection, SQL).set_int(1).set_string("x").execute_query()

        events = [json.loads(r.message)["event"] for r in caplog.records]
        assert "statement.argument_mismatch" not in events

    def test_driver_errors_pass_through(self, fake_connection):
        fake_connection.queue(RuntimeError("duplicate key"))
        handle = StatementHandle(fake_connection, "INSERT INTO t (a) VALUES (1)")
        with pytest.raises(RuntimeError, match="duplicate key"):
            handle.execute_update()


class TestLifecycle:
    """Tests for the Open -> Closed transition."""

    def test_close_twice_is_noop(self, fake_connection):
        handle = StatementHandle(fake_connection, SQL)
        handle.close()
        handle.close()
        assert handle.closed

    @pytest.mark.parametrize(
        "operation",
        [
            lambda h: h.set_int(1),
            lambda h: h.set_long(1),
            lambda h: h.set_float(1.0),
            lambda h: h.set_double(1.0),
            lambda h: h.set_string("a"),
            lambda h: h.execute_query(),
            lambda h: h.execute_update(),
            lambda h: h.generated_keys(),
        ],
    )
    def test_operations_after_close_fail(self, fake_connection, operation):
        handle = StatementHandle(fake_connection, SQL)
        handle.close()
        with pytest.raises(ClosedHandleError):
            operation(handle)

    def test_close_invalidates_result(self, fake_connection, fake_result_factory):
        result = fake_result_factory(rows=[(1,), (2,)])
        fake_connection.queue(result)
        handle = StatementHandle(fake_connection, "SELECT id FROM t")
        cursor = handle.execute_query()
        handle.close()

        assert result.closed
        with pytest.raises(RuntimeError):
            list(cursor)

    def test_position_survives_close(self, fake_connection):
        handle = StatementHandle(fake_connection, SQL).set_int(1)
        handle.close()
        assert handle.position == 1

    def test_context_manager_closes(self, fake_connection):
        with StatementHandle(fake_connection, SQL) as handle:
            pass
        assert handle.closed
