"""
Registry of the statement handles opened through a session.

The registry exists only for bulk release: every registered handle is
closed exactly once, earliest-opened first.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, Optional

from sql_facade.utils.logging import get_logger

from .statement import StatementHandle

logger = get_logger(__name__)


class StatementRegistry:
    """Ordered collection of open statement handles."""

    def __init__(self) -> None:
        self._handles: Deque[StatementHandle] = deque()

    def register(self, handle: StatementHandle) -> StatementHandle:
        self._handles.append(handle)
        return handle

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[StatementHandle]:
        return iter(tuple(self._handles))

    def clear(self) -> int:
        """
        Close every registered handle and empty the registry.

        A failing close does not stop the others. After every handle has
        been attempted, the first failure is re-raised.

        Returns:
            Number of handles released
        """
        released = 0
        failures = 0
        first_error: Optional[Exception] = None
        while self._handles:
            handle = self._handles.popleft()
            try:
                handle.close()
            except Exception as e:
                failures += 1
                logger.error(
                    "registry.close_failed",
                    sql=handle.sql,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                if first_error is None:
                    first_error = e
            released += 1

        logger.debug("registry.cleared", released=released, failures=failures)
        if first_error is not None:
            raise first_error
        return released
