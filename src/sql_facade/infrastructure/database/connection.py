"""
Connection provider backed by a SQLAlchemy Engine.

Connections are handed out in AUTOCOMMIT isolation; the facade performs no
transaction coordination of its own.
"""

from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import Connection, Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError

from sql_facade.config import get_settings
from sql_facade.infrastructure.exceptions import DatabaseConnectionError
from sql_facade.utils.logging import get_logger

logger = get_logger(__name__)


def _safe_url(url: str) -> str:
    try:
        return make_url(url).render_as_string(hide_password=True)
    except SQLAlchemyError:
        return "<unparseable url>"


class ConnectionProvider:
    """
    Opens authenticated connections for sessions.

    Example:
        >>> provider = ConnectionProvider("sqlite://")
        >>> conn = provider.connect()
    """

    def __init__(
        self,
        url: Optional[str] = None,
        *,
        echo: Optional[bool] = None,
        engine: Optional[Engine] = None,
        **engine_kwargs: Any,
    ) -> None:
        """
        Initialize the provider.

        Args:
            url: SQLAlchemy database URL; defaults to the configured one
            echo: Echo emitted SQL; defaults to the configured setting
            engine: Existing Engine to reuse instead of creating one
            **engine_kwargs: Extra arguments for ``create_engine``

        Raises:
            DatabaseConnectionError: If the URL is invalid or the driver
                cannot be loaded
        """
        if engine is not None:
            self.engine = engine
            self.url = engine.url.render_as_string(hide_password=True)
            return

        settings = None
        if url is None or echo is None:
            settings = get_settings()
        if url is None:
            url = settings.get_database_connection_string()
        if echo is None:
            echo = settings.database_echo

        self.url = _safe_url(url)
        try:
            self.engine = create_engine(url, echo=echo, **engine_kwargs)
        except (SQLAlchemyError, ImportError) as e:
            logger.error("connection.failed", url=self.url, error=str(e))
            raise DatabaseConnectionError(self.url, "database driver unavailable") from e

    def connect(self) -> Connection:
        """
        Open a new connection in AUTOCOMMIT isolation.

        Raises:
            DatabaseConnectionError: If the database cannot be reached or
                rejects the credentials
        """
        try:
            connection = self.engine.connect()
        except SQLAlchemyError as e:
            logger.error("connection.failed", url=self.url, error=str(e))
            raise DatabaseConnectionError(self.url) from e
        try:
            connection.execution_options(isolation_level="AUTOCOMMIT")
        except SQLAlchemyError as e:
            connection.close()
            logger.error("connection.failed", url=self.url, error=str(e))
            raise DatabaseConnectionError(self.url, "cannot enable autocommit") from e
        logger.info("connection.opened", url=self.url, dialect=connection.dialect.name)
        return connection

    def dispose(self) -> None:
        self.engine.dispose()
