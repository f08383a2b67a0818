"""Configuration management for SQL Facade.

Usage:
    >>> from sql_facade.config import get_settings
    >>> settings = get_settings()
    >>> settings.get_database_connection_string()
"""

from sql_facade.config.settings import DatabaseSettings, Settings, get_settings

__all__ = [
    "DatabaseSettings",
    "Settings",
    "get_settings",
]
