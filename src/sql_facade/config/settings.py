"""
Configuration management for SQL Facade.

This module provides environment-based configuration using Pydantic BaseSettings.
Settings are only consumed by the connection provider and the logging setup;
the SQL builder, binder and statement handles never read configuration.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("SQLF_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class DatabaseSettings:
    """
    Component-based database settings with URI assembly.

    A complete URI, when given, wins over the individual components.
    """

    def __init__(
        self,
        host: str,
        port: int = 3306,
        user: str = "",
        password: str = "",
        db: str = "",
        driver: str = "mysql+pymysql",
        uri: Optional[str] = None,
    ):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.db = db
        self.driver = driver
        self.uri = uri

    def get_connection_string(self) -> str:
        """
        Get the SQLAlchemy connection string.

        Returns:
            Database connection string (URL)
        """
        if self.uri:
            return self.uri
        return f"{self.driver}://{self.user}:{self.password}@{self.host}:{self.port}/{self.db}"


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are loaded with the SQLF_ prefix, e.g.
    SQLF_DATABASE_HOST overrides ``database_host``. A few fields also accept
    unprefixed names:
    - DATABASE_URL: complete database URL (same as SQLF_DATABASE_URI)
    - ENVIRONMENT: deployment environment (dev, staging, prod)
    - LOG_LEVEL: logging level (uppercase)
    """

    ENVIRONMENT: Literal["dev", "staging", "prod"] = Field(
        default="dev",
        validation_alias=AliasChoices("ENVIRONMENT", "SQLF_ENVIRONMENT"),
        description="Deployment environment",
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias=AliasChoices("LOG_LEVEL", "SQLF_LOG_LEVEL"),
        description="Logging level (uppercase)",
    )

    # Database configuration
    database_host: str = Field(default="localhost", description="Database host")
    database_port: int = Field(default=3306, description="Database port")
    database_user: str = Field(default="user", description="Database user")
    database_password: str = Field(default="password", description="Database password")
    database_db: str = Field(default="database", description="Database name")
    database_driver: str = Field(
        default="mysql+pymysql",
        description="SQLAlchemy dialect+driver used when assembling the URL",
    )
    database_uri: Optional[str] = Field(
        default=None,
        description="Complete database URI",
        validation_alias=AliasChoices(
            "database_uri", "SQLF_DATABASE_URI", "DATABASE_URL"
        ),
    )
    database_echo: bool = Field(
        default=False, description="Echo emitted SQL through SQLAlchemy's logger"
    )

    timestamp_format: str = Field(
        default=DEFAULT_TIMESTAMP_FORMAT,
        description="strftime format used by format_timestamp()",
    )

    @property
    def database(self) -> DatabaseSettings:
        """Database settings assembled from the individual fields."""
        return DatabaseSettings(
            host=self.database_host,
            port=self.database_port,
            user=self.database_user,
            password=self.database_password,
            db=self.database_db,
            driver=self.database_driver,
            uri=self.database_uri,
        )

    def get_database_connection_string(self) -> str:
        """Get the database URL.

        Priority order:
        1) ``database_uri`` (SQLF_DATABASE_URI or DATABASE_URL)
        2) URL assembled from the SQLF_DATABASE_* components

        Rewrites the deprecated 'postgres://' scheme to 'postgresql://'
        for SQLAlchemy compatibility.
        """
        final_uri = self.database.get_connection_string()
        if final_uri.startswith("postgres://"):
            final_uri = final_uri.replace("postgres://", "postgresql://", 1)
        return final_uri

    model_config = SettingsConfigDict(
        env_prefix="SQLF_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
