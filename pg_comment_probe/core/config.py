"""
Configuration Settings.

This module defines the probe configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pg_comment_probe.errors import MissingDatabaseUrlError

# Checked in order, the first one set wins.
DATABASE_URL_ENV_NAMES = ("PG_DATABASE_URL", "DATABASE_URL")


class Settings(BaseSettings):
    """
    Probe settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: Optional[str] = Field(
        default=None,
        description="PostgreSQL connection URL (PG_DATABASE_URL, falling back to DATABASE_URL)",
        validation_alias=AliasChoices(*DATABASE_URL_ENV_NAMES),
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="PG_COMMENT_PROBE_LOG_LEVEL",
    )
    log_format: str = Field(
        default="simple",
        description="Log line format (simple, detailed, json)",
        alias="PG_COMMENT_PROBE_LOG_FORMAT",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Also write DEBUG logs to a file under log_file_dir",
        alias="PG_COMMENT_PROBE_ENABLE_FILE_LOGGING",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for the log file when file logging is enabled",
        alias="PG_COMMENT_PROBE_LOG_FILE_DIR",
    )

    # =====================================================================
    # Demonstration Driver
    # =====================================================================
    use_transaction: bool = Field(
        default=False,
        description="Run the demonstration statements inside a single transaction instead of autocommit",
        alias="PG_COMMENT_PROBE_USE_TRANSACTION",
    )
    drop_schema: bool = Field(
        default=False,
        description="Drop the demonstration schema after the lookups",
        alias="PG_COMMENT_PROBE_DROP_SCHEMA",
    )

    def require_database_url(self) -> str:
        """Return the configured database URL.

        Raises:
            MissingDatabaseUrlError: If neither PG_DATABASE_URL nor DATABASE_URL is set.
        """
        if not self.database_url:
            raise MissingDatabaseUrlError(*DATABASE_URL_ENV_NAMES)
        return self.database_url


settings = Settings()
