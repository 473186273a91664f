"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
Process-level settings come from environment variables, .env files and
default values; the list of targets lives in the YAML file pointed to by
``CHECKER_CONFIG_PATH``.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from kenko.shared import DEFAULT_RESULTS_KEY, EnumEnvironment, EnumLogLevel


class ServerSettings(BaseSettings):
    """HTTP server settings."""

    title: str = Field(default="Kenko", description="API title")
    description: str = Field(
        default="Periodic HTTP health checker", description="API description"
    )
    version: str = Field(default="1.0.0", description="API version")
    host: str = Field(default="0.0.0.0", description="Interface to bind")

    model_config = SettingsConfigDict(
        env_prefix="SERVER_", case_sensitive=False, extra="ignore"
    )


class CheckerSettings(BaseSettings):
    """Checker settings."""

    config_path: str = Field(
        default="config.yaml", description="Path of the monitor YAML file"
    )

    model_config = SettingsConfigDict(
        env_prefix="CHECKER_", case_sensitive=False, extra="ignore"
    )


class RedisSettings(BaseSettings):
    """Result mirror settings."""

    url: Optional[str] = Field(
        default=None,
        description="Redis URL; overrides redis_addr from the monitor YAML",
    )
    results_key: str = Field(
        default=DEFAULT_RESULTS_KEY, description="Hash holding mirrored results"
    )
    read_timeout: float = Field(
        default=2.0, description="Bound on reading the mirror from /status"
    )
    socket_timeout: float = Field(
        default=2.0, description="Connect and socket timeout of the client"
    )

    model_config = SettingsConfigDict(
        env_prefix="REDIS_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    server: ServerSettings = Field(default_factory=ServerSettings)
    checker: CheckerSettings = Field(default_factory=CheckerSettings)
    redis: RedisSettings = Field(default_factory=RedisSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on enviroment.
    """
    return AppSettings()
