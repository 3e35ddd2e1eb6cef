"""
Configuration management for geocheck.

Provides type-safe settings using Pydantic BaseSettings with
environment variable support (GEOCHECK_ prefix) and .env file loading.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogSettings(BaseSettings):
    """Logging settings, read on their own when loggers are created."""

    model_config = SettingsConfigDict(
        env_prefix="GEOCHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )


class Settings(LogSettings):
    """Validator settings."""

    # Validation behaviour
    strict_positions: bool = Field(
        default=False,
        description="Require positions of at least 2 numbers and bbox of 2*n numbers",
    )
    max_errors: int | None = Field(
        default=None,
        ge=1,
        description="Maximum number of issues kept in a result (None = all)",
    )

    # FeatureCollection fan-out
    parallel_threshold: int = Field(
        default=1000,
        ge=1,
        description="Minimum number of features before validating them on worker threads",
    )
    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Worker threads for feature fan-out (None = auto-detect, 1 = disabled)",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
