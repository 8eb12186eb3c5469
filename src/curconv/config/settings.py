# src/curconv/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Supports environment variables with validation and an optional .env file.

Files that USE this module:
- curconv.app (resolves the rates source, colors and logging for a run)
- tests.test_settings (unit tests)

Files that this module USES:
- curconv.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Level names for log_level validation
from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from curconv.shared.validators import (
    COLOR_MODES,  # Accepted values for the color option
    is_remote_location,  # Tell URLs from file paths
    validate_source_location,  # Validate a rates file path or URL
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Rates source ---
    rates_source: str = Field(default="rates.json", alias="CURCONV_RATES_SOURCE")

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Output ---
    color: str = Field(default="auto", alias="CURCONV_COLOR")

    # --- Logging ---
    log_level: str = Field(default="WARNING", alias="CURCONV_LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @property
    def is_remote_source(self) -> bool:
        """True when rates are fetched over HTTP rather than read from disk."""
        return is_remote_location(self.rates_source)

    @field_validator("rates_source")
    @classmethod
    def validate_rates_source(cls, v: str) -> str:
        """Validate rates source location."""
        v = v.strip()
        if not validate_source_location(v):
            raise ValueError("CURCONV_RATES_SOURCE must be a file path or an http(s) URL")
        return v

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Validate color mode."""
        v = v.strip().lower()
        if v not in COLOR_MODES:
            raise ValueError(f"CURCONV_COLOR must be one of {', '.join(COLOR_MODES)}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate logging level name."""
        v = v.strip().upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"Unknown CURCONV_LOG_LEVEL: {v}")
        return v


# Global settings instance
settings = Settings()
