"""Centralized configuration management using Pydantic Settings.

Configuration is loaded from environment variables and an optional .env
file. Nothing here is required for parsing forecasts; the DataHub key is only
needed by callers that make the HTTP request themselves.

Example:
    >>> from metoffice_spot.config import get_settings
    >>> settings = get_settings()
    >>> settings.log_level
    'INFO'
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Optional

from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from metoffice_spot.datahub.granularity import Granularity
from metoffice_spot.datahub.urls import request_headers

LOGGER = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings.

    Example .env file:
        MET_OFFICE_DATAHUB_KEY=your_api_key
        DEFAULT_GRANULARITY=daily
        LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    met_office_datahub_key: Optional[SecretStr] = Field(
        default=None,
        description="DataHub Global Spot API key, sent as the apikey header",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level for the CLI",
    )
    default_granularity: Granularity = Field(
        default=Granularity.HOURLY,
        description="Granularity used when a command does not name one",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise to an upper-case standard logging level name."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def api_key(self) -> Optional[str]:
        """Plain DataHub key, or None if not configured."""
        key = self.met_office_datahub_key
        return key.get_secret_value() if key is not None else None

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    def request_headers(self) -> Dict[str, str]:
        """Headers for a DataHub request using the configured key.

        Raises:
            ValueError: If MET_OFFICE_DATAHUB_KEY is not set.
        """
        if self.api_key is None:
            raise ValueError("MET_OFFICE_DATAHUB_KEY is not configured")
        return request_headers(self.api_key)


# Lazy initialization - only create settings when accessed
_settings: Optional[Settings] = None
_settings_lock = threading.Lock()


def get_settings() -> Settings:
    """Get or create the Settings singleton (thread-safe).

    Returns:
        Settings instance loaded from environment variables/.env file.

    Raises:
        ValidationError: If a configured value is invalid.
    """
    global _settings

    if _settings is not None:
        return _settings

    with _settings_lock:
        if _settings is None:
            LOGGER.debug("Initializing Settings from environment variables and .env file")
            try:
                _settings = Settings()
            except ValidationError as e:
                LOGGER.error("Configuration validation failed: %s", e)
                raise

    return _settings


def reset_settings() -> None:
    """Drop the cached Settings so the next access reloads them."""
    global _settings
    with _settings_lock:
        _settings = None


__all__ = [
    "Settings",
    "LOG_LEVELS",
    "get_settings",
    "reset_settings",
]
