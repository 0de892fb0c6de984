"""
Configuration management using Pydantic settings.

All configuration values are loaded from environment variables or .env file.
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

TEXT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
JSON_LOG_FORMAT = (
    '{"time": "%(asctime)s", "level": "%(levelname)s", '
    '"logger": "%(name)s", "message": "%(message)s"}'
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Expiration calendar window
    past_years: int = Field(default=10, ge=0)
    future_years: int = Field(default=1, ge=0)

    # Chain defaults
    default_levels: int = Field(default=4, ge=0)

    # Server Configuration
    port: int = 8080
    host: str = "127.0.0.1"
    reload: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "text"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Singleton Settings instance loaded from environment.

    Note:
        Uses lru_cache to ensure settings are loaded only once.
        To reload settings (e.g., in tests), call get_settings.cache_clear()
    """
    return Settings()


def configure_logging(settings: Settings) -> None:
    """
    Configure root logging from settings.

    Args:
        settings: Application settings providing log_level and log_format
    """
    fmt = JSON_LOG_FORMAT if settings.log_format == "json" else TEXT_LOG_FORMAT
    logging.basicConfig(level=settings.log_level.upper(), format=fmt, force=True)
