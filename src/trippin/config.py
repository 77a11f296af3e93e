"""Configuration management for the TripPin client.

This module loads configuration from environment variables with sensible defaults.
It uses dotenv to load from .env files and provides a centralized config object.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "https://services.odata.org/TripPinRESTierService/"


class ApiConfig(BaseModel):
    """Remote API settings, read once at startup."""

    model_config = ConfigDict(frozen=True)

    api_base_url: str = Field(
        description="Base URL of the People API, including its trailing slash"
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Validate that the base URL is an absolute http(s) URL."""
        if not v:
            raise ValueError(
                "API_BASE_URL environment variable is required. "
                "Please set it in your .env file or environment."
            )
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid API base URL: {v}. Must start with http(s)://")
        return v


class AppConfig(BaseModel):
    """Application configuration loaded from environment variables."""

    api: ApiConfig = Field(description="Remote API settings")

    # Logging Configuration
    log_path: str = Field(description="Directory for error log files")
    log_level: str = Field(description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        level = v.upper()
        if level not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return level


def load_default_config() -> AppConfig:
    """Load configuration from environment variables with defaults."""
    # Load environment variables from .env file
    load_dotenv()

    api_base_url = os.getenv("API_BASE_URL", DEFAULT_API_BASE_URL)
    logger.debug(f"Using API base URL {api_base_url}")

    return AppConfig(
        api=ApiConfig(api_base_url=api_base_url),
        log_path=os.getenv("LOG_PATH", "./log"),
        log_level=os.getenv("LOG_LEVEL", "WARNING"),
    )


# Singleton config instance
_config: Optional[AppConfig] = None


def get_current_config() -> AppConfig:
    """Get the current application configuration (singleton)."""
    global _config
    if _config is None:
        _config = load_default_config()
    return _config
