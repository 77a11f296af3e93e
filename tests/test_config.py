"""Tests for configuration loading."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from trippin.config import (
    DEFAULT_API_BASE_URL,
    ApiConfig,
    AppConfig,
    load_default_config,
)


@pytest.fixture(autouse=True)
def no_dotenv():
    """Keep a developer's .env file out of these tests."""
    with patch("trippin.config.load_dotenv"):
        yield


def test_defaults(monkeypatch):
    for name in ("API_BASE_URL", "LOG_PATH", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    config = load_default_config()

    assert config.api.api_base_url == DEFAULT_API_BASE_URL
    assert config.log_path == "./log"
    assert config.log_level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("API_BASE_URL", "http://localhost:8080/odata/")
    monkeypatch.setenv("LOG_PATH", "/tmp/trippin-logs")
    monkeypatch.setenv("LOG_LEVEL", "error")

    config = load_default_config()

    assert config.api.api_base_url == "http://localhost:8080/odata/"
    assert config.log_path == "/tmp/trippin-logs"
    assert config.log_level == "ERROR"


@pytest.mark.parametrize("url", ["", "ftp://example.com/", "services.odata.org/"])
def test_invalid_base_url(url):
    with pytest.raises(ValidationError):
        ApiConfig(api_base_url=url)


def test_invalid_log_level():
    with pytest.raises(ValidationError):
        AppConfig(
            api=ApiConfig(api_base_url=DEFAULT_API_BASE_URL),
            log_path="./log",
            log_level="LOUD",
        )


def test_api_config_is_frozen():
    config = ApiConfig(api_base_url=DEFAULT_API_BASE_URL)
    with pytest.raises(ValidationError):
        config.api_base_url = "https://other/"  # type: ignore[misc]
