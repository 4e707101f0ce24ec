"""Tests for environment configuration."""

import os
from unittest.mock import patch

import pytest

from erp_saved_filters.config import Settings, load_settings


@pytest.fixture(autouse=True)
def no_dotenv():
    """Keep a developer's local .env out of the tests."""
    with patch("erp_saved_filters.config.load_dotenv"):
        yield


def test_defaults():
    with patch.dict(os.environ, {}, clear=True):
        settings = load_settings()

    assert settings == Settings()
    assert settings.timeout == 30.0


def test_values_from_environment():
    env = {
        "ERP_API_BASE_URL": "https://erp.example.com/api/v1/",
        "ERP_API_TOKEN": "secret",
        "ERP_API_TIMEOUT": "5",
        "ERP_API_ORIGIN": "https://app.example.com",
        "ERP_LOG_LEVEL": "debug",
    }
    with patch.dict(os.environ, env, clear=True):
        settings = load_settings()

    assert settings.api_base_url == "https://erp.example.com/api/v1"
    assert settings.api_token == "secret"
    assert settings.timeout == 5.0
    assert settings.origin == "https://app.example.com"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["abc", "0", "-3"])
def test_invalid_timeout(raw):
    with patch.dict(os.environ, {"ERP_API_TIMEOUT": raw}, clear=True):
        with pytest.raises(ValueError, match="ERP_API_TIMEOUT"):
            load_settings()
