from __future__ import annotations

import logging

from apikey_auth.app import create_app
from apikey_auth.config import Settings, _comma_separated
from apikey_auth.dependencies import settings_dependency


def test_settings_dependency_returns_cached_object():
    first = settings_dependency()
    second = settings_dependency()
    assert first is second


def test_comma_separated_defaults_and_splits():
    assert _comma_separated(None) == ["*"]
    assert _comma_separated("http://a, http://b,,") == ["http://a", "http://b"]


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("APIKEY_AUTH_KEY", "from-env")
    monkeypatch.setenv("APIKEY_AUTH_LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.api_key == "from-env"
    assert settings.log_level == "debug"


def test_create_app_applies_log_level_and_falls_back_on_unknown_names():
    logger = logging.getLogger("apikey_auth")
    create_app(Settings(log_level="debug"))
    assert logger.level == logging.DEBUG
    create_app(Settings(log_level="verbose"))
    assert logger.level == logging.INFO
    create_app(Settings(log_level="basic_format"))
    assert logger.level == logging.INFO
