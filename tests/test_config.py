"""
Tests for settings and logging setup.
"""

import importlib
import logging

import pytest

import mortgage_model.main

from mortgage_model.config import Settings, get_settings
from mortgage_model.main import configure_logging


@pytest.fixture
def fresh_settings():
    """Clear the settings cache around a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def root_level():
    """Restore the root logger level after a test."""
    level = logging.getLogger().level
    yield
    logging.getLogger().setLevel(level)


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, fresh_settings, monkeypatch):
        """Defaults apply when nothing is set."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("PORT", raising=False)
        settings = get_settings()

        assert settings.log_level == "INFO"
        assert settings.port == 8000
        assert settings.debug is False

    def test_environment_overrides(self, fresh_settings, monkeypatch):
        """Environment variables override defaults."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("PORT", "9000")
        settings = get_settings()

        assert settings.log_level == "DEBUG"
        assert settings.port == 9000

    def test_unknown_variables_ignored(self, fresh_settings, monkeypatch):
        """Unrelated settings do not fail validation."""
        monkeypatch.setenv("APP_ENV", "development")
        assert not hasattr(get_settings(), "app_env")


class TestLogging:
    """Test logging setup."""

    def test_reload_leaves_root_level_alone(self, root_level):
        """Loading the app module does not change the root logger level."""
        logging.getLogger().setLevel(logging.WARNING)
        importlib.reload(mortgage_model.main)

        assert logging.getLogger().level == logging.WARNING

    def test_configure_logging_sets_level(self, root_level):
        """Root logger follows the configured level."""
        configure_logging(Settings(log_level="debug"))
        assert logging.getLogger().level == logging.DEBUG

        configure_logging(Settings(log_level="WARNING"))
        assert logging.getLogger().level == logging.WARNING
