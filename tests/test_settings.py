"""
==============================================================================
Settings Tests
==============================================================================

Tests for environment-driven configuration.

==============================================================================
"""

import logging

import pytest
from pydantic import ValidationError

from shop.config import Settings, get_settings


class TestSettings:
    """Tests for Settings loading and validation."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch):
        """Test default values."""
        for name in ("APP_ENV", "DEBUG", "SEARCH_LIMIT", "SELF_CHECK_ON_STARTUP"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.search_limit == 10
        assert settings.self_check_on_startup is True
        assert settings.debug is False
        assert settings.log_level == logging.INFO

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch):
        """Test values are read from environment variables."""
        monkeypatch.setenv("SEARCH_LIMIT", "5")
        monkeypatch.setenv("DEBUG", "true")

        settings = Settings()

        assert settings.search_limit == 5
        assert settings.log_level == logging.DEBUG

    def test_unknown_environment_falls_back(self):
        """Test an unknown app_env becomes development."""
        settings = Settings(app_env="Qa")

        assert settings.app_env == "development"
        assert settings.is_development is True

    def test_environment_normalized(self):
        """Test app_env is lowercased."""
        settings = Settings(app_env=" Production ")

        assert settings.is_production is True

    def test_search_limit_bounds(self):
        """Test search_limit must be between 1 and 100."""
        with pytest.raises(ValidationError):
            Settings(search_limit=0)
        with pytest.raises(ValidationError):
            Settings(search_limit=101)

    def test_get_settings_cached(self):
        """Test get_settings returns one instance until cleared."""
        first = get_settings()

        assert get_settings() is first

        get_settings.cache_clear()
        assert get_settings() is not first
