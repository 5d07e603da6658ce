"""
Unit tests for Pydantic Settings configuration.

Tests settings loading and validation.
"""

import pytest
from pydantic import ValidationError

from counsellor.config.settings import Settings


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any settings the host environment might provide."""
    for key in (
        "GOOGLE_API_KEY",
        "GEMINI_API_KEY",
        "GEMINI_MODEL",
        "ENVIRONMENT",
        "DEBUG",
        "CATALOG_PATH",
        "CHAT_CONTEXT_UNIVERSITIES",
    ):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestSettings:
    """Tests for Settings configuration."""

    def test_settings_has_defaults(self, clean_env):
        """Nothing is required to start the scoring API."""
        settings = Settings(_env_file=None)

        assert settings.gemini_model == "gemini-2.0-flash"
        assert settings.environment == "development"
        assert settings.catalog_path is None
        assert settings.chat_context_universities == 5
        assert settings.chat_enabled is False

    def test_settings_loads_from_env(self, clean_env):
        clean_env.setenv("GOOGLE_API_KEY", "test-key")
        clean_env.setenv("CATALOG_PATH", "/tmp/catalog.json")

        settings = Settings(_env_file=None)

        assert settings.google_api_key == "test-key"
        assert settings.catalog_path == "/tmp/catalog.json"
        assert settings.chat_enabled is True

    def test_gemini_api_key_is_accepted_as_alias(self, clean_env):
        clean_env.setenv("GEMINI_API_KEY", "gemini-key")

        settings = Settings(_env_file=None)

        assert settings.google_api_key == "gemini-key"
        assert settings.chat_enabled is True

    def test_google_api_key_wins_over_alias(self, clean_env):
        settings = Settings(_env_file=None, google_api_key="google", gemini_api_key="gemini")
        assert settings.google_api_key == "google"

    def test_is_production_property(self, clean_env):
        assert Settings(_env_file=None, environment="Production").is_production is True
        assert Settings(_env_file=None).is_production is False

    @pytest.mark.parametrize("environment, debug, expected", [
        ("development", True, True),
        ("development", False, False),
        ("production", True, False),
    ])
    def test_debug_is_disabled_in_production(self, clean_env, environment, debug, expected):
        settings = Settings(_env_file=None, environment=environment, debug=debug)
        assert settings.debug_enabled is expected

    def test_context_size_is_bounded(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, chat_context_universities=-1)

    def test_allowed_origins_includes_localhost(self, clean_env):
        settings = Settings(_env_file=None)

        assert "http://localhost:5173" in settings.allowed_origins
        assert "http://localhost:3000" in settings.allowed_origins
