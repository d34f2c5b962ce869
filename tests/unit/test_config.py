"""
Unit tests for kudos/config.py (Settings validation).

Tests:
  - Default values are applied correctly
  - Environment overrides are parsed
  - Positive-value validators reject bad input
  - log_level normalization
  - get_allowed_origins_list parsing

Note:
  - Uses monkeypatch to set environment variables
"""

import pytest
from pydantic import ValidationError

from kudos.config import Settings, get_settings


pytestmark = pytest.mark.unit  # Apply to all tests in this module


class TestSettings:
    """Test Settings class validation."""

    def test_defaults(self):
        settings = Settings()

        assert settings.seed_fixtures is True
        assert settings.notify_batch_mode is False
        assert settings.notify_batch_interval_seconds == 600
        assert settings.slack_webhook_url == ""
        assert settings.analytics_top_keywords == 5
        assert settings.analytics_min_keyword_length == 4
        assert settings.max_message_chars == 500
        assert settings.log_level == "INFO"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("NOTIFY_BATCH_MODE", "true")
        monkeypatch.setenv("NOTIFY_BATCH_INTERVAL_SECONDS", "30")
        monkeypatch.setenv("SEED_FIXTURES", "false")
        monkeypatch.setenv("ANALYTICS_TOP_KEYWORDS", "10")

        settings = Settings()

        assert settings.notify_batch_mode is True
        assert settings.notify_batch_interval_seconds == 30
        assert settings.seed_fixtures is False
        assert settings.analytics_top_keywords == 10

    @pytest.mark.parametrize(
        "env_name, value",
        [
            ("NOTIFY_BATCH_INTERVAL_SECONDS", "0"),
            ("SLACK_TIMEOUT_SECONDS", "-1"),
            ("ANALYTICS_TOP_KEYWORDS", "0"),
            ("ANALYTICS_MIN_KEYWORD_LENGTH", "-3"),
            ("MAX_MESSAGE_CHARS", "0"),
            ("LOG_LEVEL", "verbose"),
        ],
    )
    def test_invalid_values_are_rejected(self, monkeypatch, env_name, value):
        monkeypatch.setenv(env_name, value)

        with pytest.raises(ValidationError):
            Settings()

    def test_log_level_is_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", " debug ")

        assert Settings().log_level == "DEBUG"

    def test_allowed_origins_list(self, monkeypatch):
        monkeypatch.setenv(
            "ALLOWED_ORIGINS", "http://localhost:3000, https://kudos.example.com ,,"
        )

        assert Settings().get_allowed_origins_list() == [
            "http://localhost:3000",
            "https://kudos.example.com",
        ]

    def test_is_production(self):
        assert Settings(app_env="Production").is_production() is True
        assert Settings(app_env="test").is_production() is False

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()

        assert get_settings() is get_settings()
