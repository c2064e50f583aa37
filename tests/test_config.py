# =============================================================================
# tests/test_config.py - Settings Tests
# =============================================================================

import pytest
from pydantic import ValidationError

from data_processor.config import Settings, get_settings


class TestSettings:
    """Tests for default delays and environment overrides."""

    def test_defaults(self, monkeypatch):
        """Without overrides the delays are 100ms and 200ms."""
        monkeypatch.delenv("PROCESSOR_DEFAULT_DELAY_MS", raising=False)
        monkeypatch.delenv("PROCESSOR_CREATE_DELAY_MS", raising=False)
        monkeypatch.delenv("DEBUG", raising=False)

        settings = Settings(_env_file=None)

        assert settings.PROCESSOR_DEFAULT_DELAY_MS == 100
        assert settings.PROCESSOR_CREATE_DELAY_MS == 200
        assert settings.DEBUG is False

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("PROCESSOR_DEFAULT_DELAY_MS", "5")
        monkeypatch.setenv("DEBUG", "true")

        settings = Settings(_env_file=None)

        assert settings.PROCESSOR_DEFAULT_DELAY_MS == 5
        assert settings.DEBUG is True

    def test_negative_delay_rejected(self, monkeypatch):
        monkeypatch.setenv("PROCESSOR_CREATE_DELAY_MS", "-1")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_cache_clear_picks_up_changes(self, monkeypatch):
        monkeypatch.setenv("PROCESSOR_DEFAULT_DELAY_MS", "42")
        get_settings.cache_clear()

        assert get_settings().PROCESSOR_DEFAULT_DELAY_MS == 42
