"""Tests for application configuration."""

import pytest
from pydantic import ValidationError

from diceroll.config import Settings, get_settings


class TestSettingsDefaults:
    """Tests for default configuration values."""

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.verbose is False
        assert settings.seed is None
        assert settings.debug is False
        assert settings.log_level == "WARNING"


class TestSettingsFromEnvironment:
    """Tests for DICEROLL_* environment variables."""

    def test_seed_from_env(self, monkeypatch):
        monkeypatch.setenv("DICEROLL_SEED", "42")
        assert Settings(_env_file=None).seed == 42

    def test_verbose_from_env(self, monkeypatch):
        monkeypatch.setenv("DICEROLL_VERBOSE", "1")
        assert Settings(_env_file=None).verbose is True

    def test_prefix_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("diceroll_debug", "true")
        assert Settings(_env_file=None).debug is True

    def test_unprefixed_variables_ignored(self, monkeypatch):
        monkeypatch.setenv("SEED", "5")
        assert Settings(_env_file=None).seed is None

    def test_invalid_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("DICEROLL_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("DICEROLL_SEED=99\nDICEROLL_LOG_LEVEL=INFO\n")
        settings = Settings(_env_file=env_file)
        assert settings.seed == 99
        assert settings.log_level == "INFO"


class TestGetSettings:
    """Tests for the cached accessor."""

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_cache_clear_picks_up_env(self, monkeypatch):
        get_settings()
        monkeypatch.setenv("DICEROLL_SEED", "3")
        get_settings.cache_clear()
        assert get_settings().seed == 3
