"""Tests for library settings."""

import pytest
from pydantic import ValidationError

from linval.core.config import Settings, get_settings


class TestSettingsDefaults:
    """Test default values."""

    def test_defaults(self, monkeypatch):
        """Test the defaults without environment overrides."""
        for name in ("TOLERANCE", "TOLERANCE_MODE", "LOG_LEVEL", "LOG_FORMAT", "LOG_FILE"):
            monkeypatch.delenv(f"LINVAL_{name}", raising=False)
        config = Settings(_env_file=None)
        assert config.TOLERANCE == 0.001
        assert config.TOLERANCE_MODE == "relative"
        assert config.LOG_LEVEL == "WARNING"
        assert config.LOG_FORMAT == "text"
        assert config.LOG_FILE is None

    def test_get_settings_is_cached(self):
        """Test get_settings returns one shared instance."""
        assert get_settings() is get_settings()


class TestSettingsEnvironment:
    """Test LINVAL_* environment overrides."""

    def test_environment_overrides(self, configured_settings):
        """Test prefixed variables are read."""
        config = configured_settings(TOLERANCE="0.5", TOLERANCE_MODE="absolute", LOG_FORMAT="json")
        assert config.TOLERANCE == 0.5
        assert config.TOLERANCE_MODE == "absolute"
        assert config.LOG_FORMAT == "json"

    def test_unprefixed_variables_are_ignored(self, monkeypatch):
        """Test only the LINVAL_ prefix is honored."""
        monkeypatch.delenv("LINVAL_TOLERANCE", raising=False)
        monkeypatch.setenv("TOLERANCE", "0.9")
        assert Settings(_env_file=None).TOLERANCE == 0.001

    def test_invalid_mode_is_rejected(self, monkeypatch):
        """Test tolerance mode is validated."""
        monkeypatch.setenv("LINVAL_TOLERANCE_MODE", "sigfigs")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_negative_tolerance_is_rejected(self, monkeypatch):
        """Test tolerance must be non-negative."""
        monkeypatch.setenv("LINVAL_TOLERANCE", "-1")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
