"""Tests for runtime settings and logging setup."""

import logging

import pytest
from pydantic import ValidationError as SettingsValidationError

from garbageman_embassy.config import EmbassySettings, LoggingConfig
from garbageman_embassy.config.logging_config import get_log_level_from_verbosity


class TestEmbassySettings:
    """Test cases for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("GARBAGEMAN_SERVICE_HOST", raising=False)
        monkeypatch.delenv("GARBAGEMAN_CONFIG_PATH", raising=False)

        settings = EmbassySettings(_env_file=None)

        assert settings.service_host == "garbageman-nm.embassy"
        assert settings.package_version == "0.1.0.1"
        assert settings.health_timeout_seconds == 5.0
        assert settings.config_path is None

    def test_environment_prefix(self, monkeypatch):
        monkeypatch.setenv("GARBAGEMAN_SERVICE_HOST", "localhost")
        monkeypatch.setenv("GARBAGEMAN_HEALTH_TIMEOUT_SECONDS", "2.5")

        settings = EmbassySettings(_env_file=None)

        assert settings.service_host == "localhost"
        assert settings.health_timeout_seconds == 2.5

    def test_timeout_must_be_positive(self):
        with pytest.raises(SettingsValidationError):
            EmbassySettings(_env_file=None, health_timeout_seconds=0)

    def test_password_length_bounds(self):
        with pytest.raises(SettingsValidationError):
            EmbassySettings(_env_file=None, password_length=4)


class TestLoggingConfig:
    """Test cases for logging configuration."""

    @pytest.mark.parametrize("verbosity,level", [
        ("quiet", "ERROR"),
        ("NORMAL", "WARNING"),
        ("verbose", "INFO"),
        ("debug", "DEBUG"),
        ("chatty", "WARNING"),
    ])
    def test_verbosity_mapping(self, verbosity, level):
        assert get_log_level_from_verbosity(verbosity) == level

    def test_log_level_overrides_verbosity(self, monkeypatch):
        monkeypatch.setenv("LOG_VERBOSITY", "QUIET")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        LoggingConfig.configure()

        assert logging.getLogger(LoggingConfig.PACKAGE_LOGGER).level == logging.DEBUG

    def test_noisy_libraries_limited_to_errors(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        LoggingConfig.configure()

        assert logging.getLogger("httpx").level == logging.ERROR
