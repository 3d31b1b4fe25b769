"""
Tests for logging configuration.

Tests LoggingConfig, LogLevel, and LogFormat.
"""

import dataclasses

import pytest

from neutrino_api.core.logging.config import LoggingConfig, LogLevel, LogFormat


class TestEnums:
    """Tests for LogLevel and LogFormat."""

    def test_values_are_strings(self):
        assert LogLevel.WARNING == "WARNING"
        assert LogFormat.JSON == "json"
        assert isinstance(LogFormat.COLORED, str)


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_defaults(self):
        config = LoggingConfig()

        assert config.level == LogLevel.INFO
        assert config.format == LogFormat.TEXT
        assert config.enable_console is True
        assert config.enable_file is False
        assert config.enable_correlation_id is True
        assert config.extra_fields == {}

    def test_create_from_strings(self):
        config = LoggingConfig.create(level="debug", format="JSON", extra_fields={"service": "geo"})

        assert config.level == LogLevel.DEBUG
        assert config.format == LogFormat.JSON
        assert config.extra_fields == {"service": "geo"}

    def test_create_invalid_level(self):
        with pytest.raises(ValueError):
            LoggingConfig.create(level="LOUD")

    def test_create_invalid_format(self):
        with pytest.raises(ValueError):
            LoggingConfig.create(format="xml")

    def test_file_requires_path(self):
        with pytest.raises(ValueError, match="file_path is required"):
            LoggingConfig.create(enable_file=True)

    def test_max_bytes_positive(self):
        with pytest.raises(ValueError, match="max_bytes"):
            LoggingConfig(max_bytes=0)

    def test_backup_count_non_negative(self):
        with pytest.raises(ValueError, match="backup_count"):
            LoggingConfig(backup_count=-1)

    def test_immutable(self):
        config = LoggingConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.level = LogLevel.DEBUG
