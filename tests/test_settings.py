# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for LogSettings."""

import pytest

from ssh_logging import DEFAULT_LEVEL, DEFAULT_LOG_WIDTH, LogLevel, LogSettings


class TestLogSettings:
    """Tests for explicit settings."""

    def test_defaults(self):
        """Test default selector values."""
        settings = LogSettings()

        assert settings.debug is True
        assert settings.default_sink is True
        assert settings.timestamps is True
        assert settings.use_print is False
        assert settings.width == DEFAULT_LOG_WIDTH == 120
        assert settings.level == DEFAULT_LEVEL

    def test_validate_normalizes_level(self):
        """Test validate converts level names."""
        settings = LogSettings(level="error").validate()

        assert settings.level is LogLevel.ERROR

    @pytest.mark.parametrize("width", [0, 1, -5, "120"])
    def test_invalid_width(self, width):
        """Test widths below two characters are rejected."""
        with pytest.raises(ValueError, match="Invalid log width"):
            LogSettings(width=width).validate()

    def test_invalid_level(self):
        """Test an unknown level is rejected."""
        with pytest.raises(ValueError, match="Invalid log level"):
            LogSettings(level="chatty").validate()


class TestFromEnv:
    """Tests for LogSettings.from_env."""

    def test_empty_environment(self):
        """Test an empty environment gives defaults."""
        assert LogSettings.from_env({}) == LogSettings()

    def test_all_selectors(self):
        """Test every selector is read."""
        settings = LogSettings.from_env({
            "SSH_LOG_DEBUG": "off",
            "SSH_LOG_NO_DEFAULT_SINK": "yes",
            "SSH_LOG_NO_TIMESTAMP": "1",
            "SSH_LOG_PRINTF": "true",
            "SSH_LOG_WIDTH": "40",
            "SSH_LOG_LEVEL": "sftp",
        })

        assert settings.debug is False
        assert settings.default_sink is False
        assert settings.timestamps is False
        assert settings.use_print is True
        assert settings.width == 40
        assert settings.level is LogLevel.SFTP

    def test_bad_values_fall_back(self):
        """Test unparseable values fall back to defaults."""
        settings = LogSettings.from_env({
            "SSH_LOG_DEBUG": "maybe",
            "SSH_LOG_WIDTH": "wide",
            "SSH_LOG_LEVEL": "loud",
        })

        assert settings.debug is True
        assert settings.width == DEFAULT_LOG_WIDTH
        assert settings.level == DEFAULT_LEVEL

    def test_too_small_width_falls_back(self):
        """Test a width below the minimum falls back to the default."""
        assert LogSettings.from_env({"SSH_LOG_WIDTH": "1"}).width == DEFAULT_LOG_WIDTH


class TestEnvFlagParsing:
    """Tests for flag spellings read by LogSettings.from_env."""

    @pytest.mark.parametrize("value,expected", [("ON", False), ("yes", False), ("no", True), ("0", True), ("2", True)])
    def test_no_timestamp_spellings(self, value, expected):
        """Test recognized spellings apply and unknown ones keep the default."""
        assert LogSettings.from_env({"SSH_LOG_NO_TIMESTAMP": value}).timestamps is expected

    def test_width_is_integer(self):
        """Test the width selector is parsed as an integer."""
        assert LogSettings.from_env({"SSH_LOG_WIDTH": "7"}).width == 7
