"""Tests for settings."""

import pytest

from lifetime_svg.config import Settings, get_settings, load_settings


class TestSettings:
    """Tests for the Settings class."""

    def test_defaults(self):
        """Test the default layout values."""
        settings = Settings()

        assert settings.row_height == 20
        assert settings.gutter_x == 150
        assert settings.bracket_reach == 230
        assert settings.fan_out == 20
        assert settings.lenient is False

    def test_environment(self, monkeypatch: pytest.MonkeyPatch):
        """Test reading values from environment variables."""
        monkeypatch.setenv("LIFETIME_SVG_GUTTER_X", "200")
        monkeypatch.setenv("LIFETIME_SVG_LENIENT", "1")

        settings = Settings()

        assert settings.gutter_x == 200
        assert settings.lenient is True

    def test_get_settings_cached(self):
        """Test that get_settings returns one shared instance."""
        assert get_settings() is get_settings()

    def test_load_settings_env_file(self, tmp_path):
        """Test loading settings from a specific .env file."""
        env_file = tmp_path / "custom.env"
        env_file.write_text("LIFETIME_SVG_FAN_OUT=35\n", encoding="utf-8")

        settings = load_settings(env_file)

        assert settings.fan_out == 35
        assert get_settings() is settings
