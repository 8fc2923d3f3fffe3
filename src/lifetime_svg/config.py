"""Configuration management for Lifetime SVG."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Layout (SVG user units)
    row_height: int = Field(default=20, gt=0, alias="LIFETIME_SVG_ROW_HEIGHT")
    gutter_x: int = Field(default=150, alias="LIFETIME_SVG_GUTTER_X")
    bracket_reach: int = Field(default=230, alias="LIFETIME_SVG_BRACKET_REACH")
    fan_out: int = Field(default=20, alias="LIFETIME_SVG_FAN_OUT")
    label_dx: int = Field(default=10, alias="LIFETIME_SVG_LABEL_DX")
    label_dy: int = Field(default=15, alias="LIFETIME_SVG_LABEL_DY")
    font_size: int = Field(default=16, gt=0, alias="LIFETIME_SVG_FONT_SIZE")

    # Parsing
    lenient: bool = Field(
        default=False,
        alias="LIFETIME_SVG_LENIENT",
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
