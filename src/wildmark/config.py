"""Configuration management for Wildmark."""

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
        populate_by_name=True,
    )

    # Parsing
    strict_links: bool = Field(
        default=False,
        alias="WILDMARK_STRICT_LINKS",
    )

    # Rendering
    class_name: str = Field(
        default="",
        alias="WILDMARK_CLASS_NAME",
    )
    output_format: str = Field(
        default="html",
        alias="WILDMARK_OUTPUT_FORMAT",
    )

    log_level: str = Field(
        default="WARNING",
        alias="WILDMARK_LOG_LEVEL",
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


def reset_settings() -> None:
    """Drop the cached settings so the next access re-reads the environment."""
    global _settings
    _settings = None
