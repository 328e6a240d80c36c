"""
Application settings and configuration management.

Uses Pydantic Settings for validation and environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BotSettings(BaseSettings):
    """Discord bot configuration."""

    name: str = Field(default="Synus", description="Bot display name")
    command_prefix: str = Field(
        default="synus ",
        description="Command prefix for bot commands (trailing space is significant)",
    )
    token: str = Field(default="", description="Discord bot token")
    allowed_channel_ids: list[int] = Field(
        default_factory=list,
        description="If non-empty, bot only responds in these channel IDs. "
                    "Set via BOT__ALLOWED_CHANNEL_IDS='[123456,789012]'",
    )

    model_config = SettingsConfigDict(env_prefix="BOT_")


class TranslationSettings(BaseSettings):
    """Translate command configuration."""

    default_source: str = Field(
        default="auto",
        description="Source language used when none is given ('auto' lets the provider detect it)",
    )
    default_target: str = Field(
        default="en", description="Target language used when none is given"
    )
    monospace_tag: bool = Field(
        default=True,
        description="Render the '[ from >> to ]' tag in Discord monospace",
    )
    service_urls: list[str] = Field(
        default_factory=lambda: ["translate.google.com"],
        description="Google Translate endpoints handed to googletrans",
    )

    model_config = SettingsConfigDict(env_prefix="TRANSLATION_")


class Settings(BaseSettings):
    """Main application settings."""

    # Environment
    environment: Literal["development", "production"] = Field(
        default="development", description="Deployment environment"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_file: Path | None = Field(default=None, description="Log file path")

    # Sub-configurations
    bot: BotSettings = Field(default_factory=BotSettings)
    translation: TranslationSettings = Field(default_factory=TranslationSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: str | Path | None = None) -> Settings:
    """
    Load settings from file and environment.

    Args:
        env_file: Path to .env file (optional)

    Returns:
        Loaded settings instance
    """
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
