"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen and immutable
after initialization.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.shared.constants import (
    LogLevels,
    MonetizationConstants,
    PlaybackConstants,
    StatisticsConstants,
)
from ..domain.shared.messages import ErrorMessages
from ..domain.shared.types import NonNegativeFloat, RoundDigits, SkipSeconds, TopLimit


class PlaybackSettings(BaseModel):
    """Player behavior configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    skip_seconds: SkipSeconds = Field(
        default=PlaybackConstants.SKIP_SECONDS,
        validation_alias=AliasChoices("skip_seconds", "skip"),
    )


class MonetizationSettings(BaseModel):
    """Revenue distribution configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    premium_pool: NonNegativeFloat = Field(
        default=MonetizationConstants.PREMIUM_POOL,
        validation_alias=AliasChoices("premium_pool", "premium_value"),
    )
    round_digits: RoundDigits = MonetizationConstants.ROUND_DIGITS


class StatisticsSettings(BaseModel):
    """Artist statistics configuration."""

    model_config = SettingsConfigDict(frozen=True)

    top_limit: TopLimit = StatisticsConstants.TOP_LIMIT


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - ENVIRONMENT, DEBUG, LOG_LEVEL (top-level)
    - PLAYBACK__SKIP_SECONDS
    - MONETIZATION__PREMIUM_POOL, MONETIZATION__ROUND_DIGITS
    - STATISTICS__TOP_LIMIT
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = LogLevels.INFO

    playback: PlaybackSettings = Field(default_factory=PlaybackSettings)
    monetization: MonetizationSettings = Field(default_factory=MonetizationSettings)
    statistics: StatisticsSettings = Field(default_factory=StatisticsSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {
            LogLevels.DEBUG,
            LogLevels.INFO,
            LogLevels.WARNING,
            LogLevels.ERROR,
            LogLevels.CRITICAL,
        }
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=sorted(valid_levels))
            )
        return v_upper

    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, the configured level otherwise."""
        return LogLevels.DEBUG if self.debug else self.log_level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are automatically loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
