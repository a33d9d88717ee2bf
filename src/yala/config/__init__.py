"""
yala Configuration Module.

Each sub-module represents an independent concern with its own environment
variable prefix.

Usage:
    from yala.config import settings

    settings.logging.adapter  # AdapterKind.STDERR
"""

from functools import cached_property

from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging import AdapterKind, LoggingSettings


class Settings(BaseSettings):
    """Composite settings aggregating all configuration domains."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @cached_property
    def logging(self) -> LoggingSettings:
        return LoggingSettings()


# Singleton instance
settings = Settings()

__all__ = [
    "Settings",
    "settings",
    "AdapterKind",
    "LoggingSettings",
]
