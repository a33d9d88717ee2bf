"""
Logging Configuration.
"""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AdapterKind(str, Enum):
    NOP = "nop"
    STDOUT = "stdout"
    STDERR = "stderr"
    STDLIB = "stdlib"
    STRUCTLOG = "structlog"


class LoggingSettings(BaseSettings):
    """Selection of the globally installed adapter."""

    model_config = SettingsConfigDict(
        env_prefix="YALA_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    adapter: AdapterKind = Field(
        default=AdapterKind.STDERR,
        description="Backend adapter (nop, stdout, stderr, stdlib, structlog)",
    )
    logger_name: str = Field(
        default="yala",
        min_length=1,
        description="Logger name used by the stdlib and structlog adapters",
    )
