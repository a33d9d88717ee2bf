"""
Global adapter installation from configuration.
"""

from __future__ import annotations

import logging

import structlog

from yala import logger
from yala.adapters.printer import stderr_adapter, stdout_adapter
from yala.adapters.stdlib import StdlibAdapter
from yala.adapters.structlog_adapter import StructlogAdapter
from yala.config import AdapterKind, LoggingSettings, settings


def build_adapter(config: LoggingSettings) -> logger.Adapter:
    """Create the adapter selected by ``config``."""
    if config.adapter == AdapterKind.STDOUT:
        return stdout_adapter()
    if config.adapter == AdapterKind.STDERR:
        return stderr_adapter()
    if config.adapter == AdapterKind.STDLIB:
        return StdlibAdapter(logging.getLogger(config.logger_name))
    if config.adapter == AdapterKind.STRUCTLOG:
        return StructlogAdapter(structlog.get_logger(config.logger_name))
    return logger.NopAdapter()


def configure_logging(config: LoggingSettings | None = None) -> logger.Adapter:
    """
    Install the configured adapter globally.

    Args:
        config: Settings to use; defaults to ``settings.logging`` (YALA_LOG_* variables).

    Returns:
        The installed adapter.
    """
    config = config or settings.logging
    adapter = build_adapter(config)
    logger.set_adapter(adapter)

    logger.with_field(None, "adapter", config.adapter.value).debug("logging configured")

    return adapter
