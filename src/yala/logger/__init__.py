"""
Logging API for code which is not aware what logging library is used.

Two ways of logging:
- global: configure once with ``set_adapter`` and call ``info(ctx, msg)`` etc.
- local: ``Local(adapter)`` for an explicit, independent adapter.

Design Pattern: Strategy Pattern for backend abstraction (see ``Adapter``).
"""

from .adapter import Adapter, NopAdapter
from .entry import Entry, Field, Level
from .logger import Local, Logger
from .registry import (
    debug,
    error,
    get_adapter,
    info,
    set_adapter,
    warn,
    with_error,
    with_field,
)

__all__ = [
    "Adapter",
    "NopAdapter",
    "Entry",
    "Field",
    "Level",
    "Local",
    "Logger",
    "debug",
    "info",
    "warn",
    "error",
    "with_field",
    "with_error",
    "set_adapter",
    "get_adapter",
]
