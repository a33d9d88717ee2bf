"""
Global logger: process-wide adapter slot and context-taking shortcuts.

Reads happen on every global log call, writes on configuration changes. Both
go through a lock so that no caller ever observes a half-installed adapter. A
call racing ``set_adapter`` may go to either the old or the new adapter.
"""

from __future__ import annotations

import threading
from typing import Any

from .adapter import Adapter, NopAdapter
from .logger import Logger


class _AdapterSlot:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._adapter: Adapter = NopAdapter()

    def get(self) -> Adapter:
        with self._lock:
            return self._adapter

    def set(self, adapter: Adapter) -> None:
        with self._lock:
            self._adapter = adapter


_slot = _AdapterSlot()


def set_adapter(adapter: Adapter | None) -> None:
    """Install the adapter used by the global functions. None disables logging."""
    _slot.set(adapter if adapter is not None else NopAdapter())


def get_adapter() -> Adapter:
    return _slot.get()


def _global_logger(ctx: Any) -> Logger:
    return Logger(adapter=_slot.get(), ctx=ctx)


def _global_logger_with_skipped_caller_frame(ctx: Any) -> Logger:
    return _global_logger(ctx).with_skipped_caller_frame()


def debug(ctx: Any, msg: str) -> None:
    """Log message using the globally configured Adapter."""
    _global_logger_with_skipped_caller_frame(ctx).debug(msg)


def info(ctx: Any, msg: str) -> None:
    """Log message using the globally configured Adapter."""
    _global_logger_with_skipped_caller_frame(ctx).info(msg)


def warn(ctx: Any, msg: str) -> None:
    """Log message using the globally configured Adapter."""
    _global_logger_with_skipped_caller_frame(ctx).warn(msg)


def error(ctx: Any, msg: str) -> None:
    """Log message using the globally configured Adapter."""
    _global_logger_with_skipped_caller_frame(ctx).error(msg)


def with_field(ctx: Any, key: str, value: Any) -> Logger:
    """Create a Logger with field, using the globally configured Adapter."""
    return _global_logger(ctx).with_field(key, value)


def with_error(ctx: Any, err: BaseException | None) -> Logger:
    """Create a Logger with error, using the globally configured Adapter."""
    return _global_logger(ctx).with_error(err)
