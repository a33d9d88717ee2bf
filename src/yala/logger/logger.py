"""
Immutable loggers.

A Logger accumulates fields and an error, then hands a finalized Entry to its
Adapter. Every combinator returns a new Logger, so a Logger can be shared
between threads and reused as a template without locking.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from .adapter import Adapter
from .entry import Entry, Field, Level

# Adapter.log, Logger._log and the level method itself.
_LOG_CALL_DEPTH = 3


@dataclass(frozen=True)
class Logger:
    """Immutable logger bound to an adapter and a context.

    A Logger without an adapter drops every entry.
    """

    entry: Entry = field(default_factory=Entry)
    adapter: Adapter | None = None
    ctx: Any = None

    def with_field(self, key: str, value: Any) -> Logger:
        """Create a new Logger with one more field."""
        fields = self.entry.fields + (Field(key, value),)
        return replace(self, entry=replace(self.entry, fields=fields))

    def with_error(self, err: BaseException | None) -> Logger:
        """Create a new Logger with error, replacing any previous one."""
        return replace(self, entry=replace(self.entry, error=err))

    def with_skipped_caller_frame(self) -> Logger:
        """Create a new Logger hiding one more stack frame from location reporting.

        Use it in wrappers which add a frame between the application and this Logger.
        """
        skipped = self.entry.skipped_caller_frames + 1
        return replace(self, entry=replace(self.entry, skipped_caller_frames=skipped))

    def debug(self, msg: str) -> None:
        self._log(Level.DEBUG, msg)

    def info(self, msg: str) -> None:
        self._log(Level.INFO, msg)

    def warn(self, msg: str) -> None:
        self._log(Level.WARN, msg)

    def error(self, msg: str) -> None:
        self._log(Level.ERROR, msg)

    def _log(self, level: Level, msg: str) -> None:
        if self.adapter is None:
            return

        entry = replace(
            self.entry,
            level=level,
            message=msg,
            skipped_caller_frames=self.entry.skipped_caller_frames + _LOG_CALL_DEPTH,
        )
        self.adapter.log(self.ctx, entry)


@dataclass(frozen=True)
class Local:
    """Logger factory bound to an explicit adapter, independent of global configuration.

    Usage:
        log = Local(stdout_adapter())
        request_logger = log.with_field(ctx, "request_id", "123").with_field("user", "elgopher")
        request_logger.debug("request started")
    """

    adapter: Adapter | None = None

    def logger(self, ctx: Any) -> Logger:
        return Logger(adapter=self.adapter, ctx=ctx)

    def debug(self, ctx: Any, msg: str) -> None:
        self.logger(ctx).with_skipped_caller_frame().debug(msg)

    def info(self, ctx: Any, msg: str) -> None:
        self.logger(ctx).with_skipped_caller_frame().info(msg)

    def warn(self, ctx: Any, msg: str) -> None:
        self.logger(ctx).with_skipped_caller_frame().warn(msg)

    def error(self, ctx: Any, msg: str) -> None:
        self.logger(ctx).with_skipped_caller_frame().error(msg)

    def with_field(self, ctx: Any, key: str, value: Any) -> Logger:
        return self.logger(ctx).with_field(key, value)

    def with_error(self, ctx: Any, err: BaseException | None) -> Logger:
        return self.logger(ctx).with_error(err)
