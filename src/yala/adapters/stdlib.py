"""
Bridge to the standard library ``logging`` package.
"""

from __future__ import annotations

import logging
from typing import Any

from yala.logger import Adapter, Entry, Level

from .logfmt import format_fields, to_text

_LEVELS = {
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARN: logging.WARNING,
    Level.ERROR: logging.ERROR,
}


class StdlibAdapter(Adapter):
    """Adapter forwarding entries to a ``logging.Logger``.

    Fields and error are appended to the message in logfmt. The record's caller
    location is the application frame, not this adapter.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self._logger = logger if logger is not None else logging.getLogger("yala")

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def log(self, ctx: Any, entry: Entry) -> None:
        level = _LEVELS.get(entry.level, logging.INFO)
        if not self._logger.isEnabledFor(level):
            return

        message = to_text(entry.message)
        fields_and_error = format_fields(entry.fields, entry.error)
        if fields_and_error:
            message = f"{message} {fields_and_error}"

        # Passed as an argument so that "%" in user text is never interpolated.
        self._logger.log(level, "%s", message, stacklevel=entry.skipped_caller_frames + 1)
