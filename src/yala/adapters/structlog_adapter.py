"""
Bridge to structlog.
"""

from __future__ import annotations

from typing import Any

import structlog

from yala.logger import Adapter, Entry, Level

from .logfmt import to_text

_METHODS = {
    Level.DEBUG: "debug",
    Level.INFO: "info",
    Level.WARN: "warning",
    Level.ERROR: "error",
}


class StructlogAdapter(Adapter):
    """Adapter forwarding entries to a structlog logger.

    Fields are bound in order; since structlog's context is a mapping, a
    repeated key keeps its last value. The error is bound under ``error``.
    """

    def __init__(self, logger: Any = None):
        self._logger = logger if logger is not None else structlog.get_logger("yala")

    def log(self, ctx: Any, entry: Entry) -> None:
        context: dict[str, Any] = {}
        for field in entry.fields:
            context[to_text(field.key)] = field.value
        if entry.error is not None:
            context["error"] = entry.error

        method = _METHODS.get(entry.level, "info")
        bound = self._logger.bind(**context) if context else self._logger
        getattr(bound, method)(entry.message)
