"""
Printer adapter: one logfmt line per entry.

Line format: ``LEVEL message [key=value ...] [error=value]``. Scrapers depend on
this format, so it stays stable.
"""

from __future__ import annotations

import io
import sys
from dataclasses import dataclass
from typing import Any, Callable, TextIO

from yala.logger import Adapter, Entry, Field

from .logfmt import to_text, write_field, write_fields

Printer = Callable[[str], None]


@dataclass(frozen=True)
class PrinterAdapter(Adapter):
    """Adapter passing every rendered line to ``printer`` (builtin ``print`` works).

    Without a printer, entries are dropped.
    """

    printer: Printer | None = None

    def log(self, ctx: Any, entry: Entry) -> None:
        if self.printer is None:
            return

        self.printer(render(entry))


def render(entry: Entry) -> str:
    buf = io.StringIO()
    if entry.level is not None:
        buf.write(entry.level.value)
    buf.write(" ")
    buf.write(to_text(entry.message))

    if entry.fields:
        buf.write(" ")
        write_fields(buf, entry.fields)

    if entry.error is not None:
        buf.write(" ")
        write_field(buf, Field("error", entry.error))

    return buf.getvalue()


class WriterPrinter:
    """Printer writing lines to a text stream.

    ``stream`` may be a callable returning the stream, so that redirections of
    ``sys.stdout``/``sys.stderr`` made after construction are honored.
    """

    def __init__(self, stream: TextIO | Callable[[], TextIO]):
        self._stream = stream

    def __call__(self, line: str) -> None:
        stream = self._stream() if callable(self._stream) else self._stream
        try:
            stream.write(line + "\n")
            stream.flush()
        except (OSError, ValueError):
            # Closed or broken streams must not break the application.
            pass


def stdout_adapter() -> PrinterAdapter:
    """Adapter printing log messages to stdout."""
    return PrinterAdapter(WriterPrinter(lambda: sys.stdout))


def stderr_adapter() -> PrinterAdapter:
    """Adapter printing log messages to stderr."""
    return PrinterAdapter(WriterPrinter(lambda: sys.stderr))
