"""
logfmt encoding of fields and errors.

Values are rendered with ``str()``; backslashes and double quotes are always
escaped and the value is quoted when it contains a space or ``=``. ``None``
renders as bare ``nil`` while the text "nil" renders quoted. Bytes are decoded as
UTF-8. A value whose ``__str__`` raises renders as a placeholder naming the
exception type, so a broken field never breaks the caller.
"""

from __future__ import annotations

import io
from typing import Any, Iterable, Protocol, Sequence

from yala.logger import Field


class TextWriter(Protocol):
    def write(self, s: str, /) -> Any: ...


def to_text(value: Any) -> str:
    """Default string form of ``value``; never raises."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")

    try:
        return str(value)
    except Exception as exc:
        return f"%!s(PANIC=__str__ method: {type(exc).__name__})"


def format_value(value: Any) -> str:
    if value is None:
        return "nil"

    if isinstance(value, str) and value == "nil":
        return '"nil"'

    text = to_text(value)

    if "\\" in text:
        text = text.replace("\\", "\\\\")

    if '"' in text:
        text = text.replace('"', '\\"')

    if " " in text or "=" in text:
        return f'"{text}"'

    return text


def write_value(buf: TextWriter, value: Any) -> None:
    buf.write(format_value(value))


def write_field(buf: TextWriter, field: Field) -> None:
    buf.write(to_text(field.key))
    buf.write("=")
    write_value(buf, field.value)


def write_fields(buf: TextWriter, fields: Iterable[Field]) -> None:
    for i, field in enumerate(fields):
        if i > 0:
            buf.write(" ")
        write_field(buf, field)


def format_fields(fields: Sequence[Field], error: BaseException | None = None) -> str:
    """Render fields followed by an optional ``error=`` pair, space separated."""
    buf = io.StringIO()

    write_fields(buf, fields)

    if error is not None:
        if fields:
            buf.write(" ")
        write_field(buf, Field("error", error))

    return buf.getvalue()
