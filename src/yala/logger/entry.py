"""
Log entry value types.

Each message logged has a level, modeled after RFC 5424 severities:

- DEBUG: information useful to developers for debugging the application.
- INFO:  normal operational messages that require no action.
- WARN:  may indicate that an error will occur if action is not taken.
- ERROR: non-urgent failures that should be relayed to developers or admins.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Level(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]

    def more_severe_than(self, other: Level) -> bool:
        return self.severity > other.severity

    def __str__(self) -> str:
        return self.value


_SEVERITY = {
    Level.DEBUG: 0,
    Level.INFO: 1,
    Level.WARN: 2,
    Level.ERROR: 3,
}


@dataclass(frozen=True)
class Field:
    """A key/value pair attached to an entry. Keys need not be unique."""

    key: str
    value: Any


@dataclass(frozen=True)
class Entry:
    """Immutable bundle handed to an Adapter.

    Attributes:
        level: Severity; unset (None) until a level method finalizes the entry.
        message: Log message payload.
        fields: Fields in insertion order, duplicates kept.
        error: Attached error, or None. An error with an empty message is not None.
        skipped_caller_frames: Stack frames between the application and
            ``Adapter.log``; location-aware adapters skip this many frames.
    """

    level: Level | None = None
    message: str = ""
    fields: tuple[Field, ...] = ()
    error: BaseException | None = None
    skipped_caller_frames: int = 0
