"""
Adapter abstraction (Strategy Pattern).

Every logging backend implements a single operation receiving finalized entries.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .entry import Entry


class Adapter(ABC):
    """Abstract base class for logging backends.

    Implementations must not modify the entry and decide on their own how
    levels map to backend severities.
    """

    @abstractmethod
    def log(self, ctx: Any, entry: Entry) -> None:
        """Log the entry. ``ctx`` is opaque request-scoped context."""
        ...


class NopAdapter(Adapter):
    """Adapter dropping every entry."""

    def log(self, ctx: Any, entry: Entry) -> None:
        pass

    def __repr__(self) -> str:
        return "NopAdapter()"
