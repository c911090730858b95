"""Holder for the currently loaded log collection."""

from __future__ import annotations

import logging
from typing import Iterable

from .models import LogEntry

logger = logging.getLogger(__name__)


class LogStore:
    """The active, immutable collection of log entries.

    A load replaces the whole collection; there are no incremental updates.
    ``revision`` increases on every load or clear so derived values can tell
    which collection they were computed from.
    """

    def __init__(self) -> None:
        self._entries: tuple[LogEntry, ...] | None = None
        self.revision = 0

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        return self._entries or ()

    @property
    def is_loaded(self) -> bool:
        return self._entries is not None

    def __len__(self) -> int:
        return len(self.entries)

    def load(self, entries: Iterable[LogEntry]) -> None:
        """Replace the active collection with *entries*."""
        self._entries = tuple(entries)
        self.revision += 1
        logger.info("Loaded %d log entries (revision %d)", len(self._entries), self.revision)

    def clear(self) -> None:
        """Drop the active collection."""
        self._entries = None
        self.revision += 1
        logger.info("Cleared log collection (revision %d)", self.revision)
