"""In-memory log buffer for the status area."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass


@dataclass
class LogEntry:
    """A single log entry."""

    level: str
    name: str
    message: str


class LogBuffer(logging.Handler):
    """Logging handler that keeps the most recent records in a bounded deque.

    The terminal UI draws these under the map, so nothing is written to
    stderr while the screen is in use.
    """

    def __init__(self, maxlen: int = 100) -> None:
        super().__init__()
        self._entries: deque[LogEntry] = deque(maxlen=maxlen)

    def emit(self, record: logging.LogRecord) -> None:
        self._entries.append(
            LogEntry(level=record.levelname, name=record.name, message=record.getMessage())
        )

    def get_entries(self, count: int | None = None) -> list[LogEntry]:
        """Get the most recent log entries, oldest first.

        Args:
            count: Maximum number of entries to return. None for all.
        """
        entries = list(self._entries)
        if count is None:
            return entries
        if count <= 0:
            return []
        return entries[-count:]

    def clear(self) -> None:
        self._entries.clear()
