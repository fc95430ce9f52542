"""Rolling in-process buffer of recent log records, served by /api/logs."""
from __future__ import annotations

import logging
from collections import deque
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Deque, List, Optional

# ``extra`` keys copied onto buffered entries, e.g. by catalog builds and selections
TAGGED_FIELDS: tuple[str, ...] = ("timezone_id", "catalog_entries")


class LogBufferHandler(logging.Handler):
    """Keep the last ``capacity`` records as dicts, with catalog and timezone tags."""

    def __init__(self, capacity: int = 500) -> None:
        super().__init__()
        self.capacity = capacity
        self._entries: Deque[dict[str, Any]] = deque(maxlen=capacity)
        self._lock = Lock()

    def emit(self, record: logging.LogRecord) -> None:
        formatter = self.formatter or logging.Formatter("%(message)s")
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": formatter.format(record),
        }
        for name in TAGGED_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                entry[name] = value
        if record.exc_info:
            entry["exception"] = formatter.formatException(record.exc_info)

        with self._lock:
            self._entries.append(entry)

    def get_entries(self, limit: int, timezone_id: Optional[str] = None) -> List[dict[str, Any]]:
        """Return up to ``limit`` newest entries, oldest first, optionally for one timezone."""
        with self._lock:
            entries = list(self._entries)
        if timezone_id is not None:
            entries = [entry for entry in entries if entry.get("timezone_id") == timezone_id]
        if limit <= 0 or limit >= len(entries):
            return entries
        return entries[-limit:]

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


_log_buffer_handler: LogBufferHandler | None = None


def get_log_buffer_handler(capacity: int = 500) -> LogBufferHandler:
    """Return the singleton in-memory log buffer handler."""
    global _log_buffer_handler
    if _log_buffer_handler is None:
        _log_buffer_handler = LogBufferHandler(capacity=capacity)
    return _log_buffer_handler
