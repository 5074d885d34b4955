"""In-memory ring buffer of recent generator log records, served by the API."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import asdict, dataclass
from datetime import datetime, timezone

PIPELINE_LOGGERS = (
    "digest.main",
    "digest.settings",
    "digest.ingestion.cfbd_client",
    "digest.ingestion.normalizer",
    "digest.draft.pipeline",
    "digest.draft.writer",
)


@dataclass(frozen=True)
class LogEntry:
    timestamp: str
    level: str
    logger: str
    message: str


class BufferHandler(logging.Handler):
    """Keeps the last *maxlen* formatted records."""

    def __init__(self, maxlen: int = 200) -> None:
        super().__init__()
        self._buffer: deque[LogEntry] = deque(maxlen=maxlen)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            created = datetime.fromtimestamp(record.created, tz=timezone.utc)
            self._buffer.append(
                LogEntry(
                    timestamp=created.strftime("%Y-%m-%d %H:%M:%S UTC"),
                    level=record.levelname,
                    logger=record.name,
                    message=self.format(record),
                )
            )
        except Exception:
            self.handleError(record)

    def entries(self, limit: int = 100) -> list[dict]:
        """Return up to *limit* entries, newest first."""
        if limit <= 0:
            return []
        items = list(self._buffer)[-limit:]
        items.reverse()
        return [asdict(entry) for entry in items]

    def clear(self) -> None:
        self._buffer.clear()


_handler: BufferHandler | None = None


def get_buffer_handler() -> BufferHandler:
    global _handler
    if _handler is None:
        _handler = BufferHandler(maxlen=200)
        _handler.setFormatter(logging.Formatter("%(message)s"))
        _handler.setLevel(logging.INFO)
    return _handler


def install_buffer_handler() -> BufferHandler:
    """Attach the shared buffer handler to the pipeline loggers (idempotent)."""
    handler = get_buffer_handler()
    for name in PIPELINE_LOGGERS:
        target = logging.getLogger(name)
        if handler not in target.handlers:
            target.addHandler(handler)
        if target.level == logging.NOTSET or target.level > logging.INFO:
            target.setLevel(logging.INFO)
    return handler
