from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler, QueueHandler, QueueListener
from queue import Queue
from pathlib import Path
from typing import Optional

from .levels import register_levels, to_level
from .context import get_context
from .formatter import ConsoleFormatter, JSONFormatter

_listener: QueueListener | None = None

# Chatty third-party loggers that would otherwise log every request line.
_QUIET_LOGGERS = ("httpx", "httpcore", "hpack")


def bootstrap_logging(
    *,
    service: str = "riot-stats",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "riot-stats.jsonl",
    console: Optional[bool] = None,
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> None:
    """Console output plus, when ``log_dir`` is given, a rotating JSON-lines file fed through a queue."""
    global _listener
    shutdown_logging()
    register_levels()

    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)

    service_filter = _RecordEnricher(service)

    if console is None:
        console = os.getenv("LOG_CONSOLE", "true").strip().lower() == "true"
    if console:
        handler = logging.StreamHandler(sys.stderr)
        console_level_str = os.getenv("LOG_CONSOLE_LEVEL", "")
        handler.setLevel(to_level(console_level_str) if console_level_str else lvl)
        handler.setFormatter(ConsoleFormatter(use_color=sys.stderr.isatty()))
        handler.addFilter(service_filter)
        root.addHandler(handler)

    if log_dir:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            json_handler = RotatingFileHandler(
                str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count
            )
        except OSError as exc:
            logging.getLogger(__name__).warning(f"File logging disabled: {exc}")
        else:
            json_handler.setLevel(lvl)
            json_handler.setFormatter(JSONFormatter())
            q: Queue[logging.LogRecord] = Queue(-1)
            qh = QueueHandler(q)
            qh.addFilter(service_filter)
            root.addHandler(qh)
            _listener = QueueListener(q, json_handler, respect_handler_level=True)
            _listener.start()

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(lvl, logging.WARNING))


def shutdown_logging() -> None:
    global _listener
    if _listener:
        _listener.stop()
        _listener = None


class _RecordEnricher(logging.Filter):
    """Stamps the service name and snapshots the task-local context onto the record.

    The snapshot matters for the file handler, which formats on the queue
    listener thread where the emitting task's context is not visible.
    """

    def __init__(self, service: str) -> None:
        super().__init__()
        self._service = service

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "service", None):
            record.service = self._service
        if not hasattr(record, "context"):
            record.context = get_context()
        return True
