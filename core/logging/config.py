from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler, QueueHandler, QueueListener
from queue import Queue
from pathlib import Path
from typing import Optional

from .context import get_context
from .levels import register_levels, to_level
from .formatter import ConsoleFormatter, JSONFormatter

_listener: QueueListener | None = None


class ContextFilter(logging.Filter):
    """Stamp service name and bound context onto records at emit time."""

    def __init__(self, service: str) -> None:
        super().__init__()
        self._service = service

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "service", None) is None:
            record.service = self._service
        record.log_context = get_context()
        return True


def bootstrap_logging(
    *,
    service: str = "tracker",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "tracker.jsonl",
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> None:
    """Install console and rotating JSON-lines handlers on the root logger.

    The console handler is opt-in (``LOG_CONSOLE=true``); the file handler
    is written from a background QueueListener so refresh loops never block
    on disk I/O.
    """
    global _listener
    shutdown_logging()
    register_levels()
    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)
    ctx_filter = ContextFilter(service)

    enable_console = os.getenv("LOG_CONSOLE", "false").strip().lower() == "true"
    console_level_str = os.getenv("LOG_CONSOLE_LEVEL", "")
    if enable_console:
        console = logging.StreamHandler()
        console.setLevel(to_level(console_level_str) if console_level_str else lvl)
        console.setFormatter(ConsoleFormatter())
        console.addFilter(ctx_filter)
        root.addHandler(console)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        json_handler = RotatingFileHandler(
            str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        json_handler.setLevel(lvl)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        qh = QueueHandler(q)
        qh.addFilter(ctx_filter)
        root.addHandler(qh)
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()


def shutdown_logging() -> None:
    global _listener
    if _listener:
        _listener.stop()
        _listener = None
