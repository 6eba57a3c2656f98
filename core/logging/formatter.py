from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

from .context import get_context

_LEVEL_COLORS = {
    "TRACE": "\033[90m",
    "DEBUG": "\033[37m",
    "INFO": "\033[36m",
    "SUCCESS": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
_RESET = "\033[0m"


def _record_context(record: logging.LogRecord) -> Dict[str, Any]:
    # QueueListener formats on its own thread, so the context is stamped
    # onto the record at emit time by ContextFilter.
    ctx = getattr(record, "log_context", None)
    return dict(ctx) if ctx is not None else get_context()


def _record_metadata(record: logging.LogRecord) -> Dict[str, Any]:
    ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
    return {
        "timestamp": ts.isoformat(timespec="milliseconds"),
        "level": record.levelname,
        "service": getattr(record, "service", None),
        "logger": record.name,
        "function": record.funcName,
        "line_number": record.lineno,
    }


class ConsoleFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        md = _record_metadata(record)
        ctx = _record_context(record)
        lvl = record.levelname
        parts = [
            md["timestamp"][11:23],
            f"{lvl:<8}",
            md["service"] or "-",
        ]
        if "account" in ctx:
            parts.append(f"[{ctx.pop('account')}]")
        parts.append(record.getMessage())
        exec_ms = getattr(record, "execution_time_ms", None)
        if exec_ms is not None:
            parts.append(f"t={exec_ms}ms")
        if ctx:
            parts.append(" ".join(f"{k}={v}" for k, v in ctx.items()))
        line = " ".join(parts)
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return f"{_LEVEL_COLORS.get(lvl, '')}{line}{_RESET}"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = _record_metadata(record)
        payload["message"] = record.getMessage()
        ctx = _record_context(record)
        if ctx:
            payload["context"] = ctx
        exec_ms = getattr(record, "execution_time_ms", None)
        if exec_ms is not None:
            payload["execution_time_ms"] = exec_ms
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))
