"""Refresh entry point for an external scheduler (cron, systemd timer, ...).

Usage: python scripts/refresh.py [slug] [--json]
Exit code is 1 when any account ended in error.
"""
from __future__ import annotations

import asyncio

import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))
from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings
from presentation.cli import RefreshCommand


def main(argv: list[str]) -> int:
    json_out = "--json" in argv
    slugs = [a for a in argv if not a.startswith("--")]
    bootstrap_logging(service="refresh", level=settings.LOG_LEVEL, log_dir=settings.LOG_DIR, log_file_name="refresh.jsonl")
    try:
        return asyncio.run(RefreshCommand(json_out=json_out).run(slugs[0] if slugs else None))
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
