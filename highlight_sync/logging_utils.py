"""
Logging setup for sync runs.

Console output goes through Rich on stderr so stdout only carries the
per-file action lines. An optional log file records the structured events
emitted by ``log_event`` either as JSON lines or as plain text.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

from .config import LoggingConfig

LOGGER_NAME = "highlight_sync"

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message",
    "asctime",
}


def setup_logging(cfg: LoggingConfig, log_path: Path | None = None) -> logging.Logger:
    """Configure the package logger from ``cfg``, replacing earlier handlers.

    Args:
        cfg: Logging section of the application config
        log_path: File to log to; defaults to ``cfg.filename`` when
                  ``cfg.file`` is set

    Returns:
        The ``highlight_sync`` logger
    """
    level = logging.getLevelName(cfg.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
    logger.setLevel(level)
    logger.propagate = False

    if cfg.console:
        handler = RichHandler(
            console=Console(stderr=True, emoji=False),
            markup=False,
            show_time=False,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    if cfg.file:
        file_path = log_path or Path(cfg.filename)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(file_path, encoding="utf-8")
        if cfg.format == "jsonl":
            handler.setFormatter(JsonlFormatter())
        else:
            handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
        logger.addHandler(handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger


def log_event(logger: logging.Logger | None, message: str, **fields: Any) -> None:
    if logger is not None:
        logger.info(message, extra=fields)


class JsonlFormatter(logging.Formatter):
    """One JSON object per record: level, message and any ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
        }
        payload.update(
            (key, value) for key, value in vars(record).items() if key not in _RECORD_ATTRS
        )
        return json.dumps(payload, ensure_ascii=True, default=str)
