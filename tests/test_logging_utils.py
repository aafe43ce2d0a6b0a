"""Tests for logging setup and the JSONL formatter."""

import json
import logging
import tempfile
from pathlib import Path

from rich.logging import RichHandler

from highlight_sync.config import LoggingConfig
from highlight_sync.logging_utils import JsonlFormatter, log_event, setup_logging


def _close(logger: logging.Logger) -> None:
    for handler in logger.handlers:
        handler.flush()
        handler.close()
    logger.handlers = []


def test_console_only_by_default():
    logger = setup_logging(LoggingConfig())

    assert logger.name == "highlight_sync"
    assert logger.level == logging.WARNING
    assert logger.propagate is False
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)
    _close(logger)


def test_setup_is_idempotent():
    setup_logging(LoggingConfig())
    logger = setup_logging(LoggingConfig())
    assert len(logger.handlers) == 1
    _close(logger)


def test_no_handlers_configured_uses_null_handler():
    logger = setup_logging(LoggingConfig(console=False))
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.NullHandler)
    _close(logger)


def test_jsonl_file_logging():
    with tempfile.TemporaryDirectory() as tmpdir:
        log_path = Path(tmpdir) / "nested" / "run.jsonl"
        cfg = LoggingConfig(level="INFO", console=False, file=True)

        logger = setup_logging(cfg, log_path)
        log_event(logger, "File copied", event="file_copied", source="a.md", destination="b.md")
        _close(logger)

        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        entry = json.loads(lines[0])
        assert entry["message"] == "File copied"
        assert entry["event"] == "file_copied"
        assert entry["source"] == "a.md"
        assert entry["destination"] == "b.md"
        assert entry["level"] == "INFO"
        assert "timestamp" in entry


def test_plain_file_logging():
    with tempfile.TemporaryDirectory() as tmpdir:
        log_path = Path(tmpdir) / "run.log"
        cfg = LoggingConfig(level="INFO", console=False, file=True, format="plain")

        logger = setup_logging(cfg, log_path)
        logger.info("hello")
        _close(logger)

        assert "INFO hello" in log_path.read_text(encoding="utf-8")


def test_log_event_with_no_logger_is_noop():
    log_event(None, "ignored", event="x")


def test_jsonl_formatter_serializes_paths():
    record = logging.LogRecord("highlight_sync", logging.INFO, __file__, 1, "msg", None, None)
    record.source = Path("/tmp/a.md")

    payload = json.loads(JsonlFormatter().format(record))

    assert payload["source"] == "/tmp/a.md"


def test_unknown_level_falls_back_to_info():
    logger = setup_logging(LoggingConfig(level="chatty", console=False))
    assert logger.level == logging.INFO
    _close(logger)
