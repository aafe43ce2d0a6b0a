"""
Configuration management using YAML files and dataclasses.

This module defines the configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- SyncConfig: What to scan and how to copy
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml


@dataclass
class SyncConfig:
    """Configuration for the scan and copy stages.

    Attributes:
        dry_run: Report intended copies without touching the filesystem
        extension: Extension (without dot) of files to consider, case-sensitive
        key_field: Front-matter key used as the deduplication key
        follow_links: Whether to follow symbolic links while scanning
    """

    dry_run: bool = False
    extension: str = "md"
    key_field: str = "source_url"
    follow_links: bool = True


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to the console (stderr)
        file: Whether to log to a file
        format: Log file format ("jsonl" or "plain")
        filename: Path of the log file
    """

    level: str = "WARNING"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "highlight-sync.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    sync: SyncConfig = field(default_factory=SyncConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config file {path}: expected a mapping at the top level")

    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            raise ValueError(f"Invalid config section '{key}': expected a mapping")
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "sync": {
            "dry_run": cfg.sync.dry_run,
            "extension": cfg.sync.extension,
            "key_field": cfg.sync.key_field,
            "follow_links": cfg.sync.follow_links,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        sync=SyncConfig(**data["sync"]),
        logging=LoggingConfig(**data["logging"]),
    )
