"""
Main sync orchestration for Highlight Sync.

This module coordinates the whole run:
1. Scan the target tree and collect every known source URL
2. Scan the source tree and read each file's source URL
3. Copy (or, in dry-run mode, report) files with an unseen URL

The target scan is lenient and ignores files it cannot read. The source
scan is strict: the first unreadable file or malformed source URL aborts
the run with a SyncError. Copies already made are not rolled back.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from rich.console import Console

from .config import AppConfig
from .core.dedup import collect_known_urls
from .core.errors import SyncError
from .core.frontmatter import read_document
from .core.scanner import iter_markdown_files
from .core.types import CopyAction, SyncStats
from .logging_utils import log_event


def run_sync(
    source: Path,
    target: Path,
    cfg: AppConfig,
    console: Console | None = None,
    logger: logging.Logger | None = None,
) -> SyncStats:
    """Copy source Markdown files whose source URL the target lacks.

    Args:
        source: Root of the files to consider copying
        target: Root of the files already in place, and destination root
        cfg: Application configuration (``cfg.sync.dry_run`` enables dry run)
        console: Rich console receiving one line per copy action
        logger: Optional logger for structured progress events

    Returns:
        Statistics for the run

    Raises:
        SyncError: On the first source file that cannot be read, parsed,
            relocated or copied
    """
    console = console or Console(emoji=False)
    sync_cfg = cfg.sync
    stats = SyncStats()

    log_event(
        logger,
        "Sync start",
        event="sync_start",
        source=str(source),
        target=str(target),
        dry_run=sync_cfg.dry_run,
    )

    known = collect_known_urls(
        target,
        extension=sync_cfg.extension,
        key=sync_cfg.key_field,
        follow_links=sync_cfg.follow_links,
        stats=stats,
        logger=logger,
    )
    log_event(
        logger,
        "Target scanned",
        event="target_scanned",
        target_files=stats.target_files,
        target_unreadable=stats.target_unreadable,
        known_urls=stats.known_urls,
    )

    for path in iter_markdown_files(source, sync_cfg.extension, sync_cfg.follow_links):
        stats.source_files += 1
        doc = read_document(path, sync_cfg.key_field)
        if not doc.ok:
            raise SyncError(doc.error) from doc.cause

        if doc.source_url is None:
            stats.skipped_no_url += 1
            continue
        if doc.source_url in known:
            stats.skipped_known += 1
            if logger is not None:
                logger.debug("Skipping %s: %s already in target", path, doc.source_url)
            continue

        action = CopyAction(
            source=path,
            destination=_destination_for(path, source, target),
            dry_run=sync_cfg.dry_run,
        )
        if action.dry_run:
            stats.planned += 1
            log_event(logger, "File planned", event="file_planned", **_action_fields(action))
        else:
            _copy_file(action)
            stats.copied += 1
            log_event(logger, "File copied", event="file_copied", **_action_fields(action))
        console.print(
            action.describe(), markup=False, highlight=False, emoji=False, soft_wrap=True
        )

    log_event(logger, "Sync done", event="sync_done", **vars(stats))
    return stats


def _destination_for(path: Path, source: Path, target: Path) -> Path:
    try:
        rel_path = path.relative_to(source)
    except ValueError as exc:
        raise SyncError(f"Failed to compute path of {path} relative to {source}") from exc
    return target / rel_path


def _copy_file(action: CopyAction) -> None:
    parent = action.destination.parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise SyncError(f"Failed to create directory {parent}") from exc

    try:
        shutil.copy(action.source, action.destination)
    except OSError as exc:
        raise SyncError(f"Failed to copy to {action.destination}") from exc


def _action_fields(action: CopyAction) -> dict[str, str]:
    return {"source": str(action.source), "destination": str(action.destination)}
