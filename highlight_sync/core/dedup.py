"""
Known-URL bookkeeping for the target tree.

Deduplication is by exact source URL: a source file is a duplicate when any
Markdown file under the target directory carries the identical string in
its front matter. No normalisation (case, whitespace, trailing slash) is
applied.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .frontmatter import DEFAULT_KEY, read_document
from .scanner import iter_markdown_files
from .types import SyncStats


def collect_known_urls(
    target: Path,
    extension: str = "md",
    key: str = DEFAULT_KEY,
    follow_links: bool = True,
    stats: SyncStats | None = None,
    logger: logging.Logger | None = None,
) -> set[str]:
    """Build the set of source URLs already present under ``target``.

    Files that cannot be read or whose front matter is malformed are
    treated as having no URL; they are counted and logged at DEBUG level
    but never raise.

    Args:
        target: Root of the target tree
        extension: Markdown extension without the dot
        key: Front-matter key holding the URL
        follow_links: Whether to follow symlinks while scanning
        stats: Optional stats object updated in place
        logger: Optional logger for skipped files

    Returns:
        Set of URL strings
    """
    known: set[str] = set()
    for path in iter_markdown_files(target, extension, follow_links):
        if stats is not None:
            stats.target_files += 1
        doc = read_document(path, key)
        if not doc.ok:
            if stats is not None:
                stats.target_unreadable += 1
            if logger is not None:
                logger.debug("Ignoring target file %s: %s", path, doc.cause)
            continue
        if doc.source_url is not None:
            known.add(doc.source_url)

    if stats is not None:
        stats.known_urls = len(known)
    return known
