"""
Core data types for Highlight Sync.

This module defines the structures passed between the scan and copy stages:
- Document: A Markdown file and what was read from its front matter
- CopyAction: A copy that was performed, or would be in dry-run mode
- SyncStats: Counters collected over one run
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class Document:
    """A Markdown file and the result of reading its front matter.

    Either ``source_url``/``has_front_matter`` describe the file, or
    ``error`` and ``cause`` explain why it could not be read. Callers decide
    whether an error is ignorable.

    Attributes:
        path: Filesystem path to the Markdown file
        source_url: The string value of the key field, None if absent
        has_front_matter: Whether a front-matter block was found
        error: Short description of the failure, None on success
        error_kind: "read" for I/O and decoding failures, "front_matter" for
                    YAML syntax errors or a non-string key value
        cause: The underlying exception, kept for error chaining
    """
    path: Path
    source_url: str | None = None
    has_front_matter: bool = False
    error: str | None = None
    error_kind: str | None = None
    cause: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class CopyAction:
    """A source file selected for copying into the target tree."""
    source: Path
    destination: Path
    dry_run: bool = False

    def describe(self) -> str:
        verb = "Would copy" if self.dry_run else "Copied"
        return f"{verb} {self.source} to {self.destination}"


@dataclass
class SyncStats:
    """Statistics collected during a sync run.

    Attributes:
        target_files: Markdown files found under the target directory
        target_unreadable: Target files ignored because they could not be read
        known_urls: Distinct source URLs already present in the target
        source_files: Markdown files found under the source directory
        skipped_no_url: Source files without a source URL
        skipped_known: Source files whose URL is already in the target
        copied: Files copied into the target
        planned: Files that would be copied in dry-run mode
    """
    target_files: int = 0
    target_unreadable: int = 0
    known_urls: int = 0
    source_files: int = 0
    skipped_no_url: int = 0
    skipped_known: int = 0
    copied: int = 0
    planned: int = 0
