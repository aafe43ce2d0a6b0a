"""
Core domain models and business logic.

This package contains the front-matter extractor, the directory scanner
and the known-URL bookkeeping, independent of the CLI and of how the
copy step reports its progress.
"""

from .types import CopyAction, Document, SyncStats
from .errors import SyncError, format_error_chain
from .frontmatter import parse_front_matter, read_document, source_url_from, split_front_matter
from .scanner import iter_markdown_files
from .dedup import collect_known_urls

__all__ = [
    "CopyAction",
    "Document",
    "SyncStats",
    "SyncError",
    "format_error_chain",
    "parse_front_matter",
    "read_document",
    "source_url_from",
    "split_front_matter",
    "iter_markdown_files",
    "collect_known_urls",
]
