"""
Highlight Sync - copy Markdown notes that a target vault does not have yet.

This package compares two directory trees of Markdown files and copies
every source file whose front-matter ``source_url`` is not already present
somewhere in the target tree, preserving relative paths.

Main entry point is the CLI via the `highlight-sync` command.

Example:
    $ highlight-sync -s ~/exports/highlights -t ~/vault/highlights --dry-run
"""

__all__ = [
    "__version__",
    "AppConfig",
    "Document",
    "SyncError",
    "SyncStats",
    "iter_markdown_files",
    "load_config",
    "parse_front_matter",
    "read_document",
    "run_sync",
]
__version__ = "0.1.0"

from .config import AppConfig, load_config
from .core.errors import SyncError
from .core.frontmatter import parse_front_matter, read_document
from .core.scanner import iter_markdown_files
from .core.types import Document, SyncStats
from .runner import run_sync
