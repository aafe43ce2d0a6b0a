"""
Recursive discovery of Markdown files.

Walks a directory tree following symbolic links and yields regular files
with a given extension. Entries that cannot be listed or stat'ed are
dropped silently so a single bad subdirectory never aborts a scan.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator


def iter_markdown_files(
    root: Path, extension: str = "md", follow_links: bool = True
) -> Iterator[Path]:
    """Yield files under ``root`` whose extension is exactly ``extension``.

    The comparison is case-sensitive and ignores files whose whole name is
    the extension (``.md`` is a hidden file, not a Markdown file). A
    directory reachable through several symlinks is walked under each path;
    descent stops only where a directory would contain itself. Order is
    unspecified.

    Args:
        root: Directory to scan, or a single file
        extension: Extension without the leading dot
        follow_links: Whether to descend into symlinked directories

    Yields:
        Paths starting with ``root``
    """
    root = Path(root)
    if root.is_file():
        if _has_extension(root.name, extension):
            yield root
        return

    # Keys of each walked directory and its ancestors; a directory is a
    # cycle only when its own key is already on that chain.
    chains: dict[Path, frozenset[tuple[int, int]]] = {}
    for dirpath, dirnames, filenames in os.walk(root, followlinks=follow_links, onerror=_ignore):
        current = Path(dirpath)
        key = _dir_key(dirpath)
        parent_chain = frozenset() if current == root else chains.get(current.parent, frozenset())
        if key is None or key in parent_chain:
            dirnames[:] = []
            continue
        chains[current] = parent_chain | {key}

        for name in filenames:
            if not _has_extension(name, extension):
                continue
            path = Path(dirpath) / name
            try:
                if path.is_file():
                    yield path
            except OSError:
                continue


def _has_extension(name: str, extension: str) -> bool:
    stem, dot, ext = name.rpartition(".")
    return bool(dot) and bool(stem) and ext == extension


def _dir_key(dirpath: str) -> tuple[int, int] | None:
    try:
        st = os.stat(dirpath)
    except OSError:
        return None
    return st.st_dev, st.st_ino


def _ignore(error: OSError) -> None:
    return None
