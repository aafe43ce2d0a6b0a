"""
YAML front-matter parsing for Markdown files.

A front-matter block is recognised only at the very top of a file:

    ---
    source_url: https://example.com/article
    ---
    # Body

The parsing functions are pure and raise on malformed input.
``read_document`` wraps them for use during a scan and reports every
per-file problem as a value on the returned ``Document`` instead of
raising, so each caller chooses whether to ignore or escalate it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .types import Document

DELIMITER = "---"
DEFAULT_KEY = "source_url"


def split_front_matter(text: str) -> tuple[str | None, str]:
    """Split a document into its front-matter block and body.

    Args:
        text: Full file content

    Returns:
        Tuple of (block, body). ``block`` is None when the text does not
        start with a delimiter line or the block is never closed.
    """
    if text.startswith("\ufeff"):
        text = text[1:]
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != DELIMITER:
        return None, text

    for idx in range(1, len(lines)):
        if lines[idx].rstrip() == DELIMITER:
            return "".join(lines[1:idx]), "".join(lines[idx + 1:])
    return None, text


def parse_front_matter(text: str) -> Any | None:
    """Parse the front matter of ``text`` into a Python value.

    Returns None when there is no block or the block is empty. The result
    is usually a dict but may be any YAML value (list, scalar).

    Raises:
        yaml.YAMLError: If the block is not valid YAML
    """
    block, _ = split_front_matter(text)
    if block is None or not block.strip():
        return None
    return yaml.safe_load(block)


def source_url_from(data: Any, key: str = DEFAULT_KEY) -> str | None:
    """Return the string value at ``key`` of parsed front matter.

    Non-mapping front matter, a missing key and an explicit YAML null all
    count as absent.

    Raises:
        TypeError: If the key holds a value that is not a string
    """
    if not isinstance(data, dict):
        return None
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}: {value!r}")
    return value


def read_document(path: Path, key: str = DEFAULT_KEY) -> Document:
    """Read a Markdown file and extract its source URL.

    Never raises for problems with the file itself; failures are recorded
    on the returned Document with the original exception as ``cause``.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return Document(path=path, error=f"Failed to read {path}", error_kind="read", cause=exc)

    try:
        data = parse_front_matter(text)
        url = source_url_from(data, key)
    except (yaml.YAMLError, TypeError) as exc:
        return Document(
            path=path,
            error=f"Invalid front matter in {path}",
            error_kind="front_matter",
            cause=exc,
        )

    return Document(path=path, source_url=url, has_front_matter=data is not None)
