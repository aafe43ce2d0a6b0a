from __future__ import annotations


class SyncError(RuntimeError):
    """Fatal error that aborts a sync run.

    Raised with ``raise ... from cause`` so the failing operation and the
    underlying OS or parser error can both be reported.
    """


def format_error_chain(exc: BaseException) -> list[str]:
    """Return the messages of ``exc`` and each of its chained causes."""
    messages: list[str] = []
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        messages.append(str(current) or type(current).__name__)
        current = current.__cause__
    return messages
