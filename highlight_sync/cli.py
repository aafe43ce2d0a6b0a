"""
Command-line interface for Highlight Sync.

Uses Typer to expose the sync run with source, target and dry-run options,
plus overrides for the YAML configuration and logging settings.
"""

from __future__ import annotations

from pathlib import Path

import typer
import yaml
from rich.console import Console

from . import __version__
from .config import load_config
from .core.errors import SyncError, format_error_chain
from .logging_utils import log_event, setup_logging
from .runner import run_sync

app = typer.Typer(add_completion=False)
console = Console(emoji=False)
err_console = Console(stderr=True, emoji=False)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"highlight-sync {__version__}", markup=False, highlight=False, emoji=False)
        raise typer.Exit()


@app.command()
def sync(
    source: Path = typer.Option(
        ...,
        "--source",
        "-s",
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
        help="Source directory containing Markdown files to sync.",
    ),
    target: Path = typer.Option(
        ...,
        "--target",
        "-t",
        file_okay=False,
        help="Target directory to copy unique files into.",
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-d", help="Show what would be copied without copying."
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", exists=True, dir_okay=False, help="YAML config file."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Also write logs to this file."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
):
    """Copy Markdown files whose source_url is not yet in the target.

    Scans the target directory for front-matter source URLs, then copies
    every source file with an unseen URL to the same relative path under
    the target.

    Args:
        source: Root of the Markdown files to consider
        target: Root of the files already in place; destination of copies
        dry_run: Report intended copies without touching the filesystem
        config: Optional path to YAML config file
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path (enables file logging)
        version: Print the version and exit
    """
    try:
        cfg = load_config(str(config) if config else None)
    except (OSError, ValueError, TypeError, yaml.YAMLError) as exc:
        _print_error(exc)
        raise typer.Exit(code=1)

    # Override with CLI options
    if dry_run:
        cfg.sync.dry_run = True
    if log_level:
        cfg.logging.level = log_level
    if log_file is not None:
        cfg.logging.file = True
        cfg.logging.filename = str(log_file)

    logger = setup_logging(cfg.logging)

    try:
        run_sync(source, target, cfg, console=console, logger=logger)
    except SyncError as exc:
        log_event(logger, "Sync failed", event="sync_failed", error=" / ".join(format_error_chain(exc)))
        _print_error(exc)
        raise typer.Exit(code=1)


def _print_error(exc: BaseException) -> None:
    message, *causes = format_error_chain(exc)
    err_console.print(
        f"Error: {message}", markup=False, highlight=False, emoji=False, soft_wrap=True
    )
    if causes:
        err_console.print()
        err_console.print("Caused by:", markup=False, highlight=False, emoji=False)
        for cause in causes:
            err_console.print(
                f"    {cause}", markup=False, highlight=False, emoji=False, soft_wrap=True
            )


if __name__ == "__main__":
    app()
