"""Typer CLI application."""

import logging
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Annotated, TextIO

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from modmsg_charset.core.constants import COLUMN_WIDTH, MODULE_EXTENSIONS
from modmsg_charset.diff import DiffConfig, compare_and_report
from modmsg_charset.errors import CharsetError, LineCountMismatch
from modmsg_charset.module import ParseFailure, load_message

_LOGGER = logging.getLogger(__name__)


def collect_paths(paths: Iterable[Path], recursive: bool = False) -> Iterator[Path]:
    """Yield files as given and expand directories to the module files they hold."""
    for path in paths:
        if not path.is_dir():
            yield path
            continue

        candidates = path.rglob("*") if recursive else path.glob("*")
        files = sorted(
            f for f in candidates
            if f.is_file() and f.suffix.lower() in MODULE_EXTENSIONS
        )
        if not files:
            _LOGGER.warning("No module files found in %s", path)
        yield from files


def check_file(path: Path, config: DiffConfig, out: TextIO, err_console: Console) -> bool:
    """
    Check one file and report on ``out``; failures go to ``err_console``.

    Returns:
        True if a difference report was written
    """
    result = load_message(path)

    if isinstance(result, ParseFailure):
        err_console.print(f"[red]can't open[/] {escape(str(path))}: {escape(result.reason)}", soft_wrap=True)
        return False

    if not result.has_message:
        _LOGGER.debug("%s: no song message", path)
        return False

    try:
        return compare_and_report(str(path), result.message, config, out)
    except LineCountMismatch as e:
        err_console.print(f"[bold red]internal error[/] in {escape(str(path))}: {escape(str(e))}", soft_wrap=True)
    except CharsetError as e:
        err_console.print(f"[red]can't open[/] {escape(str(path))}: {escape(str(e))}", soft_wrap=True)
    return False


def configure_logging(verbose: bool, console: Console) -> None:
    """Send package log records to ``console``, replacing any earlier handler."""
    package_logger = logging.getLogger("modmsg_charset")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.addHandler(RichHandler(console=console, show_path=False))
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="modmsg-charset",
        help="Find tracker module song messages that read differently as CP437.",
        rich_markup_mode="rich",
        add_completion=False,
    )
    err_console = Console(stderr=True)

    @app.command()
    def check(
        paths: Annotated[list[Path], typer.Argument(help="Module files or directories to check")],
        show_all: Annotated[bool, typer.Option(
            "--all", "-a",
            envvar="MODMSG_CHARSET_SHOW_ALL",
            help="Show every line of a differing message, not only the lines that differ",
        )] = False,
        width: Annotated[int, typer.Option("--width", "-w", min=1, help="Column width of the original text")] = COLUMN_WIDTH,
        recursive: Annotated[bool, typer.Option("--recursive", "-r", help="Descend into subdirectories")] = False,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug details to stderr")] = False,
    ) -> None:
        """Compare each module's song message with its CP437 reading.

        Prints the original and transcoded text side by side for every
        message that changes. Unreadable files are reported on stderr
        and skipped.
        """
        configure_logging(verbose, err_console)

        config = DiffConfig(diff_only=not show_all, column_width=width)
        reported = 0
        checked = 0

        for path in collect_paths(paths, recursive):
            checked += 1
            if check_file(path, config, sys.stdout, err_console):
                reported += 1
            sys.stdout.flush()

        _LOGGER.debug("Checked %d files, %d with differences", checked, reported)

    return app
