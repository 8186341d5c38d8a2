"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import os
import sys

import typer
from rich.console import Console
from rich.markup import escape

from pathtrack.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system(), soft_wrap=True)
err_console = Console(
    theme=get_theme(), stderr=True, color_system=_detect_color_system(), soft_wrap=True
)


def printable(text: os.PathLike[str] | str) -> str:
    """Make text safe to write to the console.

    Filenames that are not valid UTF-8 reach Python as surrogate escapes;
    those bytes are shown as replacement characters.
    """
    return os.fspath(text).encode("utf-8", errors="surrogateescape").decode(
        "utf-8", errors="replace"
    )


def print_line(text: os.PathLike[str] | str) -> None:
    """Print a plain result line (usually a path) exactly as given.

    Bypasses Rich and writes the raw filesystem bytes, so emoji codes, tabs,
    brackets and non-UTF-8 names reach stdout untouched.
    """
    typer.echo(os.fsencode(text))


def print_added(message: str) -> None:
    """Print a message about a newly tracked path."""
    console.print(f"[added]{escape(printable(message))}[/]", emoji=False)


def print_removed(message: str) -> None:
    """Print a message about a path that is no longer tracked."""
    console.print(f"[removed]{escape(printable(message))}[/]", emoji=False)


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(printable(message))}", emoji=False)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(printable(message))}", emoji=False)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(printable(message))}[/]", emoji=False)
