"""Shared state and helpers for CLI commands.

The global callback stores a CliState on the Typer context; commands use it
to open the registry at the configured location and to read settings.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

import typer

from pathtrack.core.errors import TrackError
from pathtrack.core.settings import Settings
from pathtrack.registry.store import PathRegistry
from pathtrack.utils.formatting import print_error


@dataclass(slots=True)
class CliState:
    """Options shared by every command.

    Attributes:
        verbose: Debug logging enabled.
        quiet: Suppress informational notices.
        database: Registry database override (None for the default location).
        settings: Loaded user settings.
    """

    verbose: bool = False
    quiet: bool = False
    database: Path | None = None
    settings: Settings = field(default_factory=Settings)


def get_state(ctx: typer.Context) -> CliState:
    """Return the CliState stored by the global callback."""
    state = ctx.find_object(CliState)
    if state is None:
        state = ctx.ensure_object(CliState)
    return state


@contextmanager
def exit_on_error() -> Iterator[None]:
    """Report pathtrack errors and exit with status 1.

    Raises:
        typer.Exit: If the block raises a TrackError.
    """
    try:
        yield
    except TrackError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def open_registry(state: CliState) -> PathRegistry:
    """Open the registry at the configured location.

    The ``--database`` option wins over the ``database`` setting, which wins
    over the default location in the configuration directory.

    Raises:
        StorageUnavailable: If the registry cannot be opened.
    """
    database = state.database or state.settings.database
    return PathRegistry(database).open()
