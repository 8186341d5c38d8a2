"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from pathtrack import __version__
from pathtrack.cli.commands import export, registry
from pathtrack.cli.types import CliState
from pathtrack.core.settings import SettingsError, load_settings
from pathtrack.utils.formatting import err_console, print_error

# Create main Typer app
app = typer.Typer(
    name="track",
    help="Track filesystem paths and export the files they contain.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"track version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool, quiet: bool) -> None:
    """Route pathtrack log records to stderr through Rich."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    handler = RichHandler(console=err_console, show_path=False, show_time=verbose)
    package_logger = logging.getLogger("pathtrack")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
    database: Annotated[
        Path | None,
        typer.Option(
            "--database",
            envvar="TRACK_DATABASE",
            help="Registry database to use instead of the default location.",
        ),
    ] = None,
) -> None:
    """track - Keep a list of paths and export the files under them.

    Tracked paths are stored in ~/.config/pathtrack/track.db.
    """
    configure_logging(verbose, quiet)

    try:
        settings = load_settings()
    except (SettingsError, RuntimeError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    ctx.obj = CliState(
        verbose=verbose,
        quiet=quiet,
        database=database.expanduser() if database is not None else None,
        settings=settings,
    )


# Register commands
app.command(name="add")(registry.add)
app.command(name="ls")(registry.ls)
app.command(name="rm")(registry.rm)
app.command(name="prune")(registry.prune)
app.command(name="matched")(export.matched)
app.command(name="export")(export.export)


if __name__ == "__main__":
    app()
