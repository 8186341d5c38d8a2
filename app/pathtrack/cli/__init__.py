"""CLI package for pathtrack.

This package contains the Typer application and all subcommands.
"""

from pathtrack.cli.main import app

__all__ = ["app"]
