"""CLI commands for pathtrack.

This package contains all subcommand implementations.
"""

from pathtrack.cli.commands import export, registry

__all__ = ["export", "registry"]
