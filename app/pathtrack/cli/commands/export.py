"""Matching and export commands: matched and export."""

from pathlib import Path
from typing import Annotated

import typer

from pathtrack.cli.types import exit_on_error, get_state, open_registry
from pathtrack.core.resolve import resolve_path
from pathtrack.filesystem.exporter import check_supported
from pathtrack.filesystem.exporter import export as export_matches
from pathtrack.filesystem.matcher import find_matches
from pathtrack.filesystem.models import ExportKind
from pathtrack.utils.formatting import print_line, print_success


def matched(ctx: typer.Context) -> None:
    """List all files matched by tracked paths."""
    state = get_state(ctx)

    with exit_on_error():
        with open_registry(state) as registry:
            roots = registry.list()
        matches = find_matches(roots, excluded_names=state.settings.exclude_dirs)

    for path in matches:
        print_line(path)


def export(
    ctx: typer.Context,
    kind: Annotated[
        ExportKind,
        typer.Argument(help="Kind of export: dir, tar or zip.", case_sensitive=False),
    ],
    destination: Annotated[
        Path,
        typer.Argument(help="Directory or archive to export to."),
    ],
) -> None:
    """Export all the files matched by the tracked paths."""
    state = get_state(ctx)
    settings = state.settings

    with exit_on_error():
        check_supported(kind)

        target = resolve_path(destination)
        with open_registry(state) as registry:
            roots = registry.list()
        matches = find_matches(roots, excluded_names=settings.exclude_dirs)
        summary = export_matches(
            kind,
            target,
            matches,
            excluded_names=settings.exclude_dirs,
            compresslevel=settings.compression_level,
        )

    if not state.quiet:
        print_success(f"Exported {summary.file_count} file(s) to {summary.destination}")
