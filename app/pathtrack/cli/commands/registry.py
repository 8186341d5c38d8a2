"""Registry commands: add, ls, rm and prune.

These commands manage the set of tracked paths. User input is resolved
lexically to an absolute path before it touches the registry, so ``add``
and ``rm`` always agree on the stored form.
"""

from pathlib import Path
from typing import Annotated

import typer

from pathtrack.cli.types import exit_on_error, get_state, open_registry
from pathtrack.core.errors import PathResolutionError
from pathtrack.core.resolve import resolve_path
from pathtrack.utils.formatting import (
    print_added,
    print_error,
    print_line,
    print_removed,
    print_warning,
)


def add(
    ctx: typer.Context,
    paths: Annotated[
        list[Path],
        typer.Argument(help="Paths to track (relative paths are made absolute)."),
    ],
) -> None:
    """Add paths to the tracked paths."""
    state = get_state(ctx)
    failed = False

    with exit_on_error(), open_registry(state) as registry:
        for raw in paths:
            try:
                path = resolve_path(raw)
            except PathResolutionError as e:
                print_error(str(e))
                failed = True
                continue

            result = registry.add(path)
            if result.duplicate:
                print_warning(f"Path already tracked: {path}")
            elif not state.quiet:
                print_added(f"Tracking {path}")

    if failed:
        raise typer.Exit(code=1)


def ls(ctx: typer.Context) -> None:
    """List tracked paths."""
    state = get_state(ctx)

    with exit_on_error(), open_registry(state) as registry:
        tracked = registry.list()

    for path in tracked:
        print_line(path)


def rm(
    ctx: typer.Context,
    paths: Annotated[
        list[Path],
        typer.Argument(help="Paths to stop tracking."),
    ],
) -> None:
    """Remove paths from the tracked paths."""
    state = get_state(ctx)
    failed = False

    with exit_on_error(), open_registry(state) as registry:
        for raw in paths:
            try:
                path = resolve_path(raw)
            except PathResolutionError as e:
                print_error(str(e))
                failed = True
                continue

            if registry.remove(path) and not state.quiet:
                print_removed(f"Removed {path}")

    if failed:
        raise typer.Exit(code=1)


def prune(ctx: typer.Context) -> None:
    """Remove tracked paths that were deleted or are inaccessible."""
    state = get_state(ctx)

    with exit_on_error(), open_registry(state) as registry:
        pruned = registry.prune()

    for path in pruned:
        print_line(f"Pruned {path}")
