"""Discovery of files under tracked roots.

Each root is walked depth-first with entries visited in sorted name order,
so the output is deterministic for a given filesystem state. Only regular
files are matched; symlinks below a root are neither followed nor matched.
Excluded directories (``.git``) are pruned from the walk entirely.
"""

import logging
import os
import stat
from collections.abc import Collection, Iterable, Iterator
from pathlib import Path

from pathtrack.core.errors import MatchError
from pathtrack.filesystem.exclusion import DEFAULT_EXCLUDED_NAMES, is_excluded

logger = logging.getLogger(__name__)


def iter_matches(
    roots: Iterable[Path],
    *,
    excluded_names: Collection[str] = DEFAULT_EXCLUDED_NAMES,
) -> Iterator[Path]:
    """Lazily yield the regular files reachable under each root.

    Roots are processed in the given order. Overlapping roots yield the
    same file more than once.

    Args:
        roots: Absolute tracked paths.
        excluded_names: Directory names pruned from the walk.

    Yields:
        Absolute paths of matched regular files.

    Raises:
        MatchError: If a root is missing or any part of it cannot be read.
    """
    for root in roots:
        logger.debug("Walking %s", root)
        yield from _walk_root(root, excluded_names)


def find_matches(
    roots: Iterable[Path],
    *,
    excluded_names: Collection[str] = DEFAULT_EXCLUDED_NAMES,
) -> list[Path]:
    """Collect every regular file reachable under the given roots.

    Args:
        roots: Absolute tracked paths.
        excluded_names: Directory names pruned from the walk.

    Returns:
        Matched files, grouped by root in root order.

    Raises:
        MatchError: If a root is missing or any part of it cannot be read.
    """
    matches = list(iter_matches(roots, excluded_names=excluded_names))
    logger.debug("Matched %d file(s)", len(matches))
    return matches


def _walk_root(root: Path, excluded_names: Collection[str]) -> Iterator[Path]:
    # The root itself is followed if it is a symlink
    try:
        st = root.stat()
    except OSError as e:
        raise MatchError(root, _describe(e)) from e

    if stat.S_ISREG(st.st_mode):
        yield root
        return
    if not stat.S_ISDIR(st.st_mode):
        logger.debug("Skipping %s: not a regular file or directory", root)
        return
    if is_excluded(root.name, True, excluded_names):
        logger.debug("Skipping excluded root %s", root)
        return

    stack = [root]
    while stack:
        directory = stack.pop()
        subdirs: list[Path] = []
        for entry in _sorted_entries(root, directory):
            try:
                entry_is_dir = entry.is_dir(follow_symlinks=False)
                entry_is_file = entry.is_file(follow_symlinks=False)
            except OSError as e:
                raise MatchError(root, _describe(e)) from e

            if entry_is_dir:
                if is_excluded(entry.name, True, excluded_names):
                    logger.debug("Pruning excluded directory %s", entry.path)
                    continue
                subdirs.append(Path(entry.path))
            elif entry_is_file:
                yield Path(entry.path)

        # Reverse so the first subdirectory in name order is walked first
        stack.extend(reversed(subdirs))


def _sorted_entries(root: Path, directory: Path) -> list[os.DirEntry[str]]:
    try:
        with os.scandir(directory) as it:
            return sorted(it, key=lambda entry: os.fsencode(entry.name))
    except OSError as e:
        raise MatchError(root, _describe(e)) from e


def _describe(error: OSError) -> str:
    if error.filename is not None:
        return f"{error.strerror or error}: {error.filename}"
    return str(error)
