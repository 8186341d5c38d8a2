"""Directory exclusion rule shared by walking and export cleaning.

A directory whose name is one of the excluded names (``.git`` by default)
is never descended into while matching, and is left untouched when an
export directory is cleaned. Files with those names are not excluded.
"""

from collections.abc import Collection

DEFAULT_EXCLUDED_NAMES: tuple[str, ...] = (".git",)


def is_excluded(
    name: str,
    is_directory: bool,
    excluded_names: Collection[str] = DEFAULT_EXCLUDED_NAMES,
) -> bool:
    """Check whether a directory entry falls under the exclusion rule.

    Args:
        name: Entry name (basename, not a path).
        is_directory: Whether the entry is a directory. Symlinks to
            directories must be reported as not directories.
        excluded_names: Directory names to exclude.

    Returns:
        True if the entry is an excluded directory.
    """
    return is_directory and name in excluded_names
