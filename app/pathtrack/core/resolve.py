"""Resolution of user-supplied paths into the stored registry form.

Paths are absolutized lexically: relative paths are joined onto the working
directory and ``.``/``..`` components are collapsed without consulting the
filesystem. Symlinks are never resolved, so a path that has been deleted can
still be removed from the registry by the same spelling used to add it.
"""

import os
from pathlib import Path

from pathtrack.core.errors import PathResolutionError


def resolve_path(path: str | os.PathLike[str], *, cwd: Path | None = None) -> Path:
    """Turn a user-supplied path into an absolute, normalized path.

    Args:
        path: Path as typed by the user, possibly relative or ``~``-prefixed.
        cwd: Base directory for relative paths. Defaults to the process
            working directory.

    Returns:
        Absolute path with ``.``, ``..`` and repeated separators collapsed.

    Raises:
        PathResolutionError: If the path is empty, contains a NUL byte, or
            the working directory cannot be determined.
    """
    raw = os.fspath(path)
    if not raw:
        raise PathResolutionError(raw, "path is empty")
    if "\x00" in raw:
        raise PathResolutionError(raw, "path contains a NUL byte")

    expanded = os.path.expanduser(raw)
    if not os.path.isabs(expanded):
        if cwd is None:
            try:
                cwd = Path.cwd()
            except OSError as e:
                raise PathResolutionError(raw, f"cannot determine working directory: {e}") from e
        expanded = os.path.join(cwd, expanded)

    # normpath keeps a leading "//" on POSIX; collapse it to a single root
    normalized = os.path.normpath(expanded)
    if normalized.startswith("//"):
        normalized = "/" + normalized.lstrip("/")
    return Path(normalized)
