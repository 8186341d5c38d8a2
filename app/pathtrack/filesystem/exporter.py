"""Export of matched files to a directory tree or an archive.

Every matched file keeps its path relative to the filesystem root, so
``/home/me/notes/a.txt`` becomes ``home/me/notes/a.txt`` inside the
export directory or archive.
"""

import logging
import shutil
import tarfile
from collections.abc import Collection, Sequence
from pathlib import Path

from pathtrack.core.errors import ExportError, Unimplemented
from pathtrack.filesystem.exclusion import DEFAULT_EXCLUDED_NAMES, is_excluded
from pathtrack.filesystem.models import ExportKind, ExportSummary

logger = logging.getLogger(__name__)

DEFAULT_COMPRESSION_LEVEL = 6

_ZIP_UNIMPLEMENTED = "Zip export is not implemented"


def relative_to_root(path: Path) -> Path:
    """Strip the filesystem root from an absolute path.

    Raises:
        ExportError: If the path is not absolute.
    """
    if not path.is_absolute():
        raise ExportError(path, f"Cannot export relative path {path}")
    return path.relative_to(path.anchor)


def clean_dir(
    root: Path,
    *,
    excluded_names: Collection[str] = DEFAULT_EXCLUDED_NAMES,
) -> None:
    """Delete every child of a directory except excluded directories.

    Directories are removed recursively; files and symlinks are unlinked
    without following them.

    Args:
        root: Directory to clean.
        excluded_names: Names of child directories to keep.

    Raises:
        ExportError: If the directory cannot be listed or a child cannot be
            removed.
    """
    try:
        children = sorted(root.iterdir())
    except OSError as e:
        raise ExportError(root, f"Cannot read export directory {root}: {e}") from e

    for child in children:
        try:
            child_is_dir = child.is_dir() and not child.is_symlink()
            if is_excluded(child.name, child_is_dir, excluded_names):
                logger.debug("Keeping %s", child)
                continue
            if child_is_dir:
                shutil.rmtree(child)
            else:
                child.unlink()
        except OSError as e:
            raise ExportError(child, f"Cannot remove {child}: {e}") from e
        logger.debug("Removed %s", child)


def export_to_dir(
    root: Path,
    matches: Sequence[Path],
    *,
    excluded_names: Collection[str] = DEFAULT_EXCLUDED_NAMES,
) -> ExportSummary:
    """Mirror the matched files into a directory.

    The directory is created if needed and cleaned first (keeping excluded
    directories such as ``.git``), so running the same export twice gives
    the same tree. When two matches map to the same destination the later
    one wins.

    Args:
        root: Export directory.
        matches: Absolute paths of the files to copy.
        excluded_names: Child directory names preserved by the cleaning step.

    Returns:
        ExportSummary for the written directory.

    Raises:
        ExportError: If cleaning or any copy fails.
    """
    try:
        root.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ExportError(root, f"Cannot create export directory {root}: {e}") from e

    clean_dir(root, excluded_names=excluded_names)

    for match in matches:
        destination = root / relative_to_root(match)
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy(match, destination)
        except OSError as e:
            raise ExportError(match, f"Could not copy {match} to {destination}: {e}") from e
        logger.debug("Copied %s -> %s", match, destination)

    logger.info("Exported %d file(s) to %s", len(matches), root)
    return ExportSummary(kind=ExportKind.DIR, destination=root, file_count=len(matches))


def export_to_tar_gz(
    destination: Path,
    matches: Sequence[Path],
    *,
    compresslevel: int = DEFAULT_COMPRESSION_LEVEL,
) -> ExportSummary:
    """Write the matched files into a gzip-compressed tar archive.

    File contents are streamed into the archive. On failure the partially
    written archive is left in place.

    Args:
        destination: Archive file to create (overwritten if it exists).
        matches: Absolute paths of the files to archive.
        compresslevel: gzip compression level (0-9).

    Returns:
        ExportSummary for the written archive.

    Raises:
        ExportError: If the archive cannot be created or a file cannot be added.
    """
    try:
        archive = tarfile.open(destination, "w:gz", compresslevel=compresslevel)
    except OSError as e:
        raise ExportError(destination, f"Cannot create archive {destination}: {e}") from e

    with archive:
        for match in matches:
            arcname = relative_to_root(match).as_posix()
            try:
                archive.add(match, arcname=arcname, recursive=False)
            except OSError as e:
                raise ExportError(match, f"Could not add path {match} to archive: {e}") from e
            logger.debug("Archived %s as %s", match, arcname)

    logger.info("Exported %d file(s) to %s", len(matches), destination)
    return ExportSummary(kind=ExportKind.TAR, destination=destination, file_count=len(matches))


def check_supported(kind: ExportKind) -> None:
    """Fail fast for export kinds that are not implemented.

    Raises:
        Unimplemented: For zip exports, before anything is written.
    """
    if kind is ExportKind.ZIP:
        raise Unimplemented(_ZIP_UNIMPLEMENTED)


def export_to_zip(destination: Path, matches: Sequence[Path]) -> ExportSummary:
    """Zip export is not implemented.

    Raises:
        Unimplemented: Always, before touching the filesystem.
    """
    _ = (destination, matches)
    raise Unimplemented(_ZIP_UNIMPLEMENTED)


def export(
    kind: ExportKind,
    destination: Path,
    matches: Sequence[Path],
    *,
    excluded_names: Collection[str] = DEFAULT_EXCLUDED_NAMES,
    compresslevel: int = DEFAULT_COMPRESSION_LEVEL,
) -> ExportSummary:
    """Export matched files in the requested representation.

    Args:
        kind: Export representation.
        destination: Export directory or archive path.
        matches: Absolute paths of the files to export.
        excluded_names: Directory names preserved when cleaning a directory export.
        compresslevel: gzip level for tar exports.

    Returns:
        ExportSummary describing what was written.

    Raises:
        ExportError: If writing fails.
        Unimplemented: For zip exports.
    """
    if kind is ExportKind.DIR:
        return export_to_dir(destination, matches, excluded_names=excluded_names)
    if kind is ExportKind.TAR:
        return export_to_tar_gz(destination, matches, compresslevel=compresslevel)
    return export_to_zip(destination, matches)
