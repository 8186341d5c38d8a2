"""Filesystem matching and export.

This module walks tracked roots for matched files and exports them to a
mirrored directory tree or a compressed archive.
"""

from pathtrack.filesystem.exclusion import DEFAULT_EXCLUDED_NAMES, is_excluded
from pathtrack.filesystem.exporter import (
    check_supported,
    clean_dir,
    export,
    export_to_dir,
    export_to_tar_gz,
    export_to_zip,
    relative_to_root,
)
from pathtrack.filesystem.matcher import find_matches, iter_matches
from pathtrack.filesystem.models import ExportKind, ExportSummary

__all__ = [
    "DEFAULT_EXCLUDED_NAMES",
    "ExportKind",
    "ExportSummary",
    "check_supported",
    "clean_dir",
    "export",
    "export_to_dir",
    "export_to_tar_gz",
    "export_to_zip",
    "find_matches",
    "is_excluded",
    "iter_matches",
    "relative_to_root",
]
