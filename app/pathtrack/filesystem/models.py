"""Filesystem domain models for exports."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ExportKind(str, Enum):
    """Representation an export is written in.

    Attributes:
        DIR: Mirrored directory tree.
        TAR: gzip-compressed tar archive.
        ZIP: zip archive (not implemented).
    """

    DIR = "dir"
    TAR = "tar"
    ZIP = "zip"


@dataclass(frozen=True, slots=True)
class ExportSummary:
    """Result of a completed export.

    Attributes:
        kind: Representation that was written.
        destination: Directory or archive that was written.
        file_count: Number of matched files written.
    """

    kind: ExportKind
    destination: Path
    file_count: int
