"""Exception hierarchy for pathtrack.

Every error raised by the registry, matcher and exporter derives from
TrackError so the CLI can report them uniformly at the command boundary.
"""

from pathlib import Path


class TrackError(Exception):
    """Base exception for pathtrack errors."""


class StorageUnavailable(TrackError):
    """Raised when the registry store cannot be located, opened or initialized."""


class StorageError(TrackError):
    """Raised when a registry read or write fails after the store is open."""


class ConstraintViolation(StorageError):
    """Raised when inserting a path that is already tracked."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Path already tracked: {path}")


class PathResolutionError(TrackError):
    """Raised when a user-supplied path cannot be made absolute."""

    def __init__(self, path: object, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot resolve path {path!r}: {reason}")


class MatchError(TrackError):
    """Raised when a tracked root cannot be walked.

    Attributes:
        root: Tracked root whose walk failed.
    """

    def __init__(self, root: Path, message: str) -> None:
        self.root = root
        super().__init__(f"Error scanning path {root}: {message}")


class ExportError(TrackError):
    """Raised when copying or archiving a matched file fails.

    Attributes:
        path: Path that could not be exported (or cleaned).
    """

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(message)


class Unimplemented(TrackError):
    """Raised for export kinds that are acknowledged but not implemented."""
