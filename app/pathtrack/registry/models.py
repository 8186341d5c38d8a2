"""Registry domain models."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class AddResult:
    """Outcome of adding a single path to the registry.

    Attributes:
        path: Absolute path that was submitted.
        added: True if a new entry was inserted, False if the path was
            already tracked.
    """

    path: Path
    added: bool

    @property
    def duplicate(self) -> bool:
        """Whether the path was already tracked."""
        return not self.added
