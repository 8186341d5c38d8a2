"""Tests for filesystem domain models."""

import dataclasses
from pathlib import Path

import pytest
from pathtrack.filesystem.models import ExportKind, ExportSummary


class TestExportKind:
    """Tests for ExportKind enum."""

    def test_export_kind_values(self) -> None:
        """Verify all 3 ExportKind values exist with correct string values."""
        assert ExportKind.DIR == "dir"
        assert ExportKind.TAR == "tar"
        assert ExportKind.ZIP == "zip"
        assert len(ExportKind) == 3

    def test_lookup_by_value(self) -> None:
        """Kinds can be built from their command-line spelling."""
        assert ExportKind("tar") is ExportKind.TAR


class TestExportSummary:
    """Tests for ExportSummary frozen dataclass."""

    def test_is_frozen(self) -> None:
        """ExportSummary is immutable."""
        summary = ExportSummary(kind=ExportKind.DIR, destination=Path("/out"), file_count=3)

        with pytest.raises(dataclasses.FrozenInstanceError):
            summary.file_count = 4  # type: ignore[misc]
