"""Tests for registry domain models."""

from pathlib import Path

from pathtrack.registry.models import AddResult


class TestAddResult:
    """Tests for AddResult."""

    def test_added(self) -> None:
        result = AddResult(path=Path("/a"), added=True)
        assert result.duplicate is False

    def test_duplicate(self) -> None:
        result = AddResult(path=Path("/a"), added=False)
        assert result.duplicate is True
