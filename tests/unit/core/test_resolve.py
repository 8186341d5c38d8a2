"""Unit tests for lexical path resolution."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pathtrack.core.errors import PathResolutionError
from pathtrack.core.resolve import resolve_path


class TestResolvePath:
    """Tests for resolve_path."""

    def test_absolute_path_unchanged(self) -> None:
        """An already normalized absolute path is returned as is."""
        assert resolve_path("/tmp/proj") == Path("/tmp/proj")

    def test_relative_path_joined_to_cwd(self, tmp_path: Path) -> None:
        """Relative paths are joined onto the given working directory."""
        assert resolve_path("notes/a.txt", cwd=tmp_path) == tmp_path / "notes" / "a.txt"

    def test_defaults_to_process_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without cwd the process working directory is used."""
        monkeypatch.chdir(tmp_path)
        assert resolve_path("x") == Path(os.getcwd()) / "x"

    def test_collapses_dot_components(self) -> None:
        """Dot, dot-dot and repeated separators are collapsed."""
        assert resolve_path("/tmp/./a/../b//c/") == Path("/tmp/b/c")

    def test_double_leading_slash_collapsed(self) -> None:
        """A leading double slash becomes a single root."""
        assert resolve_path("//tmp/proj") == Path("/tmp/proj")

    def test_same_result_for_equivalent_spellings(self, tmp_path: Path) -> None:
        """Different spellings of one path resolve identically."""
        first = resolve_path("./a/../b", cwd=tmp_path)
        second = resolve_path("b", cwd=tmp_path)
        assert first == second

    def test_does_not_resolve_symlinks(self, tmp_path: Path) -> None:
        """Symlinks are kept as spelled."""
        target = tmp_path / "real"
        target.mkdir()
        link = tmp_path / "link"
        link.symlink_to(target)

        assert resolve_path(str(link)) == link

    def test_missing_path_is_fine(self, tmp_path: Path) -> None:
        """Resolution never touches the filesystem."""
        missing = tmp_path / "gone" / "away"
        assert resolve_path(str(missing)) == missing

    def test_expands_home(self, tmp_path: Path) -> None:
        """A leading ~ expands to the home directory."""
        with patch.dict(os.environ, {"HOME": str(tmp_path)}):
            assert resolve_path("~/proj") == tmp_path / "proj"

    def test_empty_path_rejected(self) -> None:
        """Empty input raises PathResolutionError."""
        with pytest.raises(PathResolutionError, match="empty"):
            resolve_path("")

    def test_nul_byte_rejected(self) -> None:
        """NUL bytes raise PathResolutionError."""
        with pytest.raises(PathResolutionError, match="NUL"):
            resolve_path("a\x00b")

    def test_unavailable_cwd_rejected(self) -> None:
        """A vanished working directory raises PathResolutionError."""
        with (
            patch("pathtrack.core.resolve.Path.cwd", side_effect=FileNotFoundError("gone")),
            pytest.raises(PathResolutionError, match="working directory"),
        ):
            resolve_path("relative")
