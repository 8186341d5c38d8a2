"""Unit tests for theme module.

Tests for theme loading, validation, and Rich theme generation.
"""

# pyright: reportPrivateUsage=false

from pathlib import Path

import pytest
from pathtrack.core.theme import (
    ThemeColors,
    _load_toml_colors,
    get_rich_theme,
    get_theme,
    load_theme,
)
from rich.theme import Theme


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has sensible defaults."""
        colors = ThemeColors()
        assert colors.added == "#c1ff62"
        assert colors.success == "#03b971"
        assert colors.error == "#f53263"

    def test_accepts_short_and_long_hex(self) -> None:
        """ThemeColors accepts #RGB and #RRGGBB codes."""
        colors = ThemeColors(added="#abc", removed="#123456")
        assert colors.added == "#abc"
        assert colors.removed == "#123456"

    def test_invalid_hex_no_hash(self) -> None:
        """ThemeColors rejects colors without # prefix."""
        with pytest.raises(ValueError, match="must start with '#'"):
            ThemeColors(success="ffffff")

    def test_invalid_hex_chars(self) -> None:
        """ThemeColors rejects invalid hex characters."""
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(success="#gggggg")

    def test_extra_fields_forbidden(self) -> None:
        """ThemeColors rejects unknown fields."""
        with pytest.raises(ValueError):
            ThemeColors(unknown_field="#ffffff")  # type: ignore[call-arg]


class TestLoadTomlColors:
    """Tests for _load_toml_colors internal function."""

    def test_loads_valid_toml(self, tmp_path: Path) -> None:
        """Loads colors from valid TOML file."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\nsuccess = "#000000"\n')

        assert _load_toml_colors(theme_file) == {"success": "#000000"}

    def test_returns_none_for_missing_file(self, tmp_path: Path) -> None:
        """Returns None when file doesn't exist."""
        assert _load_toml_colors(tmp_path / "nonexistent.toml") is None

    def test_returns_none_for_invalid_toml(self, tmp_path: Path) -> None:
        """Returns None for malformed TOML."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text("not valid [ toml syntax")

        assert _load_toml_colors(theme_file) is None


class TestLoadTheme:
    """Tests for load_theme function."""

    def test_defaults_without_user_theme(self, tmp_path: Path) -> None:
        """Without a theme file the defaults are used."""
        colors = load_theme(tmp_path / "theme.toml")
        assert colors == ThemeColors()

    def test_user_theme_overrides_defaults(self, tmp_path: Path) -> None:
        """User theme overrides individual values."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\nremoved = "#ff0000"\n')

        colors = load_theme(user_theme)

        assert colors.removed == "#ff0000"
        assert colors.added == "#c1ff62"

    def test_reads_config_dir_theme(self, isolated_config: Path) -> None:
        """The default location is theme.toml in the config directory."""
        isolated_config.mkdir(parents=True)
        (isolated_config / "theme.toml").write_text('[colors]\nwarning = "#010203"\n')

        assert load_theme().warning == "#010203"

    def test_invalid_user_theme_falls_back(self, tmp_path: Path) -> None:
        """Invalid color values fall back to defaults."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\nremoved = "red"\n')

        colors = load_theme(user_theme)

        assert colors.removed == "#f53263"


class TestGetRichTheme:
    """Tests for get_rich_theme and get_theme."""

    def test_includes_styles_used_by_formatting(self) -> None:
        """Theme defines every style the output helpers use."""
        theme = get_rich_theme(ThemeColors())

        for style in ("success", "warning", "error", "added", "removed"):
            assert style in theme.styles

    def test_get_theme_is_cached(self) -> None:
        """get_theme returns the same instance on repeated calls."""
        first = get_theme()
        assert isinstance(first, Theme)
        assert get_theme() is first
