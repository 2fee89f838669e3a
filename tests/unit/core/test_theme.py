"""Unit tests for theme module.

Tests for theme loading, validation, and Rich theme generation.
"""

# pyright: reportPrivateUsage=false

from pathlib import Path
from unittest.mock import patch

import pytest
from modprune.core.theme import (
    ThemeColors,
    _load_toml_colors,
    get_bundled_theme_path,
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
        assert colors.text == "#ffffff"
        assert colors.success == "#03b971"
        assert colors.error == "#f53263"

    def test_valid_hex_colors(self) -> None:
        """ThemeColors accepts short and long hex codes."""
        colors = ThemeColors(text="#AABBCC", muted="#abc")
        assert colors.text == "#AABBCC"
        assert colors.muted == "#abc"

    def test_invalid_hex_no_hash(self) -> None:
        """ThemeColors rejects colors without # prefix."""
        with pytest.raises(ValueError, match="must start with '#'"):
            ThemeColors(text="ffffff")

    def test_invalid_hex_wrong_length(self) -> None:
        """ThemeColors rejects colors with wrong length."""
        with pytest.raises(ValueError, match="must be #RGB or #RRGGBB"):
            ThemeColors(text="#ff")

    def test_invalid_hex_chars(self) -> None:
        """ThemeColors rejects non-hex characters."""
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(text="#gggggg")

    def test_extra_fields_rejected(self) -> None:
        """Unknown color names are rejected."""
        with pytest.raises(ValueError):
            ThemeColors(purple="#800080")  # type: ignore[call-arg]


class TestLoadTheme:
    """Tests for theme loading and overrides."""

    def test_bundled_theme_loads(self) -> None:
        """The bundled theme file parses and validates."""
        colors = _load_toml_colors(Path(get_bundled_theme_path()))
        assert colors is not None
        assert ThemeColors(**colors).rule_directory == "#c1ff62"

    def test_missing_file_returns_none(self, tmp_path: Path) -> None:
        """A missing theme file yields None."""
        assert _load_toml_colors(tmp_path / "none.toml") is None

    def test_user_override_merges(self, tmp_path: Path) -> None:
        """User colors override bundled colors key by key."""
        user = tmp_path / "theme.toml"
        user.write_text('[colors]\nsuccess = "#00ff00"\n')

        with patch("modprune.core.theme.get_user_theme_path", return_value=user):
            colors = load_theme()

        assert colors.success == "#00ff00"
        assert colors.error == "#f53263"

    def test_invalid_user_theme_falls_back(self, tmp_path: Path) -> None:
        """An invalid override falls back to defaults."""
        user = tmp_path / "theme.toml"
        user.write_text('[colors]\nsuccess = "green"\n')

        with patch("modprune.core.theme.get_user_theme_path", return_value=user):
            colors = load_theme()

        assert colors == ThemeColors()

    def test_invalid_user_theme_does_not_print(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Theme problems are logged, never written straight to stderr."""
        user = tmp_path / "theme.toml"
        user.write_text('[colors]\nsuccess = "green"\n')

        with patch("modprune.core.theme.get_user_theme_path", return_value=user):
            load_theme()

        assert capsys.readouterr().err == ""

    def test_malformed_toml_does_not_print(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A TOML syntax error is logged and the file is ignored."""
        user = tmp_path / "theme.toml"
        user.write_text("[colors\n")

        assert _load_toml_colors(user) is None
        assert capsys.readouterr().err == ""


class TestRichTheme:
    """Tests for Rich theme generation."""

    def test_rule_styles_present(self) -> None:
        """Each rule kind has a style."""
        theme = get_rich_theme(ThemeColors())
        for name in ("rule.directory", "rule.file", "rule.extension", "success", "error"):
            assert name in theme.styles

    def test_get_theme_is_cached(self) -> None:
        """get_theme returns the same instance on repeated calls."""
        assert isinstance(get_theme(), Theme)
        assert get_theme() is get_theme()
