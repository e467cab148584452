"""Unit tests for theme module.

Tests for bundled color loading and Rich theme generation.
"""

from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError
from remove_folders.core.theme import ThemeColors, get_rich_theme, get_theme, load_bundled_colors
from rich.theme import Theme


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_accepts_short_and_long_hex(self) -> None:
        """Both #RGB and #RRGGBB are valid."""
        colors = ThemeColors(match="#abc", removed=" #A1B2C3 ")

        assert colors.match == "#abc"
        assert colors.removed == "#A1B2C3"

    @pytest.mark.parametrize("value", ["ffffff", "#ff", "#gggggg", "red"])
    def test_rejects_invalid_hex(self, value: str) -> None:
        """Anything but a hex code is rejected."""
        with pytest.raises(ValidationError):
            ThemeColors(error=value)

    def test_extra_fields_forbidden(self) -> None:
        """Unknown color names are rejected."""
        with pytest.raises(ValidationError):
            ThemeColors(package_manual="#ffffff")  # type: ignore[call-arg]


class TestLoadBundledColors:
    """Tests for load_bundled_colors."""

    def test_bundled_file_matches_defaults(self) -> None:
        """The shipped theme.toml is valid and equals the built-in defaults."""
        assert load_bundled_colors() == ThemeColors()

    def test_user_config_directory_is_ignored(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A theme.toml in the user config directory has no effect."""
        override = tmp_path / "remove-folders" / "theme.toml"
        override.parent.mkdir()
        override.write_text('[colors]\nmatch = "#000000"\n')
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        monkeypatch.setenv("HOME", str(tmp_path))

        assert load_bundled_colors().match == ThemeColors().match

    def test_invalid_bundled_file_falls_back(self) -> None:
        """A corrupted bundled file yields the defaults instead of failing."""
        with patch(
            "remove_folders.core.theme.tomllib.loads",
            return_value={"colors": {"info": 1}},
        ):
            assert load_bundled_colors() == ThemeColors()


class TestGetRichTheme:
    """Tests for Rich theme generation."""

    def test_defines_every_style_the_cli_prints(self) -> None:
        """Styles used in console markup are all defined."""
        theme = get_rich_theme(ThemeColors())

        for style in ("info", "success", "warning", "error", "match", "removed", "path"):
            assert style in theme.styles

    def test_get_theme_is_cached(self) -> None:
        """The theme is built once per process."""
        assert isinstance(get_theme(), Theme)
        assert get_theme() is get_theme()
