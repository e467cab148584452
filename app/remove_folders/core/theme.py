"""Console colors for the remove-folders CLI.

Colors come from the bundled data/theme.toml and are validated once
before being turned into a Rich theme.
"""

import logging
import tomllib
from functools import lru_cache
from importlib import resources
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints, ValidationError
from rich.theme import Theme

logger = logging.getLogger(__name__)

HexColor = Annotated[
    str, StringConstraints(strip_whitespace=True, pattern=r"^#([0-9a-fA-F]{3}){1,2}$")
]


class ThemeColors(BaseModel):
    """Colors used by the CLI output, as #RGB or #RRGGBB hex codes."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    text: HexColor = "#ffffff"
    info: HexColor = "#0ec1c8"
    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"
    match: HexColor = "#c1ff62"
    removed: HexColor = "#f53263"


def load_bundled_colors() -> ThemeColors:
    """Load the bundled color table.

    A missing or invalid bundled file means a broken installation; the
    built-in defaults are used instead.
    """
    theme_file = resources.files("remove_folders.data").joinpath("theme.toml")
    try:
        data = tomllib.loads(theme_file.read_text(encoding="utf-8"))
        return ThemeColors(**data.get("colors", {}))
    except (OSError, tomllib.TOMLDecodeError, ValidationError) as e:
        logger.error("Failed to load bundled theme, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors) -> Theme:
    """Map theme colors to the Rich styles printed by the CLI."""
    return Theme(
        {
            "info": colors.info,
            "success": colors.success,
            "warning": colors.warning,
            "error": f"bold {colors.error}",
            "match": colors.match,
            "removed": colors.removed,
            "path": f"bold {colors.text}",
        }
    )


@lru_cache(maxsize=1)
def get_theme() -> Theme:
    """Get the Rich theme, built once per process."""
    return get_rich_theme(load_bundled_colors())
