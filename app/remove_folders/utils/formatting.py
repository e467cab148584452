"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from remove_folders.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import).
# Soft wrapping keeps long paths on a single line.
console = Console(theme=get_theme(), color_system=_detect_color_system(), soft_wrap=True)
err_console = Console(
    theme=get_theme(), stderr=True, color_system=_detect_color_system(), soft_wrap=True
)


def format_path(path: object) -> str:
    """Format a filesystem path for Rich output, escaping markup characters."""
    return f"[path]{escape(str(path))}[/]"


def configure_logging(verbose: bool = False) -> None:
    """Route log records to the stderr console.

    Without ``verbose`` only errors are logged; per-folder failures are
    already reported on the console.

    Args:
        verbose: If True, log at DEBUG level.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
