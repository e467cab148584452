"""CLI package for remove-folders.

This package contains the Typer application.
"""

from remove_folders.cli.main import app

__all__ = ["app"]
