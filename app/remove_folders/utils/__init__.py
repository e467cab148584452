"""Utility modules for remove-folders.

This module exports commonly used utility functions.
"""

from remove_folders.utils.formatting import (
    configure_logging,
    console,
    err_console,
    format_path,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "configure_logging",
    "console",
    "err_console",
    "format_path",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
