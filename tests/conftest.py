"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """Create directories (and optional files) under a fresh base folder.

    Entries ending in "/" are directories; anything else is a file whose
    parent directories are created as needed.
    """

    def _make_tree(*entries: str, base: str = "base") -> Path:
        root = tmp_path / base
        root.mkdir()
        for entry in entries:
            target = root / entry
            if entry.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text("content")
        return root

    return _make_tree


@pytest.fixture
def sorted_listing() -> Callable[[Path], list[Path]]:
    """Enumeration primitive with a stable, name-sorted order."""

    def _list_dir(directory: Path) -> list[Path]:
        return sorted(directory.iterdir(), key=lambda p: p.name)

    return _list_dir
