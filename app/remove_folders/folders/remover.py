"""Folder deletion operator.

Removes matched folders one at a time with dry-run support. A matched
symlink to a directory is unlinked; real directories are removed with
their contents. A failure on one folder is recorded and the remaining
folders are still attempted.
"""

import logging
import shutil
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

RemoveTree = Callable[[Path], None]


@dataclass(frozen=True, slots=True)
class RemovalResult:
    """Result of a single folder removal.

    Attributes:
        path: Folder that was operated on.
        success: Whether the folder was removed.
        error: Error message if the removal failed, None otherwise.
        dry_run: Whether this was a dry-run (no actual deletion).
    """

    path: Path
    success: bool
    error: str | None = None
    dry_run: bool = False

    @property
    def failed(self) -> bool:
        """Check if the removal was attempted and failed."""
        return not self.success


class FolderRemover:
    """Deletes folders and their contents recursively.

    Attributes:
        _dry_run: If True, report what would be removed without removing it.
        _remove_tree: Primitive that deletes a directory tree.
    """

    def __init__(self, dry_run: bool = False, remove_tree: RemoveTree | None = None) -> None:
        """Initialize the FolderRemover.

        Args:
            dry_run: If True, report what would be removed without removing it.
            remove_tree: Recursive deletion primitive. Defaults to shutil.rmtree.
        """
        self._dry_run = dry_run
        self._remove_tree = remove_tree if remove_tree is not None else shutil.rmtree

    @property
    def dry_run(self) -> bool:
        """Check if remover is in dry-run mode."""
        return self._dry_run

    def remove(
        self,
        paths: list[Path],
        on_start: Callable[[int, int, Path], None] | None = None,
        on_result: Callable[[RemovalResult], None] | None = None,
    ) -> list[RemovalResult]:
        """Remove each folder in order and return one result per path.

        Args:
            paths: Folders to remove.
            on_start: Called with (1-based index, total, path) before each attempt.
            on_result: Called with each result as soon as it is known.

        Returns:
            List of RemovalResult, one per input path, in input order.
        """
        results: list[RemovalResult] = []
        total = len(paths)

        for index, path in enumerate(paths, start=1):
            if on_start is not None:
                on_start(index, total, path)
            result = self._remove_single(path)
            if on_result is not None:
                on_result(result)
            results.append(result)

        return results

    def _remove_single(self, path: Path) -> RemovalResult:
        """Remove a single folder tree.

        Args:
            path: Folder to remove.

        Returns:
            RemovalResult indicating success or failure.
        """
        if self._dry_run:
            logger.info("Dry-run: would remove %s", path)
            return RemovalResult(path=path, success=True, dry_run=True)

        try:
            # Links are removed themselves, never the tree they point to
            if path.is_symlink():
                path.unlink()
            else:
                self._remove_tree(path)
        except OSError as e:
            logger.warning("Failed to remove %s: %s", path, e)
            return RemovalResult(path=path, success=False, error=str(e))

        logger.info("Removed %s", path)
        return RemovalResult(path=path, success=True)
