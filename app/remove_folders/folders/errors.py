"""Exceptions raised while locating folders to remove."""

from pathlib import Path


class RemoveFoldersError(Exception):
    """Base exception for folder search failures."""


class SearchRootError(RemoveFoldersError):
    """Raised when the base folder cannot be used as a search root."""


class TraversalError(RemoveFoldersError):
    """Raised when a directory cannot be enumerated during the walk.

    Attributes:
        path: Directory whose entries could not be listed.
    """

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path
