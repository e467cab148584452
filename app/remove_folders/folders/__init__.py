"""Folder search and removal.

This module provides the directory walker that collects folders by
name and the remover that deletes them.
"""

from remove_folders.folders.errors import RemoveFoldersError, SearchRootError, TraversalError
from remove_folders.folders.remover import FolderRemover, RemovalResult
from remove_folders.folders.walker import (
    canonicalize_base_folder,
    find_folders,
    require_directory,
    resolve_search_root,
)

__all__ = [
    "FolderRemover",
    "RemovalResult",
    "RemoveFoldersError",
    "SearchRootError",
    "TraversalError",
    "canonicalize_base_folder",
    "find_folders",
    "require_directory",
    "resolve_search_root",
]
