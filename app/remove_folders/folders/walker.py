"""Directory tree walker that collects folders by exact name.

The walk is depth-first and follows the order in which the enumeration
primitive yields entries. Once a directory's child matches the target
name, that child is not descended into and the remaining children of the
directory are skipped. Matches already collected from earlier siblings
are kept.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from remove_folders.folders.errors import SearchRootError, TraversalError

logger = logging.getLogger(__name__)

ListDir = Callable[[Path], Iterable[Path]]
MatchCallback = Callable[[Path], None]


def _iterdir(directory: Path) -> Iterable[Path]:
    return directory.iterdir()


def _is_dir(path: Path) -> bool:
    """Check if a path is a directory, following symlinks.

    Metadata errors (e.g. permission denied on stat) count as "not a directory".
    """
    try:
        return path.is_dir()
    except OSError:
        return False


def canonicalize_base_folder(base_folder: str | Path) -> Path:
    """Resolve user input to a canonical absolute path.

    Args:
        base_folder: Directory to search, as given on the command line.

    Returns:
        Canonical absolute path. Resolution is strict, so the path exists.

    Raises:
        SearchRootError: If the path cannot be resolved.
    """
    try:
        return Path(base_folder).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise SearchRootError(str(e)) from e


def require_directory(root: Path) -> Path:
    """Check that a canonical path can be searched.

    Raises:
        SearchRootError: If the path is not a directory.
    """
    if not root.is_dir():
        msg = f"{root} is not a directory."
        raise SearchRootError(msg)
    return root


def resolve_search_root(base_folder: str | Path) -> Path:
    """Resolve user input to an absolute, existing directory.

    Raises:
        SearchRootError: If the path cannot be resolved or is not a directory.
    """
    return require_directory(canonicalize_base_folder(base_folder))


def _open_directory(directory: Path, list_dir: ListDir) -> Iterator[Path]:
    logger.debug("Scanning %s", directory)
    try:
        return iter(list_dir(directory))
    except OSError as e:
        msg = f"Cannot read directory {directory}: {e}"
        raise TraversalError(directory, msg) from e


def find_folders(
    root: Path,
    target_name: str,
    *,
    list_dir: ListDir = _iterdir,
    on_match: MatchCallback | None = None,
) -> list[Path]:
    """Collect directories named ``target_name`` beneath ``root``.

    Directories still waiting to be read are kept on an explicit stack
    of entry iterators, so tree depth is not limited by the interpreter's
    recursion limit.

    Args:
        root: Directory to search. A non-directory yields no matches.
        target_name: Exact base name to look for.
        list_dir: Enumeration primitive returning the entries of a directory.
        on_match: Called with each matching path as soon as it is found.

    Returns:
        Matching directory paths in traversal order.

    Raises:
        TraversalError: If any directory cannot be enumerated. The walk
            is abandoned and no partial result is returned.
    """
    matches: list[Path] = []
    if not _is_dir(root):
        return matches

    pending: list[tuple[Path, Iterator[Path]]] = [(root, _open_directory(root, list_dir))]

    while pending:
        directory, entries = pending[-1]
        try:
            entry = next(entries, None)
        except OSError as e:
            msg = f"Cannot read directory {directory}: {e}"
            raise TraversalError(directory, msg) from e

        if entry is None:
            pending.pop()
            continue

        if not _is_dir(entry):
            continue

        if entry.name == target_name:
            logger.info("Found folder to remove: %s", entry)
            matches.append(entry)
            if on_match is not None:
                on_match(entry)
            # First match ends this directory level
            pending.pop()
            continue

        pending.append((entry, _open_directory(entry, list_dir)))

    return matches
