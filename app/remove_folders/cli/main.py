"""Main CLI application entry point.

Defines the Typer application: search a base folder for directories with
an exact name, confirm, then remove them.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from remove_folders import APP_NAME, __version__
from remove_folders.folders.errors import SearchRootError, TraversalError
from remove_folders.folders.remover import FolderRemover, RemovalResult
from remove_folders.folders.walker import (
    canonicalize_base_folder,
    find_folders,
    require_directory,
)
from remove_folders.utils.formatting import (
    configure_logging,
    console,
    format_path,
    print_error,
    print_info,
    print_success,
    print_warning,
)

app = typer.Typer(
    name=APP_NAME,
    help="Remove folders from a directory.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"{APP_NAME} version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    base_folder: Annotated[
        str,
        typer.Argument(help="The path to the directory to search."),
    ],
    folder: Annotated[
        str,
        typer.Argument(help="The name of the folder to remove."),
    ],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="Show what would be removed."),
    ] = False,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Exit with status 1 if the search fails or any folder cannot be removed.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Find every folder named FOLDER under BASE_FOLDER and remove it.

    Once a matching folder is found in a directory, it is not searched
    further and the rest of that directory is skipped.

    Errors are reported but the exit status stays 0 unless --strict is given.

    Examples:
        remove-folders ~/projects node_modules        # Search, confirm, remove
        remove-folders ~/projects target --dry-run    # Only list matches
        remove-folders . __pycache__ --yes            # Remove without asking
    """
    configure_logging(verbose)

    console.print(APP_NAME)
    console.print(f"Version: {__version__}")

    try:
        root = canonicalize_base_folder(base_folder)
        console.print(f"Searching {format_path(root)} for folders named: {escape(folder)}")
        console.print()
        require_directory(root)
    except SearchRootError as e:
        print_error(escape(str(e)))
        _finish(strict, failed=True)
        return

    try:
        matches = find_folders(root, folder, on_match=_print_match)
    except TraversalError as e:
        print_error(escape(str(e)))
        _finish(strict, failed=True)
        return

    if not matches:
        print_info("No folders found to remove, exiting.")
        return

    console.print(f"Found {len(matches)} folders to remove:")

    if dry_run:
        FolderRemover(dry_run=True).remove(matches, on_result=_print_result)
        print_info("\nDry-run mode: No folders were removed.")
        return

    if not yes and not _confirm_removal():
        console.print()
        print_info("Exiting without removing folders.")
        return

    console.print()
    console.print("Removing folders...")

    remover = FolderRemover()
    results = remover.remove(matches, on_start=_print_start, on_result=_print_result)

    _print_summary(results)
    console.print("Done.")

    _finish(strict, failed=any(r.failed for r in results))


# === Private helper functions ===


def _confirm_removal() -> bool:
    """Ask once for consent; only "y" (any case, surrounding blanks ignored) confirms."""
    console.print()
    try:
        answer = console.input("Are you sure you want to remove these folders (y/n)?: ")
    except EOFError:
        answer = ""
    return answer.strip().lower() == "y"


def _finish(strict: bool, failed: bool) -> None:
    """Exit with status 1 in strict mode when something went wrong."""
    if strict and failed:
        raise typer.Exit(code=1)


def _print_match(path: Path) -> None:
    console.print(f"Found folder to remove: [match]{escape(str(path))}[/]")


def _print_start(index: int, total: int, path: Path) -> None:
    console.print(f"Removing folder {index:2} of {total:2}: {format_path(path)}")


def _print_result(result: RemovalResult) -> None:
    if result.dry_run:
        console.print(f"Would remove folder: {format_path(result.path)}")
    elif result.success:
        console.print(f"Removed folder: [removed]{escape(str(result.path))}[/]")
    else:
        print_error(
            f"Error removing folder {escape(str(result.path))}: "
            f"{escape(result.error or 'Unknown error')}"
        )


def _print_summary(results: list[RemovalResult]) -> None:
    success_count = sum(1 for r in results if r.success)
    fail_count = sum(1 for r in results if r.failed)

    if fail_count:
        print_warning(f"{success_count} removed, {fail_count} failed")
    else:
        print_success(f"All {success_count} folder(s) removed.")


if __name__ == "__main__":
    app()
