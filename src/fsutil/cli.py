"""Command-line interface for fsutil."""

from pathlib import Path
from typing import Annotated

import typer

from fsutil import __version__
from fsutil.dirs import dir_empty
from fsutil.dirs import dir_exists
from fsutil.dirs import dir_writable
from fsutil.files import file_changed
from fsutil.files import file_exists
from fsutil.output import print_check
from fsutil.output import print_error
from fsutil.output import print_file_change
from fsutil.paths import expand_home

app = typer.Typer(help="Filesystem inspection and preparation helpers")

# Exit status for failed operations; 0 and 1 are the answers of predicates
ERROR_EXIT = 2

Quiet = Annotated[
    bool, typer.Option("--quiet", "-q", help="Only set the exit status")
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"fsutil {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
) -> None:
    """Filesystem inspection and preparation helpers."""
    pass


def _answer(result: bool, message: str, quiet: bool) -> None:
    if not quiet:
        print_check(message, result)
    raise typer.Exit(0 if result else 1)


@app.command()
def empty(
    directory: Annotated[str, typer.Argument(help="Directory to check")],
    quiet: Quiet = False,
) -> None:
    """Exit 0 if DIRECTORY has no entries, 1 otherwise."""
    try:
        result = dir_empty(directory)
    except OSError as e:
        print_error(e)
        raise typer.Exit(ERROR_EXIT) from None
    _answer(result, f"{directory} is {'empty' if result else 'not empty'}", quiet)


@app.command()
def exists(
    directory: Annotated[str, typer.Argument(help="Directory to check")],
    quiet: Quiet = False,
) -> None:
    """Exit 0 if DIRECTORY exists, 1 if nothing is there."""
    try:
        result = dir_exists(directory)
    except (OSError, ValueError) as e:
        print_error(e)
        raise typer.Exit(ERROR_EXIT) from None
    _answer(result, f"{directory} {'exists' if result else 'does not exist'}", quiet)


@app.command()
def writable(
    directory: Annotated[str, typer.Argument(help="Directory to check or create")],
    quiet: Quiet = False,
) -> None:
    """Make sure DIRECTORY is writable, creating it if missing."""
    try:
        dir_writable(directory)
    except (OSError, ValueError) as e:
        print_error(e)
        raise typer.Exit(ERROR_EXIT) from None
    _answer(True, f"{directory} is writable", quiet)


@app.command()
def expand(
    path: Annotated[str, typer.Argument(help="Path starting with ~")],
) -> None:
    """Print PATH with a leading ~ expanded to the home directory."""
    try:
        expanded = expand_home(path)
    except (ValueError, RuntimeError) as e:
        print_error(e)
        raise typer.Exit(ERROR_EXIT) from None
    typer.echo(expanded)


@app.command()
def changed(
    file: Annotated[Path, typer.Argument(help="File to check")],
    since: Annotated[
        int | None,
        typer.Option(help="Previously printed modification time (nanoseconds)"),
    ] = None,
    quiet: Quiet = False,
) -> None:
    """Print the modification time of FILE; exit 0 if it differs from --since."""
    try:
        change = file_changed(file, since)
    except OSError as e:
        print_error(e)
        raise typer.Exit(ERROR_EXIT) from None

    if quiet:
        typer.echo(f"{change.mod_time}")
    else:
        print_file_change(str(file), change)
    raise typer.Exit(0 if change.changed else 1)


@app.command("file-exists")
def file_exists_command(
    path: Annotated[str, typer.Argument(help="Path to check")],
    quiet: Quiet = False,
) -> None:
    """Exit 0 if anything exists at PATH, 1 otherwise."""
    result = file_exists(path)
    _answer(result, f"{path} {'exists' if result else 'does not exist'}", quiet)


def main() -> None:
    """Main entry point for the fsutil CLI."""
    app()


if __name__ == "__main__":
    main()
