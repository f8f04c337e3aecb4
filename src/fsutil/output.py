"""Output formatting for fsutil commands."""

import typer

from fsutil.models import FileChange


def print_check(message: str, ok: bool) -> None:
    """Print the outcome of a predicate check.

    Args:
        message: Description of the outcome
        ok: True for a positive outcome (green), False otherwise (dim)
    """
    if ok:
        typer.secho(f"✓ {message}", fg=typer.colors.GREEN, bold=True)
    else:
        typer.secho(f"✗ {message}", fg=typer.colors.BRIGHT_BLACK)


def print_file_change(path: str, change: FileChange) -> None:
    """Print modification time of a file and whether it changed."""
    typer.echo(f"{change.mod_time}")
    stamp = change.modified_at.isoformat()
    if change.changed:
        typer.secho(f"✓ {path} changed ({stamp})", fg=typer.colors.GREEN, bold=True)
    else:
        typer.secho(f"✗ {path} unchanged ({stamp})", fg=typer.colors.BRIGHT_BLACK)


def print_error(error: Exception) -> None:
    """Print an error to stderr.

    Args:
        error: Exception raised by an fsutil operation
    """
    if isinstance(error, PermissionError):
        message = f"Permission denied: {error}"
    elif isinstance(error, NotADirectoryError):
        message = f"{error}"
    elif isinstance(error, OSError):
        message = f"Filesystem error: {error}"
    else:
        message = f"Error: {error}"
    typer.secho(f"✗ {message}", fg=typer.colors.RED, bold=True, err=True)
