"""File checks."""

import os

from fsutil.models import FileChange


def file_changed(
    path: str | os.PathLike[str], mod_time: int | None = None
) -> FileChange:
    """Check if a file's modification time differs from a recorded one.

    Any difference counts, including a file that became older.

    Args:
        path: File to check
        mod_time: Previously recorded st_mtime_ns, or None if never seen

    Returns:
        FileChange with the current modification time and whether it changed

    Raises:
        OSError: If the file cannot be stat'ed (from stat)
    """
    current = os.stat(path).st_mtime_ns
    if current != mod_time:
        return FileChange(mod_time=current, changed=True)
    return FileChange(mod_time=mod_time, changed=False)


def file_exists(path: str | os.PathLike[str]) -> bool:
    """Check if anything exists at path.

    Only a missing entry gives False. Other stat failures, such as a
    parent directory without search permission, are reported as existing.
    """
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    except (OSError, ValueError):
        return True
    return True
