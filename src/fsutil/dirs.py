"""Directory checks."""

import os
import stat
import tempfile

from fsutil.exceptions import DirectoryNotWritableError
from fsutil.exceptions import DirectoryPermissionError
from fsutil.exceptions import EmptyPathError

DIR_MODE = 0o775
PROBE_PREFIX = "writetest"


def dir_empty(path: str | os.PathLike[str]) -> bool:
    """Check if a directory is empty.

    Args:
        path: Directory to check

    Returns:
        True if the directory has no entries

    Raises:
        OSError: If the directory cannot be opened or listed (from scandir)
    """
    with os.scandir(path) as entries:
        return next(entries, None) is None


def dir_exists(path: str | os.PathLike[str]) -> bool:
    """Check if a directory exists.

    Args:
        path: Directory to check

    Returns:
        True if path is a directory, False if nothing exists at path

    Raises:
        EmptyPathError: If path is empty
        NotADirectoryError: If path exists but is not a directory
        OSError: If path cannot be stat'ed for any other reason
    """
    if not os.fspath(path):
        raise EmptyPathError("Directory not specified")

    try:
        st = os.stat(path)
    except FileNotFoundError:
        return False

    if not _is_dir(st):
        raise NotADirectoryError(f"Not a directory: {os.fspath(path)}")
    return True


def dir_writable(path: str | os.PathLike[str]) -> None:
    """Ensure a directory is writable, creating it if it does not exist.

    Writability is checked by creating and removing a probe file, never
    from permission bits.
    Missing directories are created without parents.

    Args:
        path: Directory to check or create

    Raises:
        EmptyPathError: If path is empty
        NotADirectoryError: If path exists but is not a directory
        DirectoryPermissionError: If creating the directory or probe file
            was denied
        DirectoryNotWritableError: If creating the directory or probe file
            failed for another reason
        OSError: If the probe file cannot be removed (from remove)
    """
    if not os.fspath(path):
        raise EmptyPathError("Directory not specified")

    try:
        st = os.stat(path)
    except FileNotFoundError:
        try:
            os.mkdir(path, DIR_MODE)
        except OSError as e:
            raise _not_writable(path, e) from e
        return
    except OSError as e:
        raise _not_writable(path, e) from e

    if not _is_dir(st):
        raise NotADirectoryError(f"Not a directory: {os.fspath(path)}")

    try:
        fd, probe_path = tempfile.mkstemp(prefix=PROBE_PREFIX, dir=path)
    except OSError as e:
        raise _not_writable(path, e) from e
    os.close(fd)
    os.remove(probe_path)


def _is_dir(st: os.stat_result) -> bool:
    return stat.S_ISDIR(st.st_mode)


def _not_writable(
    path: str | os.PathLike[str], cause: OSError
) -> DirectoryNotWritableError:
    """Build the error for a directory that cannot be created or written.

    PermissionError causes map to DirectoryPermissionError so callers can
    catch PermissionError regardless of which step failed.
    """
    error_cls = (
        DirectoryPermissionError
        if isinstance(cause, PermissionError)
        else DirectoryNotWritableError
    )
    return error_cls(
        cause.errno,
        f"Directory not writable: {cause.strerror}",
        os.fspath(path),
    )
