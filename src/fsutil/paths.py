"""Home directory expansion."""

import os
import sys

from fsutil.exceptions import HomeDirNotFoundError
from fsutil.exceptions import UnsupportedExpansionError

HOME_MARKER = "~"
SEPARATORS = ("/", "\\")
_PLATFORM_SEPARATORS = os.sep + (os.altsep or "")


def user_home_dir() -> str:
    """Get the current user's home directory from the environment.

    Unlike Path.home(), there is no fallback to the password database, so
    an unset HOME (USERPROFILE on Windows) is an error.

    Raises:
        HomeDirNotFoundError: If the variable is unset or empty
    """
    env = "USERPROFILE" if sys.platform == "win32" else "HOME"
    home = os.environ.get(env, "")
    if not home:
        raise HomeDirNotFoundError(f"${env} is not defined")
    return home


def expand_home(path: str | os.PathLike[str]) -> str:
    """Expand a leading ~ to the current user's home directory.

    Args:
        path: Path to expand

    Returns:
        Path with ~ replaced by the home directory, or path unchanged if it
        does not start with ~

    Raises:
        UnsupportedExpansionError: If path starts with ~user
        HomeDirNotFoundError: If the home directory cannot be determined
    """
    path = os.fspath(path)
    if not path.startswith(HOME_MARKER):
        return path

    rest = path[len(HOME_MARKER) :]
    if rest and not rest.startswith(SEPARATORS):
        raise UnsupportedExpansionError(
            f"Cannot expand user-specific home dir: {path}"
        )

    home = user_home_dir()
    return os.path.normpath(os.path.join(home, rest.lstrip(_PLATFORM_SEPARATORS)))
