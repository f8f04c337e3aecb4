"""Filesystem inspection and preparation helpers."""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version

from fsutil.dirs import dir_empty
from fsutil.dirs import dir_exists
from fsutil.dirs import dir_writable
from fsutil.files import file_changed
from fsutil.files import file_exists
from fsutil.models import FileChange
from fsutil.paths import expand_home
from fsutil.paths import user_home_dir

try:
    __version__ = version("fsutil")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "FileChange",
    "dir_empty",
    "dir_exists",
    "dir_writable",
    "expand_home",
    "file_changed",
    "file_exists",
    "user_home_dir",
]
