"""Custom exceptions for fsutil."""


class FsutilError(Exception):
    """Base exception for fsutil."""


class EmptyPathError(FsutilError, ValueError):
    """An empty path was given where a path is required."""


class DirectoryNotWritableError(FsutilError, OSError):
    """Directory could not be created or written to.

    Raised with the usual OSError arguments (errno, strerror, filename) and
    chained from the underlying failure.
    """


class DirectoryPermissionError(DirectoryNotWritableError, PermissionError):
    """Directory is not writable because permission was denied."""


class UnsupportedExpansionError(FsutilError, ValueError):
    """Path starts with ~user, which is not expanded."""


class HomeDirNotFoundError(FsutilError, RuntimeError):
    """Home directory of the current user could not be determined."""
