"""Shared fixtures for fsutil tests."""

import os
import sys

import pytest

HOME_ENV = "USERPROFILE" if sys.platform == "win32" else "HOME"

# Permission bits are ignored on Windows and by root
needs_permissions = pytest.mark.skipif(
    sys.platform == "win32" or os.geteuid() == 0,
    reason="permission bits are not enforced",
)


@pytest.fixture
def restore_mode():
    """Chmod paths for a test and restore full access afterwards."""
    changed = []

    def chmod(path, mode):
        changed.append(path)
        os.chmod(path, mode)

    yield chmod

    for path in reversed(changed):
        os.chmod(path, 0o777)
