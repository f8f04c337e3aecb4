"""Data models for fsutil."""

from dataclasses import dataclass
from datetime import UTC
from datetime import datetime


@dataclass(frozen=True)
class FileChange:
    """Result of comparing a file's modification time to a recorded one."""

    mod_time: int  # Modification time in nanoseconds since the epoch
    changed: bool  # True if mod_time differs from the recorded value

    @property
    def modified_at(self) -> datetime:
        """Get mod_time as an aware UTC datetime (microsecond precision)."""
        seconds, nanos = divmod(self.mod_time, 1_000_000_000)
        return datetime.fromtimestamp(seconds, tz=UTC).replace(
            microsecond=nanos // 1000
        )
