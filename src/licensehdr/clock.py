"""Time sources used to date files without commit history."""

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """Provides the current time."""

    def now(self) -> datetime:
        """Get the current time."""
        ...


class SystemClock:
    """Clock backed by the system time, in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Clock frozen at a given Unix timestamp.

    Useful for reproducible runs and for tests spanning year boundaries.
    """

    def __init__(self, timestamp: int = 0):
        self.timestamp = timestamp

    def now(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)
