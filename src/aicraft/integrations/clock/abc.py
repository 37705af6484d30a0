"""Clock abstraction for testing.

Install records carry the time they were written. Going through a Clock lets
tests pin those timestamps.
"""

from abc import ABC, abstractmethod
from datetime import UTC, datetime


class Clock(ABC):
    """Abstract clock for dependency injection."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as an aware UTC datetime."""
        ...

    def timestamp(self) -> str:
        """Return now() formatted for install records."""
        return format_timestamp(self.now())


def format_timestamp(moment: datetime) -> str:
    """Format a datetime as ISO-8601 UTC with milliseconds, e.g. 2025-01-02T03:04:05.678Z."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
