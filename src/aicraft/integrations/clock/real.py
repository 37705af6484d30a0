"""Real clock implementation using the system time."""

from datetime import UTC, datetime

from aicraft.integrations.clock.abc import Clock


class RealClock(Clock):
    """Production implementation using datetime.now()."""

    def now(self) -> datetime:
        return datetime.now(UTC)
