"""Fake Clock implementation for testing."""

from datetime import UTC, datetime

from aicraft.integrations.clock.abc import Clock

DEFAULT_FAKE_NOW = datetime(2025, 1, 1, 12, 0, 0, tzinfo=UTC)


class FakeClock(Clock):
    """Clock that returns constructor-supplied instants.

    Successive now() calls return the queued instants in order; the last one
    repeats once the queue is exhausted.
    """

    def __init__(self, *instants: datetime) -> None:
        self._instants = list(instants) if instants else [DEFAULT_FAKE_NOW]
        self._calls = 0

    @property
    def call_count(self) -> int:
        """Number of now() calls made. For test assertions only."""
        return self._calls

    def now(self) -> datetime:
        index = min(self._calls, len(self._instants) - 1)
        self._calls += 1
        return self._instants[index]
