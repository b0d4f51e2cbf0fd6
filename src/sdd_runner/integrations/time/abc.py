"""Time operations abstraction for testing.

This module provides an ABC for clock reads and sleeps so that durations and
simulated delays can be tested without actually waiting.
"""

from abc import ABC, abstractmethod


class Time(ABC):
    """Abstract time operations for dependency injection."""

    @abstractmethod
    def monotonic(self) -> float:
        """Return a monotonic clock reading in seconds."""
        ...

    @abstractmethod
    async def sleep(self, seconds: float) -> None:
        """Suspend the caller for the specified number of seconds.

        Args:
            seconds: Number of seconds to sleep
        """
        ...

    def elapsed_ms(self, started_at: float) -> int:
        """Whole milliseconds since started_at, never negative."""
        return max(0, int((self.monotonic() - started_at) * 1000))
