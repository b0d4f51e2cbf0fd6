"""Fake Time implementation for testing.

FakeTime is an in-memory implementation that tracks sleep() calls without
actually sleeping, enabling fast tests.
"""

from sdd_runner.integrations.time.abc import Time


class FakeTime(Time):
    """In-memory fake implementation that tracks calls without sleeping.

    The clock only moves when sleep() is called, so durations measured across
    a fake sleep equal the requested delay exactly.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(self, *, start: float = 1000.0) -> None:
        """Create FakeTime with empty call tracking.

        Args:
            start: Initial monotonic clock reading
        """
        self._now = start
        self._sleep_calls: list[float] = []

    @property
    def sleep_calls(self) -> list[float]:
        """Get the list of sleep() calls that were made.

        Returns list of seconds values passed to sleep().

        This property is for test assertions only.
        """
        return self._sleep_calls.copy()

    def monotonic(self) -> float:
        return self._now

    async def sleep(self, seconds: float) -> None:
        """Track sleep call and advance the clock without sleeping.

        Args:
            seconds: Number of seconds that would have been slept
        """
        self._sleep_calls.append(seconds)
        self._now += seconds
