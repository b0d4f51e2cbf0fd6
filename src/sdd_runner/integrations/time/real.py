"""Real time implementation using the monotonic clock and asyncio.sleep()."""

import asyncio
import time

from sdd_runner.integrations.time.abc import Time


class RealTime(Time):
    """Production implementation using actual clock and sleep."""

    def monotonic(self) -> float:
        return time.monotonic()

    async def sleep(self, seconds: float) -> None:
        """Sleep for specified number of seconds using asyncio.sleep().

        Args:
            seconds: Number of seconds to sleep
        """
        await asyncio.sleep(seconds)
