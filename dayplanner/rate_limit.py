import asyncio
import logging
import time
from collections import deque
from typing import Awaitable, Callable, Deque

logger = logging.getLogger(__name__)


class RateLimiter:
    """Allows at most `limit` calls in any trailing `window` seconds.

    The check and the append in `wait_for_slot` are never separated by an
    await, so a single event loop needs no lock.
    """

    def __init__(
        self,
        limit: int,
        window: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.limit = limit
        self.window = window
        self._clock = clock
        self._sleep = sleep
        self._calls: Deque[float] = deque()

    def _evict(self, now: float) -> None:
        while self._calls and now - self._calls[0] >= self.window:
            self._calls.popleft()

    @property
    def pending(self) -> int:
        self._evict(self._clock())
        return len(self._calls)

    async def wait_for_slot(self) -> None:
        while True:
            now = self._clock()
            self._evict(now)
            if len(self._calls) < self.limit:
                self._calls.append(now)
                return
            wait_time = self.window - (now - self._calls[0])
            logger.info(f"Rate limit reached ({self.limit}/{self.window:g}s), waiting {wait_time:.2f}s")
            await self._sleep(wait_time)
