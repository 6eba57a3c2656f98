"""Token-bucket rate limiter shared by every outbound Riot API call."""
import asyncio
import time
from typing import Awaitable, Callable, Optional
import logging

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
Sleeper = Callable[[float], Awaitable[None]]


class TokenBucket:
    """
    Fixed-capacity bucket refilled continuously at ``refill_rate`` tokens/s.

      - Starts full, so a cold start may burst ``capacity`` requests.
      - ``acquire()`` takes one token, polling every ``poll_interval``
        seconds while the bucket is empty.
      - Acquirers serialize on an asyncio.Lock; whoever holds it waits for
        the next token, everyone else queues behind.

    ``clock`` and ``sleep`` are injectable so tests can drive time by hand.
    """

    def __init__(
        self,
        capacity: int = 20,
        refill_rate: float = 10.0,
        poll_interval: float = 0.1,
        clock: Optional[Clock] = None,
        sleep: Optional[Sleeper] = None,
    ):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        if refill_rate <= 0:
            raise ValueError("refill_rate must be positive")
        self.capacity = capacity
        self.refill_rate = refill_rate
        self.poll_interval = poll_interval
        self._clock: Clock = clock or time.monotonic
        self._sleep: Sleeper = sleep or asyncio.sleep

        self._tokens: float = float(capacity)
        self._last_refill: float = self._clock()
        self._lock = asyncio.Lock()

    def _refill(self) -> None:
        now = self._clock()
        elapsed = max(0.0, now - self._last_refill)
        self._tokens = min(float(self.capacity), self._tokens + elapsed * self.refill_rate)
        self._last_refill = now

    async def acquire(self) -> None:
        async with self._lock:
            waited = 0
            while True:
                self._refill()
                if self._tokens >= 1:
                    self._tokens -= 1
                    if waited:
                        logger.debug(f"Rate limit: token acquired after {waited} polls")
                    return
                waited += 1
                await self._sleep(self.poll_interval)

    def available(self) -> float:
        """Tokens currently available (refills first)."""
        self._refill()
        return self._tokens

    async def reset(self) -> None:
        """Refill the bucket to capacity."""
        async with self._lock:
            self._tokens = float(self.capacity)
            self._last_refill = self._clock()
