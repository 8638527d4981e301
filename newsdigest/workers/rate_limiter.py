"""
Async token bucket rate limiter.

Dependencies: asyncio (stdlib)
System role: Paces calls to the external summarizer across a stage
"""

import asyncio
import time


class AsyncTokenBucket:
    """
    Token bucket shared by coroutines in one event loop.

    Tokens refill continuously at ``rate_per_second`` up to ``capacity``.
    ``acquire`` waits until a whole token is available, so sustained
    throughput never exceeds the configured rate.

    Usage:
        limiter = AsyncTokenBucket(rate_per_second=1 / 1.5, capacity=1)
        await limiter.acquire()
        response = await llm.ainvoke(messages)
    """

    def __init__(self, rate_per_second: float, capacity: int = 1) -> None:
        """
        Initialize limiter with a full bucket.

        Args:
            rate_per_second: Refill rate in tokens per second (> 0)
            capacity: Maximum burst size (>= 1)

        Raises:
            ValueError: If rate or capacity is out of range
        """
        if rate_per_second <= 0:
            raise ValueError("rate_per_second must be positive")
        if capacity < 1:
            raise ValueError("capacity must be at least 1")

        self._rate = rate_per_second
        self._capacity = float(capacity)
        self._tokens = float(capacity)
        self._updated_at = time.monotonic()
        self._lock = asyncio.Lock()

    @property
    def rate_per_second(self) -> float:
        return self._rate

    @property
    def capacity(self) -> int:
        return int(self._capacity)

    def _refill(self) -> None:
        now = time.monotonic()
        elapsed = now - self._updated_at
        self._tokens = min(self._capacity, self._tokens + elapsed * self._rate)
        self._updated_at = now

    async def acquire(self) -> float:
        """
        Take one token, waiting for it if necessary.

        Waiters are served in arrival order.

        Returns:
            float: Seconds spent waiting
        """
        waited = 0.0
        async with self._lock:
            self._refill()
            while self._tokens < 1:
                delay = (1 - self._tokens) / self._rate
                await asyncio.sleep(delay)
                waited += delay
                self._refill()
            self._tokens -= 1
        return waited
