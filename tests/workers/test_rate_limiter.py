"""
Test suite for AsyncTokenBucket.

System role: Verification of summarizer call pacing
"""

import asyncio
import time

import pytest

from newsdigest.workers.rate_limiter import AsyncTokenBucket


class TestAsyncTokenBucket:
    """Test suite for AsyncTokenBucket."""

    @pytest.mark.parametrize("rate,capacity", [(0, 1), (-1, 1), (1, 0)])
    def test_invalid_arguments_should_raise(self, rate, capacity) -> None:
        with pytest.raises(ValueError):
            AsyncTokenBucket(rate_per_second=rate, capacity=capacity)

    @pytest.mark.asyncio
    async def test_burst_should_not_wait(self) -> None:
        limiter = AsyncTokenBucket(rate_per_second=1, capacity=3)

        waits = [await limiter.acquire() for _ in range(3)]

        assert waits == [0.0, 0.0, 0.0]

    @pytest.mark.asyncio
    async def test_calls_beyond_capacity_should_be_paced(self) -> None:
        """Test the third call at 20/s with capacity 1 waits at least ~0.1s overall."""
        # Arrange
        limiter = AsyncTokenBucket(rate_per_second=20, capacity=1)
        started = time.monotonic()

        # Act
        for _ in range(3):
            await limiter.acquire()

        # Assert
        assert time.monotonic() - started >= 0.09

    @pytest.mark.asyncio
    async def test_concurrent_waiters_should_share_the_rate(self) -> None:
        limiter = AsyncTokenBucket(rate_per_second=50, capacity=1)
        started = time.monotonic()

        await asyncio.gather(*(limiter.acquire() for _ in range(4)))

        # 1 immediate token plus 3 refills at 50/s
        assert time.monotonic() - started >= 0.055

    def test_properties(self) -> None:
        limiter = AsyncTokenBucket(rate_per_second=0.5, capacity=2)

        assert limiter.rate_per_second == 0.5
        assert limiter.capacity == 2
