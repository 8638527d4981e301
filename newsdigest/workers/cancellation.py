"""
Cooperative cancellation for long-running worker loops.

Dependencies: asyncio (stdlib)
System role: Shutdown signal shared by every batch coordinator in a process
"""

import asyncio
import contextlib


class CancellationToken:
    """
    One-shot stop signal backed by an asyncio.Event.

    Coordinators check ``cancelled`` between batches and wait through
    ``sleep`` so a stop request cuts any backoff short. In-flight batches
    are never interrupted.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()

    def cancel(self) -> None:
        """Request every holder of this token to stop."""
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    async def sleep(self, seconds: float) -> bool:
        """
        Wait up to ``seconds`` or until cancelled, whichever comes first.

        Returns:
            bool: True if the token was cancelled during the wait
        """
        if seconds <= 0:
            return self.cancelled
        with contextlib.suppress(asyncio.TimeoutError):
            await asyncio.wait_for(self._event.wait(), timeout=seconds)
        return self.cancelled
