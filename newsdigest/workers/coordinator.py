"""
Batch coordinator.

Runs a pipeline stage as a loop of bounded batches with adaptive backoff:
idle after an empty batch, busy after a batch with work, error after a
batch that raised.

Dependencies: asyncio (stdlib), newsdigest.workers.cancellation
System role: Scheduling shell around each pipeline stage
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from newsdigest.workers.cancellation import CancellationToken

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BackoffPolicy:
    """Delays in seconds between batches."""

    idle_delay: float
    busy_delay: float
    error_delay: float

    def delay_for(self, processed: int | None) -> float:
        """
        Pick the wait after a batch.

        Args:
            processed: Rows selected by the batch, or None if it raised

        Returns:
            float: Seconds to wait before the next batch
        """
        if processed is None:
            return self.error_delay
        if processed == 0:
            return self.idle_delay
        return self.busy_delay


class PipelineStage(ABC):
    """One unit of repeated pipeline work."""

    name: str = "stage"

    @abstractmethod
    async def process_batch(self) -> int:
        """
        Select and process one bounded batch.

        Per-item failures are handled inside the stage. Anything raised
        here is a batch-level failure.

        Returns:
            int: Number of items selected
        """
        ...


class BatchCoordinator:
    """
    Drive a PipelineStage until cancelled.

    Usage:
        token = CancellationToken()
        coordinator = BatchCoordinator(stage, BackoffPolicy(10, 2, 15))
        await coordinator.run(token)
    """

    def __init__(self, stage: PipelineStage, backoff: BackoffPolicy) -> None:
        self.stage = stage
        self.backoff = backoff

    async def run_once(self) -> int | None:
        """
        Run a single batch.

        Returns:
            int | None: Items selected, or None if the batch raised
        """
        try:
            processed = await self.stage.process_batch()
        except Exception as e:
            logger.error(
                f"{__name__}:run_once - Batch failed: {type(e).__name__}: {e}",
                extra={"stage": self.stage.name},
                exc_info=True,
            )
            return None

        if processed:
            logger.info(
                f"{__name__}:run_once - Processed batch of {processed}",
                extra={"stage": self.stage.name, "processed": processed},
            )
        return processed

    async def run(self, token: CancellationToken) -> None:
        """
        Loop batches until the token is cancelled.

        The token is checked before each batch; a batch that already
        started always runs to completion.

        Args:
            token: Shared stop signal
        """
        logger.info(f"{__name__}:run - Starting", extra={"stage": self.stage.name})

        while not token.cancelled:
            processed = await self.run_once()
            if await token.sleep(self.backoff.delay_for(processed)):
                break

        logger.info(f"{__name__}:run - Stopped", extra={"stage": self.stage.name})
