"""
Pipeline orchestrator.

Wires the chunking and summarization stages to their coordinators and
runs both concurrently in one event loop until stopped.

Dependencies: asyncio (stdlib), newsdigest.workers, newsdigest.core.summarization
System role: Composition root of the worker process
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from newsdigest.application.services.status_service import PipelineStatusService
from newsdigest.boundary.db.connection import get_async_session_factory
from newsdigest.configs import Settings, get_settings
from newsdigest.core.summarization.aggregator import SummaryAggregator
from newsdigest.core.summarization.schema import Summarizer
from newsdigest.core.summarization.summarizer import LLMSummarizer
from newsdigest.models.pipeline import PipelineStatus
from newsdigest.workers.cancellation import CancellationToken
from newsdigest.workers.chunking_worker import ChunkingStage
from newsdigest.workers.coordinator import BackoffPolicy, BatchCoordinator
from newsdigest.workers.rate_limiter import AsyncTokenBucket
from newsdigest.workers.summarization_worker import SummarizationStage

logger = logging.getLogger(__name__)


class PipelineOrchestrator:
    """
    Run both pipeline stages until stop() is called.

    Usage:
        orchestrator = PipelineOrchestrator()
        loop.add_signal_handler(signal.SIGTERM, orchestrator.stop)
        await orchestrator.run()
    """

    def __init__(
        self,
        settings: Settings | None = None,
        session_factory: async_sessionmaker[AsyncSession] | None = None,
        summarizer: Summarizer | None = None,
    ) -> None:
        """
        Initialize orchestrator.

        Args:
            settings: Application settings (cached settings when None)
            session_factory: Session factory (application engine when None)
            summarizer: Summarization capability (Gemini-backed when None)
        """
        settings = settings or get_settings()
        self._session_factory = session_factory or get_async_session_factory()
        self._token = CancellationToken()

        workers = settings.workers
        rate_limiter = AsyncTokenBucket(
            rate_per_second=settings.summarizer.requests_per_second,
            capacity=settings.summarizer.burst,
        )
        aggregator = SummaryAggregator(
            summarizer or LLMSummarizer(settings.summarizer),
            rate_limiter,
        )

        self.coordinators = [
            BatchCoordinator(
                ChunkingStage(self._session_factory, settings.chunking, workers.chunker_batch_size),
                BackoffPolicy(
                    idle_delay=workers.chunker_idle_delay,
                    busy_delay=workers.chunker_busy_delay,
                    error_delay=workers.chunker_error_delay,
                ),
            ),
            BatchCoordinator(
                SummarizationStage(self._session_factory, aggregator, workers.summarizer_batch_size),
                BackoffPolicy(
                    idle_delay=workers.summarizer_idle_delay,
                    busy_delay=workers.summarizer_busy_delay,
                    error_delay=workers.summarizer_error_delay,
                ),
            ),
        ]

    @property
    def token(self) -> CancellationToken:
        return self._token

    async def run(self) -> None:
        """Run every coordinator concurrently until the token is cancelled."""
        logger.info(
            f"{__name__}:run - Starting pipeline",
            extra={"stages": [c.stage.name for c in self.coordinators]},
        )
        await asyncio.gather(*(coordinator.run(self._token) for coordinator in self.coordinators))
        logger.info(f"{__name__}:run - Pipeline stopped")

    def stop(self) -> None:
        """Ask every coordinator to stop after its current batch."""
        if not self._token.cancelled:
            logger.info(f"{__name__}:stop - Stop requested")
        self._token.cancel()

    async def status(self) -> PipelineStatus:
        """Snapshot of pipeline counts."""
        async with self._session_factory() as session:
            return await PipelineStatusService(session).get_status()
