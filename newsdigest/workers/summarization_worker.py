"""
Summarization stage.

Selects chunked content items with summarization work left and hands each
one to the summary aggregator.

Dependencies: sqlalchemy, newsdigest.core.summarization, newsdigest.boundary.db.CRUD
System role: Second pipeline stage (chunk_groups → partial_summaries → summaries)
"""

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from newsdigest.boundary.db.CRUD.content_item_crud import content_item_crud
from newsdigest.core.summarization.aggregator import SummaryAggregator
from newsdigest.models.enums import ContentStatus
from newsdigest.workers.coordinator import PipelineStage

logger = logging.getLogger(__name__)


class SummarizationStage(PipelineStage):
    """Summarize a batch of content items, one item at a time."""

    name = "summarizer"

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        aggregator: SummaryAggregator,
        batch_size: int,
    ) -> None:
        """
        Initialize summarization stage.

        Args:
            session_factory: Factory for per-item sessions
            aggregator: Per-item summarization logic
            batch_size: Items selected per batch
        """
        self._session_factory = session_factory
        self._aggregator = aggregator
        self._batch_size = batch_size

    async def process_batch(self) -> int:
        async with self._session_factory() as session:
            items = await content_item_crud.get_ready_for_summary(session, self._batch_size)
            item_ids = [item.id for item in items]

        for item_id in item_ids:
            await self.process_item(item_id)

        return len(item_ids)

    async def process_item(self, content_item_id: uuid.UUID) -> bool:
        """
        Run the aggregator for one content item.

        Args:
            content_item_id: Content item UUID

        Returns:
            bool: True if a final summary was written
        """
        async with self._session_factory() as session:
            item = await content_item_crud.get_by_id(session, content_item_id)
            if item is None or item.status != ContentStatus.CHUNKED:
                return False

            try:
                return await self._aggregator.process(session, item)
            except Exception as e:
                logger.error(
                    f"{__name__}:process_item - {type(e).__name__}: {e}",
                    extra={"content_item_id": str(content_item_id)},
                )
                await session.rollback()
                return False
