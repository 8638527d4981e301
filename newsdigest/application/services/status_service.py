"""
Pipeline status service.

Aggregates counts across all pipeline tables into one snapshot.

Dependencies: newsdigest.boundary.db.CRUD
System role: Operational visibility for the API and the worker process
"""

from datetime import timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from newsdigest.boundary.db.base import utcnow
from newsdigest.boundary.db.CRUD.chunk_crud import chunk_crud
from newsdigest.boundary.db.CRUD.chunk_group_crud import chunk_group_crud
from newsdigest.boundary.db.CRUD.content_item_crud import content_item_crud
from newsdigest.boundary.db.CRUD.summary_crud import summary_crud
from newsdigest.models.enums import ContentStatus
from newsdigest.models.pipeline import PipelineStatus

RECENT_WINDOW = timedelta(hours=24)


class PipelineStatusService:
    """Read-only pipeline statistics."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_status(self) -> PipelineStatus:
        """
        Build a status snapshot.

        Returns:
            PipelineStatus: Counts per table and status
        """
        item_counts = await content_item_crud.count_by_status(self.db)
        group_counts = await chunk_group_crud.count_by_status(self.db)

        return PipelineStatus(
            content_items={status.value: count for status, count in item_counts.items()},
            pending_tokens=await content_item_crud.sum_tokens_by_status(self.db, ContentStatus.PENDING),
            total_chunks=await chunk_crud.count(self.db),
            chunk_groups={status.value: count for status, count in group_counts.items()},
            items_awaiting_summary=await chunk_group_crud.count_items_with_pending_groups(self.db),
            total_summaries=await summary_crud.count_final(self.db),
            summaries_last_24h=await summary_crud.count_final_since(self.db, utcnow() - RECENT_WINDOW),
        )
