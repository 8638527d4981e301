"""
Partial summary CRUD operations.

Durable staging of per-group summaries between group summarization and
the final merge.

Dependencies: sqlalchemy, newsdigest.boundary.db.models.partial_summary_model
System role: Staging buffer persistence for the summary aggregator
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from newsdigest.boundary.db.CRUD.base_crud import BaseCRUD
from newsdigest.boundary.db.models.partial_summary_model import PartialSummaryModel
from newsdigest.models.enums import Sentiment


class PartialSummaryCRUD(BaseCRUD[PartialSummaryModel]):
    """CRUD operations for PartialSummaryModel keyed by (content_item_id, group_index)."""

    def __init__(self) -> None:
        """Initialize PartialSummaryCRUD with PartialSummaryModel."""
        super().__init__(PartialSummaryModel)

    async def stage(
        self,
        session: AsyncSession,
        content_item_id: UUID,
        chunk_group_id: UUID,
        group_index: int,
        summary: str,
        key_points: list[str],
        category: str,
        sentiment: Sentiment,
        original_text: str,
    ) -> PartialSummaryModel:
        """
        Stage a group summary, replacing any earlier one for the same group.

        Args:
            session: Async database session
            content_item_id: Owning content item UUID
            chunk_group_id: Summarized group UUID
            group_index: Group position, defines merge order
            summary: Summary text
            key_points: Key point strings
            category: Topic label
            sentiment: Overall tone
            original_text: Group combined text

        Returns:
            Staged PartialSummaryModel
        """
        return await self.upsert(
            session,
            index_elements=["content_item_id", "group_index"],
            values={
                "content_item_id": content_item_id,
                "chunk_group_id": chunk_group_id,
                "group_index": group_index,
                "summary": summary,
                "key_points": key_points,
                "category": category,
                "sentiment": sentiment,
                "original_text": original_text,
            },
        )

    async def get_for_item(
        self,
        session: AsyncSession,
        content_item_id: UUID,
    ) -> Sequence[PartialSummaryModel]:
        """Retrieve staged partials of an item in ascending group_index."""
        stmt = (
            select(PartialSummaryModel)
            .where(PartialSummaryModel.content_item_id == content_item_id)
            .order_by(PartialSummaryModel.group_index)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def clear_for_item(self, session: AsyncSession, content_item_id: UUID) -> int:
        """
        Drop every staged partial of an item.

        Returns:
            Number of rows removed
        """
        stmt = delete(PartialSummaryModel).where(
            PartialSummaryModel.content_item_id == content_item_id
        )
        result = await session.execute(stmt)
        return result.rowcount


partial_summary_crud = PartialSummaryCRUD()
