"""
Chunk group CRUD operations.

Provides idempotent group persistence, pending-group selection and group
status transitions for the summarization stage.

Dependencies: sqlalchemy, newsdigest.boundary.db.models.chunk_group_model
System role: Chunk group persistence shared by both pipeline stages
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, distinct, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from newsdigest.boundary.db.CRUD.base_crud import BaseCRUD
from newsdigest.boundary.db.models.chunk_group_model import ChunkGroupModel
from newsdigest.core.chunking.grouping import ChunkGroupDraft
from newsdigest.models.enums import GroupStatus


class ChunkGroupCRUD(BaseCRUD[ChunkGroupModel]):
    """
    CRUD operations for ChunkGroupModel.

    Extends BaseCRUD with (content_item_id, group_index) upserts and the
    status queries used by the aggregator and status reporting.
    """

    def __init__(self) -> None:
        """Initialize ChunkGroupCRUD with ChunkGroupModel."""
        super().__init__(ChunkGroupModel)

    async def upsert_groups(
        self,
        session: AsyncSession,
        drafts: Sequence[ChunkGroupDraft],
    ) -> list[ChunkGroupModel]:
        """
        Persist group drafts, resetting rewritten groups to PENDING.

        Args:
            session: Async database session
            drafts: Groups produced by build_chunk_groups

        Returns:
            list[ChunkGroupModel]: Persisted groups in draft order
        """
        groups = []
        for draft in drafts:
            group = await self.upsert(
                session,
                index_elements=["content_item_id", "group_index"],
                values={
                    "content_item_id": draft.content_item_id,
                    "group_index": draft.group_index,
                    "chunk_ids": [str(chunk_id) for chunk_id in draft.chunk_ids],
                    "combined_text": draft.combined_text,
                    "combined_tokens": draft.combined_tokens,
                    "status": GroupStatus.PENDING,
                },
            )
            groups.append(group)
        return groups

    async def delete_beyond(
        self,
        session: AsyncSession,
        content_item_id: UUID,
        count: int,
    ) -> int:
        """
        Delete groups with group_index >= count.

        Args:
            session: Async database session
            content_item_id: Owning content item UUID
            count: Number of groups to keep

        Returns:
            Number of stale groups removed
        """
        stmt = delete(ChunkGroupModel).where(
            ChunkGroupModel.content_item_id == content_item_id,
            ChunkGroupModel.group_index >= count,
        )
        result = await session.execute(stmt)
        return result.rowcount

    async def get_pending_for_item(
        self,
        session: AsyncSession,
        content_item_id: UUID,
    ) -> Sequence[ChunkGroupModel]:
        """
        Retrieve PENDING groups of an item in ascending group_index.

        Args:
            session: Async database session
            content_item_id: Owning content item UUID

        Returns:
            Sequence of ChunkGroupModels
        """
        stmt = (
            select(ChunkGroupModel)
            .where(
                ChunkGroupModel.content_item_id == content_item_id,
                ChunkGroupModel.status == GroupStatus.PENDING,
            )
            .order_by(ChunkGroupModel.group_index)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_for_item(self, session: AsyncSession, content_item_id: UUID) -> int:
        """Count all groups of an item regardless of status."""
        stmt = (
            select(func.count())
            .select_from(ChunkGroupModel)
            .where(ChunkGroupModel.content_item_id == content_item_id)
        )
        result = await session.execute(stmt)
        return result.scalar_one()

    async def mark_summarized(self, session: AsyncSession, group_id: UUID) -> ChunkGroupModel | None:
        """Mark group as summarized after its partial was staged."""
        return await self.update_by_id(session, group_id, status=GroupStatus.SUMMARIZED)

    async def mark_failed(self, session: AsyncSession, group_id: UUID) -> ChunkGroupModel | None:
        """Mark group as failed after a summarizer error."""
        return await self.update_by_id(session, group_id, status=GroupStatus.FAILED)

    async def count_by_status(self, session: AsyncSession) -> dict[GroupStatus, int]:
        """
        Count chunk groups per status.

        Returns:
            dict mapping every GroupStatus to its row count (0 when absent)
        """
        stmt = select(ChunkGroupModel.status, func.count()).group_by(ChunkGroupModel.status)
        result = await session.execute(stmt)
        counts = {status: 0 for status in GroupStatus}
        for status, count in result.all():
            counts[GroupStatus(status)] = count
        return counts

    async def count_items_with_pending_groups(self, session: AsyncSession) -> int:
        """Count distinct content items that still have PENDING groups."""
        stmt = select(func.count(distinct(ChunkGroupModel.content_item_id))).where(
            ChunkGroupModel.status == GroupStatus.PENDING
        )
        result = await session.execute(stmt)
        return result.scalar_one()


chunk_group_crud = ChunkGroupCRUD()
