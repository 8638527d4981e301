"""
Content item CRUD operations.

Provides upstream ingestion (upsert by URL), FIFO batch selection for both
pipeline stages, status transitions, and status aggregates.

Dependencies: sqlalchemy, newsdigest.boundary.db.models.content_item_model
System role: Content item persistence for ingestion, chunking and summarization
"""

from datetime import datetime
from typing import Sequence
from uuid import UUID

from sqlalchemy import exists, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from newsdigest.boundary.db.CRUD.base_crud import BaseCRUD
from newsdigest.boundary.db.models.chunk_group_model import ChunkGroupModel
from newsdigest.boundary.db.models.content_item_model import ContentItemModel
from newsdigest.boundary.db.models.partial_summary_model import PartialSummaryModel
from newsdigest.models.enums import ContentKind, ContentStatus, GroupStatus


class ContentItemCRUD(BaseCRUD[ContentItemModel]):
    """
    CRUD operations for ContentItemModel.

    Extends BaseCRUD with URL-keyed upsert, stage batch selection and
    status transition helpers.
    """

    def __init__(self) -> None:
        """Initialize ContentItemCRUD with ContentItemModel."""
        super().__init__(ContentItemModel)

    async def upsert_by_url(
        self,
        session: AsyncSession,
        url: str,
        title: str,
        raw_text: str,
        content_kind: ContentKind,
        total_tokens: int,
        code_snippets: list[str] | None = None,
        crawled_at: datetime | None = None,
    ) -> ContentItemModel:
        """
        Insert or refresh a crawled document by URL.

        Re-pushing an existing URL overwrites its content and resets it to
        PENDING so the pipeline processes it again.

        Args:
            session: Async database session
            url: Canonical source URL
            title: Document title
            raw_text: Full extracted text
            content_kind: ARTICLE/CODE/MIXED
            total_tokens: Estimated token count of raw_text
            code_snippets: Extracted code snippets
            crawled_at: Crawl timestamp

        Returns:
            ContentItemModel in PENDING status
        """
        return await self.upsert(
            session,
            index_elements=["url"],
            values={
                "url": url,
                "title": title,
                "raw_text": raw_text,
                "code_snippets": code_snippets or [],
                "content_kind": content_kind,
                "total_tokens": total_tokens,
                "status": ContentStatus.PENDING,
                "error_message": None,
                "crawled_at": crawled_at,
            },
        )

    async def get_pending(
        self,
        session: AsyncSession,
        limit: int,
    ) -> Sequence[ContentItemModel]:
        """
        Select the oldest PENDING items for chunking.

        Args:
            session: Async database session
            limit: Batch size

        Returns:
            Sequence of ContentItemModels ordered by created_at
        """
        stmt = (
            select(ContentItemModel)
            .where(ContentItemModel.status == ContentStatus.PENDING)
            .order_by(ContentItemModel.created_at)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_ready_for_summary(
        self,
        session: AsyncSession,
        limit: int,
    ) -> Sequence[ContentItemModel]:
        """
        Select the oldest CHUNKED items with summarization work left.

        An item qualifies when it still has PENDING chunk groups or staged
        partial summaries awaiting a merge.

        Args:
            session: Async database session
            limit: Batch size

        Returns:
            Sequence of ContentItemModels ordered by created_at
        """
        has_pending_groups = exists().where(
            ChunkGroupModel.content_item_id == ContentItemModel.id,
            ChunkGroupModel.status == GroupStatus.PENDING,
        )
        has_staged_partials = exists().where(
            PartialSummaryModel.content_item_id == ContentItemModel.id,
        )
        stmt = (
            select(ContentItemModel)
            .where(
                ContentItemModel.status == ContentStatus.CHUNKED,
                or_(has_pending_groups, has_staged_partials),
            )
            .order_by(ContentItemModel.created_at)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def mark_chunked(
        self,
        session: AsyncSession,
        content_item_id: UUID,
    ) -> ContentItemModel | None:
        """
        Mark item as chunked and clear any previous error.

        Args:
            session: Async database session
            content_item_id: Content item UUID

        Returns:
            Updated ContentItemModel if found, None otherwise
        """
        return await self.update_by_id(
            session,
            content_item_id,
            status=ContentStatus.CHUNKED,
            error_message=None,
        )

    async def mark_failed(
        self,
        session: AsyncSession,
        content_item_id: UUID,
        error_message: str,
    ) -> ContentItemModel | None:
        """
        Mark item as failed with the error that stopped it.

        Args:
            session: Async database session
            content_item_id: Content item UUID
            error_message: Failure reason

        Returns:
            Updated ContentItemModel if found, None otherwise
        """
        return await self.update_by_id(
            session,
            content_item_id,
            status=ContentStatus.FAILED,
            error_message=error_message,
        )

    async def mark_aggregation_failed(
        self,
        session: AsyncSession,
        content_item_id: UUID,
        error_message: str,
    ) -> ContentItemModel | None:
        """
        Mark item as having nothing left to aggregate.

        Args:
            session: Async database session
            content_item_id: Content item UUID
            error_message: Failure reason

        Returns:
            Updated ContentItemModel if found, None otherwise
        """
        return await self.update_by_id(
            session,
            content_item_id,
            status=ContentStatus.AGGREGATION_FAILED,
            error_message=error_message,
        )

    async def count_by_status(self, session: AsyncSession) -> dict[ContentStatus, int]:
        """
        Count content items per status.

        Returns:
            dict mapping every ContentStatus to its row count (0 when absent)
        """
        stmt = select(ContentItemModel.status, func.count()).group_by(ContentItemModel.status)
        result = await session.execute(stmt)
        counts = {status: 0 for status in ContentStatus}
        for status, count in result.all():
            counts[ContentStatus(status)] = count
        return counts

    async def sum_tokens_by_status(
        self,
        session: AsyncSession,
        status: ContentStatus,
    ) -> int:
        """
        Sum total_tokens over items in a status.

        Args:
            session: Async database session
            status: Status to aggregate

        Returns:
            Token total (0 when no rows match)
        """
        stmt = select(func.coalesce(func.sum(ContentItemModel.total_tokens), 0)).where(
            ContentItemModel.status == status
        )
        result = await session.execute(stmt)
        return int(result.scalar_one())


content_item_crud = ContentItemCRUD()
