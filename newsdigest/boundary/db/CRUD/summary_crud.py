"""
Final summary CRUD operations.

Dependencies: sqlalchemy, newsdigest.boundary.db.models.summary_model
System role: Final summary persistence for the aggregator and read API
"""

from datetime import datetime
from typing import Any, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from newsdigest.boundary.db.CRUD.base_crud import BaseCRUD
from newsdigest.boundary.db.models.summary_model import SummaryModel


class SummaryCRUD(BaseCRUD[SummaryModel]):
    """
    CRUD operations for SummaryModel.

    Extends BaseCRUD with URL-keyed upsert, recency listing and counts
    of final (non-partial) summaries.
    """

    def __init__(self) -> None:
        """Initialize SummaryCRUD with SummaryModel."""
        super().__init__(SummaryModel)

    async def upsert_by_url(
        self,
        session: AsyncSession,
        url: str,
        **values: Any,
    ) -> SummaryModel:
        """
        Write the final summary for a URL, replacing any previous one.

        Args:
            session: Async database session
            url: Source URL (natural key)
            **values: Remaining SummaryModel columns

        Returns:
            Persisted SummaryModel
        """
        return await self.upsert(
            session,
            index_elements=["url"],
            values={"url": url, **values},
        )

    async def list_recent(
        self,
        session: AsyncSession,
        limit: int = 20,
        offset: int = 0,
    ) -> Sequence[SummaryModel]:
        """
        List final summaries, most recently summarized first.

        Args:
            session: Async database session
            limit: Page size
            offset: Rows to skip

        Returns:
            Sequence of SummaryModels
        """
        stmt = (
            select(SummaryModel)
            .where(SummaryModel.is_partial.is_(False))
            .order_by(SummaryModel.summarized_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_final(self, session: AsyncSession) -> int:
        """Count final summaries."""
        stmt = select(func.count()).select_from(SummaryModel).where(SummaryModel.is_partial.is_(False))
        result = await session.execute(stmt)
        return result.scalar_one()

    async def count_final_since(self, session: AsyncSession, since: datetime) -> int:
        """
        Count final summaries written at or after a point in time.

        Args:
            session: Async database session
            since: Lower bound on summarized_at (UTC)

        Returns:
            Summary count
        """
        stmt = (
            select(func.count())
            .select_from(SummaryModel)
            .where(
                SummaryModel.is_partial.is_(False),
                SummaryModel.summarized_at >= since,
            )
        )
        result = await session.execute(stmt)
        return result.scalar_one()


summary_crud = SummaryCRUD()
