"""
Summary service orchestrator.

Read access to final summaries.

Dependencies: newsdigest.boundary.db.CRUD
System role: Summary retrieval for the read API
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from newsdigest.boundary.db.CRUD.summary_crud import summary_crud
from newsdigest.boundary.db.models.summary_model import SummaryModel
from newsdigest.core.exceptions import SummaryNotFoundError


class SummaryService:
    """
    Summary service orchestrator.

    Provides abstraction over SummaryCRUD for listing and lookup.
    """

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize summary service.

        Args:
            db: AsyncSession for database operations
        """
        self.db = db

    async def list_summaries(
        self,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[Sequence[SummaryModel], int]:
        """
        List final summaries, newest first.

        Args:
            limit: Page size
            offset: Rows to skip

        Returns:
            tuple: (page of SummaryModels, total final summaries)
        """
        summaries = await summary_crud.list_recent(self.db, limit=limit, offset=offset)
        total = await summary_crud.count_final(self.db)
        return summaries, total

    async def get_summary(self, summary_id: UUID) -> SummaryModel:
        """
        Retrieve one final summary.

        Args:
            summary_id: Summary UUID

        Returns:
            SummaryModel

        Raises:
            SummaryNotFoundError: If no summary has this id
        """
        summary = await summary_crud.get_by_id(self.db, summary_id)
        if summary is None:
            raise SummaryNotFoundError(str(summary_id))
        return summary
