"""
Test suite for the status and summary read services.

System role: Verification of pipeline read access
"""

import uuid

import pytest

from newsdigest.application.services.status_service import PipelineStatusService
from newsdigest.application.services.summary_service import SummaryService
from newsdigest.boundary.db.CRUD.content_item_crud import content_item_crud
from newsdigest.boundary.db.CRUD.summary_crud import summary_crud
from newsdigest.core.exceptions import SummaryNotFoundError
from newsdigest.models.enums import ContentKind


async def _write_summary(session, url: str):
    summary = await summary_crud.upsert_by_url(
        session,
        url=url,
        title="Title",
        original_text="text",
        summary=f"Summary of {url}",
        content_kind=ContentKind.ARTICLE,
    )
    await session.commit()
    return summary


class TestPipelineStatusService:
    """Test suite for PipelineStatusService."""

    @pytest.mark.asyncio
    async def test_status_should_count_every_table(self, test_async_db, seed_item) -> None:
        """Test the snapshot reflects items, tokens and summaries."""
        # Arrange
        await seed_item(test_async_db, url="https://example.com/1", raw_text="x" * 400)
        failed = await seed_item(test_async_db, url="https://example.com/2")
        await content_item_crud.mark_failed(test_async_db, failed.id, "boom")
        await test_async_db.commit()
        await _write_summary(test_async_db, "https://example.com/3")

        # Act
        status = await PipelineStatusService(test_async_db).get_status()

        # Assert
        assert status.content_items == {
            "pending": 1,
            "chunked": 0,
            "failed": 1,
            "aggregation_failed": 0,
        }
        assert status.pending_tokens == 100
        assert status.total_chunks == 0
        assert status.chunk_groups == {"pending": 0, "summarized": 0, "failed": 0}
        assert status.items_awaiting_summary == 0
        assert status.total_summaries == 1
        assert status.summaries_last_24h == 1


class TestSummaryService:
    """Test suite for SummaryService."""

    @pytest.mark.asyncio
    async def test_list_should_return_page_and_total(self, test_async_db) -> None:
        for i in range(3):
            await _write_summary(test_async_db, f"https://example.com/{i}")

        summaries, total = await SummaryService(test_async_db).list_summaries(limit=2)

        assert len(summaries) == 2
        assert total == 3

    @pytest.mark.asyncio
    async def test_get_should_return_summary(self, test_async_db) -> None:
        written = await _write_summary(test_async_db, "https://example.com/a")

        summary = await SummaryService(test_async_db).get_summary(written.id)

        assert summary.summary == "Summary of https://example.com/a"

    @pytest.mark.asyncio
    async def test_unknown_id_should_raise(self, test_async_db) -> None:
        with pytest.raises(SummaryNotFoundError):
            await SummaryService(test_async_db).get_summary(uuid.uuid4())
