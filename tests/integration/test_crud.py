"""
Integration tests for CRUD operations against SQLite.

Covers natural-key upserts, stale row pruning, stage batch selection
and the status aggregates.

System role: Verification of the persistence layer
"""

from datetime import timedelta

import pytest

from newsdigest.boundary.db.base import utcnow
from newsdigest.boundary.db.CRUD.chunk_crud import chunk_crud
from newsdigest.boundary.db.CRUD.chunk_group_crud import chunk_group_crud
from newsdigest.boundary.db.CRUD.content_item_crud import content_item_crud
from newsdigest.boundary.db.CRUD.partial_summary_crud import partial_summary_crud
from newsdigest.boundary.db.CRUD.summary_crud import summary_crud
from newsdigest.core.chunking.grouping import ChunkGroupDraft
from newsdigest.models.enums import ContentKind, ContentStatus, GroupStatus, Sentiment


def _drafts(item_id, count: int) -> list[ChunkGroupDraft]:
    return [
        ChunkGroupDraft(
            content_item_id=item_id,
            group_index=i,
            combined_text=f"Group {i}",
            combined_tokens=2,
        )
        for i in range(count)
    ]


class TestContentItemCRUD:
    """Test suite for ContentItemCRUD."""

    @pytest.mark.asyncio
    async def test_upsert_by_url_should_keep_id_and_reset_status(self, test_async_db, seed_item) -> None:
        """Test re-pushing a failed URL resets it to pending in place."""
        # Arrange
        item = await seed_item(test_async_db, raw_text="Original text.")
        await content_item_crud.mark_failed(test_async_db, item.id, "boom")
        await test_async_db.commit()

        # Act
        again = await seed_item(test_async_db, raw_text="Updated text.")

        # Assert
        assert again.id == item.id
        assert again.status == ContentStatus.PENDING
        assert again.error_message is None
        assert again.raw_text == "Updated text."
        assert len(await content_item_crud.get_all(test_async_db)) == 1

    @pytest.mark.asyncio
    async def test_get_pending_should_return_oldest_first(self, test_async_db, seed_item) -> None:
        first = await seed_item(test_async_db, url="https://example.com/1")
        second = await seed_item(test_async_db, url="https://example.com/2")
        third = await seed_item(test_async_db, url="https://example.com/3")
        await content_item_crud.mark_chunked(test_async_db, second.id)
        await test_async_db.commit()

        pending = await content_item_crud.get_pending(test_async_db, limit=10)
        limited = await content_item_crud.get_pending(test_async_db, limit=1)

        assert [p.id for p in pending] == [first.id, third.id]
        assert [p.id for p in limited] == [first.id]

    @pytest.mark.asyncio
    async def test_ready_for_summary_should_require_work_left(self, test_async_db, seed_item) -> None:
        """Test only chunked items with pending groups or staged partials are selected."""
        # Arrange
        with_pending = await seed_item(test_async_db, url="https://example.com/pending")
        await chunk_group_crud.upsert_groups(test_async_db, _drafts(with_pending.id, 1))
        await content_item_crud.mark_chunked(test_async_db, with_pending.id)

        with_partial = await seed_item(test_async_db, url="https://example.com/partial")
        groups = await chunk_group_crud.upsert_groups(test_async_db, _drafts(with_partial.id, 1))
        await chunk_group_crud.mark_summarized(test_async_db, groups[0].id)
        await partial_summary_crud.stage(
            test_async_db,
            content_item_id=with_partial.id,
            chunk_group_id=groups[0].id,
            group_index=0,
            summary="Partial",
            key_points=["A"],
            category="General",
            sentiment=Sentiment.NEUTRAL,
            original_text="Group 0",
        )
        await content_item_crud.mark_chunked(test_async_db, with_partial.id)

        exhausted = await seed_item(test_async_db, url="https://example.com/done")
        groups = await chunk_group_crud.upsert_groups(test_async_db, _drafts(exhausted.id, 1))
        await chunk_group_crud.mark_failed(test_async_db, groups[0].id)
        await content_item_crud.mark_chunked(test_async_db, exhausted.id)

        await seed_item(test_async_db, url="https://example.com/unchunked")
        await test_async_db.commit()

        # Act
        ready = await content_item_crud.get_ready_for_summary(test_async_db, limit=10)

        # Assert
        assert [r.id for r in ready] == [with_pending.id, with_partial.id]

    @pytest.mark.asyncio
    async def test_status_aggregates(self, test_async_db, seed_item) -> None:
        a = await seed_item(test_async_db, url="https://example.com/a", raw_text="x" * 40)
        await seed_item(test_async_db, url="https://example.com/b", raw_text="y" * 80)
        await content_item_crud.mark_failed(test_async_db, a.id, "boom")
        await test_async_db.commit()

        counts = await content_item_crud.count_by_status(test_async_db)

        assert counts[ContentStatus.PENDING] == 1
        assert counts[ContentStatus.FAILED] == 1
        assert counts[ContentStatus.CHUNKED] == 0
        assert counts[ContentStatus.AGGREGATION_FAILED] == 0
        assert await content_item_crud.sum_tokens_by_status(test_async_db, ContentStatus.PENDING) == 20
        assert await content_item_crud.sum_tokens_by_status(test_async_db, ContentStatus.CHUNKED) == 0


class TestChunkCRUD:
    """Test suite for ChunkCRUD."""

    @pytest.mark.asyncio
    async def test_upsert_chunks_should_overwrite_and_prune(self, test_async_db, seed_item) -> None:
        """Test re-chunking into fewer chunks leaves no stale rows."""
        # Arrange
        item = await seed_item(test_async_db)
        first = await chunk_crud.upsert_chunks(
            test_async_db, item.id, ["one", "two", "three"], ContentKind.ARTICLE
        )

        # Act
        second = await chunk_crud.upsert_chunks(test_async_db, item.id, ["uno", "dos"], ContentKind.ARTICLE)
        removed = await chunk_crud.delete_beyond(test_async_db, item.id, len(second))
        await test_async_db.commit()

        # Assert
        chunks = await chunk_crud.get_for_item(test_async_db, item.id)
        assert removed == 1
        assert [c.chunk_index for c in chunks] == [0, 1]
        assert [c.chunk_text for c in chunks] == ["uno", "dos"]
        assert chunks[0].id == first[0].id
        assert await chunk_crud.count(test_async_db, item.id) == 2
        assert await chunk_crud.count(test_async_db) == 2

    @pytest.mark.asyncio
    async def test_token_count_should_be_estimated(self, test_async_db, seed_item) -> None:
        item = await seed_item(test_async_db)

        chunks = await chunk_crud.upsert_chunks(test_async_db, item.id, ["abcdefghi"], ContentKind.CODE)

        assert chunks[0].token_count == 3
        assert chunks[0].content_kind == ContentKind.CODE


class TestChunkGroupCRUD:
    """Test suite for ChunkGroupCRUD."""

    @pytest.mark.asyncio
    async def test_upsert_groups_should_reset_status(self, test_async_db, seed_item) -> None:
        item = await seed_item(test_async_db)
        groups = await chunk_group_crud.upsert_groups(test_async_db, _drafts(item.id, 2))
        await chunk_group_crud.mark_summarized(test_async_db, groups[0].id)

        await chunk_group_crud.upsert_groups(test_async_db, _drafts(item.id, 2))
        await test_async_db.commit()

        pending = await chunk_group_crud.get_pending_for_item(test_async_db, item.id)
        assert [g.group_index for g in pending] == [0, 1]
        assert pending[0].id == groups[0].id

    @pytest.mark.asyncio
    async def test_chunk_ids_should_be_stored_as_strings(self, test_async_db, seed_item) -> None:
        item = await seed_item(test_async_db)
        chunks = await chunk_crud.upsert_chunks(test_async_db, item.id, ["a", "b"], ContentKind.ARTICLE)
        draft = ChunkGroupDraft(
            content_item_id=item.id,
            group_index=0,
            combined_text="a\n\nb",
            combined_tokens=2,
            chunk_ids=[c.id for c in chunks],
        )

        groups = await chunk_group_crud.upsert_groups(test_async_db, [draft])

        assert groups[0].chunk_ids == [str(c.id) for c in chunks]

    @pytest.mark.asyncio
    async def test_counts(self, test_async_db, seed_item) -> None:
        first = await seed_item(test_async_db, url="https://example.com/1")
        second = await seed_item(test_async_db, url="https://example.com/2")
        groups = await chunk_group_crud.upsert_groups(test_async_db, _drafts(first.id, 3))
        await chunk_group_crud.upsert_groups(test_async_db, _drafts(second.id, 1))
        await chunk_group_crud.mark_failed(test_async_db, groups[2].id)
        removed = await chunk_group_crud.delete_beyond(test_async_db, first.id, 2)
        await test_async_db.commit()

        counts = await chunk_group_crud.count_by_status(test_async_db)

        assert removed == 1
        assert counts[GroupStatus.PENDING] == 3
        assert counts[GroupStatus.FAILED] == 0
        assert await chunk_group_crud.count_for_item(test_async_db, first.id) == 2
        assert await chunk_group_crud.count_items_with_pending_groups(test_async_db) == 2


class TestSummaryCRUD:
    """Test suite for SummaryCRUD."""

    @pytest.mark.asyncio
    async def test_list_recent_should_exclude_partials_and_order_by_recency(self, test_async_db) -> None:
        now = utcnow()
        for i, offset in enumerate([3, 1, 2]):
            await summary_crud.upsert_by_url(
                test_async_db,
                url=f"https://example.com/{i}",
                title=f"Title {i}",
                original_text="text",
                summary=f"Summary {i}",
                content_kind=ContentKind.ARTICLE,
                summarized_at=now - timedelta(hours=offset),
            )
        await summary_crud.upsert_by_url(
            test_async_db,
            url="https://example.com/partial",
            title="Partial",
            original_text="text",
            summary="Partial",
            content_kind=ContentKind.ARTICLE,
            is_partial=True,
        )
        await test_async_db.commit()

        recent = await summary_crud.list_recent(test_async_db, limit=2)
        page_two = await summary_crud.list_recent(test_async_db, limit=2, offset=2)

        assert [s.summary for s in recent] == ["Summary 1", "Summary 2"]
        assert [s.summary for s in page_two] == ["Summary 0"]
        assert await summary_crud.count_final(test_async_db) == 3
        assert await summary_crud.count_final_since(test_async_db, now - timedelta(minutes=150)) == 2
