"""
Test suite for the chunking stage.

System role: Verification of the first pipeline stage
"""

import pytest

from newsdigest.boundary.db.CRUD.chunk_crud import chunk_crud
from newsdigest.boundary.db.CRUD.chunk_group_crud import chunk_group_crud
from newsdigest.boundary.db.CRUD.content_item_crud import content_item_crud
from newsdigest.boundary.db.CRUD.partial_summary_crud import partial_summary_crud
from newsdigest.models.enums import ContentStatus, GroupStatus, Sentiment
from newsdigest.workers.chunking_worker import ChunkingStage


@pytest.fixture
def stage(session_factory, chunking_settings) -> ChunkingStage:
    return ChunkingStage(session_factory, chunking_settings, batch_size=5)


async def _chunk_state(session_factory, item_id):
    async with session_factory() as session:
        item = await content_item_crud.get_by_id(session, item_id)
        chunks = await chunk_crud.get_for_item(session, item_id)
        group_count = await chunk_group_crud.count_for_item(session, item_id)
        pending = await chunk_group_crud.get_pending_for_item(session, item_id)
    return item, chunks, group_count, pending


class TestChunkingStage:
    """Test suite for ChunkingStage."""

    @pytest.mark.asyncio
    async def test_pending_item_should_be_chunked_and_grouped(
        self, stage, session_factory, seed_item
    ) -> None:
        """Test a pending item ends CHUNKED with contiguous chunks and pending groups."""
        # Arrange
        async with session_factory() as session:
            item = await seed_item(session)

        # Act
        processed = await stage.process_batch()

        # Assert
        assert processed == 1
        refreshed, chunks, group_count, pending = await _chunk_state(session_factory, item.id)
        assert refreshed.status == ContentStatus.CHUNKED
        assert len(chunks) > 1
        assert [c.chunk_index for c in chunks] == list(range(len(chunks)))
        assert all(c.token_count <= 40 for c in chunks)
        assert group_count == len(range(0, len(chunks), 2))
        assert [g.group_index for g in pending] == list(range(group_count))
        assert pending[0].chunk_ids[0] == str(chunks[0].id)

    @pytest.mark.asyncio
    async def test_rechunking_shorter_text_should_prune_stale_rows(
        self, stage, session_factory, seed_item, paragraphs
    ) -> None:
        """Test re-ingested shorter content leaves no chunks or groups from the longer run."""
        # Arrange
        async with session_factory() as session:
            item = await seed_item(session, raw_text=paragraphs(6))
        await stage.process_batch()
        _, long_chunks, long_groups, _ = await _chunk_state(session_factory, item.id)

        async with session_factory() as session:
            partial_group = (await chunk_group_crud.get_pending_for_item(session, item.id))[0]
            await partial_summary_crud.stage(
                session,
                content_item_id=item.id,
                chunk_group_id=partial_group.id,
                group_index=0,
                summary="Stale",
                key_points=[],
                category="General",
                sentiment=Sentiment.NEUTRAL,
                original_text="old",
            )
            await session.commit()
            await seed_item(session, raw_text=paragraphs(1))

        # Act
        await stage.process_batch()

        # Assert
        refreshed, chunks, group_count, pending = await _chunk_state(session_factory, item.id)
        assert refreshed.status == ContentStatus.CHUNKED
        assert len(chunks) < len(long_chunks)
        assert group_count < long_groups
        assert [c.chunk_index for c in chunks] == list(range(len(chunks)))
        assert group_count == len(range(0, len(chunks), 2))
        assert len(pending) == group_count
        async with session_factory() as session:
            assert await partial_summary_crud.get_for_item(session, item.id) == []

    @pytest.mark.asyncio
    async def test_rechunking_unchanged_text_should_keep_the_same_rows(
        self, stage, session_factory, seed_item, paragraphs
    ) -> None:
        """Test a second pass over identical text reuses every chunk and group row."""
        # Arrange
        async with session_factory() as session:
            item = await seed_item(session, raw_text=paragraphs(6))
        await stage.process_batch()
        _, first_chunks, first_group_count, first_groups = await _chunk_state(session_factory, item.id)

        async with session_factory() as session:
            await seed_item(session, raw_text=paragraphs(6))

        # Act
        processed = await stage.process_batch()

        # Assert
        assert processed == 1
        refreshed, chunks, group_count, groups = await _chunk_state(session_factory, item.id)
        assert refreshed.status == ContentStatus.CHUNKED
        assert [(c.id, c.chunk_index, c.chunk_text) for c in chunks] == [
            (c.id, c.chunk_index, c.chunk_text) for c in first_chunks
        ]
        assert group_count == first_group_count
        assert [(g.id, g.group_index, g.chunk_ids) for g in groups] == [
            (g.id, g.group_index, g.chunk_ids) for g in first_groups
        ]

    @pytest.mark.asyncio
    async def test_failing_item_should_not_stop_the_batch(
        self, stage, session_factory, seed_item
    ) -> None:
        async with session_factory() as session:
            empty = await seed_item(session, url="https://example.com/empty", raw_text="")
            good = await seed_item(session, url="https://example.com/good")

        processed = await stage.process_batch()

        assert processed == 2
        failed, failed_chunks, _, _ = await _chunk_state(session_factory, empty.id)
        assert failed.status == ContentStatus.FAILED
        assert failed.error_message.startswith("Content produced no chunks")
        assert failed_chunks == []
        chunked, _, _, _ = await _chunk_state(session_factory, good.id)
        assert chunked.status == ContentStatus.CHUNKED

    @pytest.mark.asyncio
    async def test_non_pending_item_should_be_skipped(self, stage, session_factory, seed_item) -> None:
        async with session_factory() as session:
            item = await seed_item(session)
            await content_item_crud.mark_chunked(session, item.id)
            await session.commit()

        assert await stage.process_item(item.id) is False
        assert await stage.process_batch() == 0

    @pytest.mark.asyncio
    async def test_batch_size_should_bound_selection(self, session_factory, chunking_settings, seed_item) -> None:
        async with session_factory() as session:
            for i in range(3):
                await seed_item(session, url=f"https://example.com/{i}")
        stage = ChunkingStage(session_factory, chunking_settings, batch_size=2)

        assert await stage.process_batch() == 2
        assert await stage.process_batch() == 1
        assert await stage.process_batch() == 0

        async with session_factory() as session:
            counts = await chunk_group_crud.count_by_status(session)
        assert counts[GroupStatus.PENDING] > 0
