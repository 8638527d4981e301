"""
Chunking stage.

Turns PENDING content items into persisted chunks and chunk groups.
Each item is processed in its own transaction; a failure marks only
that item FAILED and the batch carries on.

Dependencies: sqlalchemy, newsdigest.core.chunking, newsdigest.boundary.db.CRUD
System role: First pipeline stage (content_items → content_chunks → chunk_groups)
"""

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from newsdigest.boundary.db.CRUD.chunk_crud import chunk_crud
from newsdigest.boundary.db.CRUD.chunk_group_crud import chunk_group_crud
from newsdigest.boundary.db.CRUD.content_item_crud import content_item_crud
from newsdigest.boundary.db.CRUD.partial_summary_crud import partial_summary_crud
from newsdigest.boundary.db.models.content_item_model import ContentItemModel
from newsdigest.configs.chunking import ChunkingSettings
from newsdigest.core.chunking import ChunkPacker, build_chunk_groups, find_text_boundaries
from newsdigest.core.exceptions import ChunkingError
from newsdigest.models.enums import ContentStatus
from newsdigest.workers.coordinator import PipelineStage

logger = logging.getLogger(__name__)


class ChunkingStage(PipelineStage):
    """
    Chunk and group a batch of pending content items.

    Re-running the stage on an item rewrites its chunks and groups in
    place and prunes any rows left over from a longer previous run.
    """

    name = "chunker"

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        settings: ChunkingSettings,
        batch_size: int,
    ) -> None:
        """
        Initialize chunking stage.

        Args:
            session_factory: Factory for per-item sessions
            settings: Chunk and group sizing
            batch_size: Items selected per batch
        """
        self._session_factory = session_factory
        self._settings = settings
        self._batch_size = batch_size
        self._packer = ChunkPacker(settings)

    async def process_batch(self) -> int:
        async with self._session_factory() as session:
            items = await content_item_crud.get_pending(session, self._batch_size)
            item_ids = [item.id for item in items]

        for item_id in item_ids:
            await self.process_item(item_id)

        return len(item_ids)

    async def process_item(self, content_item_id: uuid.UUID) -> bool:
        """
        Chunk one content item in its own transaction.

        Args:
            content_item_id: Content item UUID

        Returns:
            bool: True if the item reached CHUNKED, False if it failed or was
                no longer pending
        """
        async with self._session_factory() as session:
            item = await content_item_crud.get_by_id(session, content_item_id)
            if item is None or item.status != ContentStatus.PENDING:
                return False

            try:
                chunk_count, group_count = await self._chunk_item(session, item)
                await content_item_crud.mark_chunked(session, content_item_id)
                await session.commit()

            except Exception as e:
                logger.error(
                    f"{__name__}:process_item - {type(e).__name__}: {e}",
                    extra={"content_item_id": str(content_item_id)},
                )
                await session.rollback()
                await content_item_crud.mark_failed(session, content_item_id, str(e))
                await session.commit()
                return False

        logger.info(
            f"{__name__}:process_item - Chunked into {chunk_count} chunks, {group_count} groups",
            extra={"content_item_id": str(content_item_id)},
        )
        return True

    async def _chunk_item(self, session: AsyncSession, item: ContentItemModel) -> tuple[int, int]:
        boundaries = find_text_boundaries(item.raw_text)
        texts = self._packer.pack(item.raw_text, boundaries)
        if not texts:
            raise ChunkingError("Content produced no chunks", content_item_id=str(item.id))

        chunks = await chunk_crud.upsert_chunks(session, item.id, texts, item.content_kind)
        await chunk_crud.delete_beyond(session, item.id, len(chunks))

        drafts = build_chunk_groups(
            chunks,
            self._settings.chunks_per_group,
            self._settings.max_chunks_per_group,
        )
        if not drafts:
            raise ChunkingError("Chunks produced no groups", content_item_id=str(item.id))

        # Regrouped content invalidates anything staged from a previous run
        await partial_summary_crud.clear_for_item(session, item.id)
        groups = await chunk_group_crud.upsert_groups(session, drafts)
        await chunk_group_crud.delete_beyond(session, item.id, len(groups))

        return len(chunks), len(groups)
