"""
Chunk CRUD operations.

Dependencies: sqlalchemy, newsdigest.boundary.db.models.chunk_model
System role: Chunk persistence for the chunking stage
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from newsdigest.boundary.db.CRUD.base_crud import BaseCRUD
from newsdigest.boundary.db.models.chunk_model import ChunkModel
from newsdigest.core.chunking.tokens import estimate_tokens
from newsdigest.models.enums import ContentKind


class ChunkCRUD(BaseCRUD[ChunkModel]):
    """CRUD operations for ChunkModel keyed by (content_item_id, chunk_index)."""

    def __init__(self) -> None:
        """Initialize ChunkCRUD with ChunkModel."""
        super().__init__(ChunkModel)

    async def upsert_chunks(
        self,
        session: AsyncSession,
        content_item_id: UUID,
        texts: Sequence[str],
        content_kind: ContentKind,
    ) -> list[ChunkModel]:
        """
        Persist chunk texts with indices 0..N-1 in text order.

        Existing rows at the same index are overwritten, so reprocessing an
        item never duplicates chunks.

        Args:
            session: Async database session
            content_item_id: Owning content item UUID
            texts: Chunk texts in document order
            content_kind: Kind copied onto every chunk

        Returns:
            list[ChunkModel]: Persisted chunks ordered by chunk_index
        """
        chunks = []
        for chunk_index, chunk_text in enumerate(texts):
            chunk = await self.upsert(
                session,
                index_elements=["content_item_id", "chunk_index"],
                values={
                    "content_item_id": content_item_id,
                    "chunk_index": chunk_index,
                    "chunk_text": chunk_text,
                    "token_count": estimate_tokens(chunk_text),
                    "content_kind": content_kind,
                },
            )
            chunks.append(chunk)
        return chunks

    async def delete_beyond(
        self,
        session: AsyncSession,
        content_item_id: UUID,
        count: int,
    ) -> int:
        """
        Delete chunks with chunk_index >= count.

        Args:
            session: Async database session
            content_item_id: Owning content item UUID
            count: Number of chunks to keep

        Returns:
            Number of stale chunks removed
        """
        stmt = delete(ChunkModel).where(
            ChunkModel.content_item_id == content_item_id,
            ChunkModel.chunk_index >= count,
        )
        result = await session.execute(stmt)
        return result.rowcount

    async def get_for_item(
        self,
        session: AsyncSession,
        content_item_id: UUID,
    ) -> Sequence[ChunkModel]:
        """
        Retrieve all chunks of an item ordered by chunk_index.

        Args:
            session: Async database session
            content_item_id: Owning content item UUID

        Returns:
            Sequence of ChunkModels
        """
        stmt = (
            select(ChunkModel)
            .where(ChunkModel.content_item_id == content_item_id)
            .order_by(ChunkModel.chunk_index)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count(
        self,
        session: AsyncSession,
        content_item_id: UUID | None = None,
    ) -> int:
        """
        Count chunks, optionally for a single item.

        Args:
            session: Async database session
            content_item_id: Restrict to this item when given

        Returns:
            Chunk count
        """
        stmt = select(func.count()).select_from(ChunkModel)
        if content_item_id is not None:
            stmt = stmt.where(ChunkModel.content_item_id == content_item_id)
        result = await session.execute(stmt)
        return result.scalar_one()


chunk_crud = ChunkCRUD()
