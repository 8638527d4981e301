"""
Chunk ORM model.

One bounded, boundary-aligned segment of a content item's text.

Dependencies: sqlalchemy, newsdigest.boundary.db.base
System role: Output of the chunk packer, input of the group builder
"""

import uuid

from sqlalchemy import Enum, ForeignKey, Integer, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from newsdigest.boundary.db.base import Base, TimestampMixin, UUIDMixin
from newsdigest.models.enums import ContentKind


class ChunkModel(Base, UUIDMixin, TimestampMixin):
    """
    Persisted chunk of a content item.

    Attributes:
        id: UUID primary key
        content_item_id: Owning content item (CASCADE on delete)
        chunk_index: 0-based position; contiguous 0..N-1 per item
        chunk_text: Trimmed chunk text, never empty
        token_count: Estimated tokens of chunk_text
        content_kind: Copied from the owning content item

    Constraints:
        (content_item_id, chunk_index): UNIQUE; re-chunking overwrites in place
    """

    __tablename__ = "content_chunks"
    __table_args__ = (
        UniqueConstraint("content_item_id", "chunk_index", name="uq_content_chunks_item_index"),
    )

    content_item_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("content_items.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    chunk_index: Mapped[int] = mapped_column(Integer, nullable=False)

    chunk_text: Mapped[str] = mapped_column(Text, nullable=False)

    token_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    content_kind: Mapped[ContentKind] = mapped_column(
        Enum(ContentKind, native_enum=False),
        nullable=False,
        default=ContentKind.ARTICLE,
    )
