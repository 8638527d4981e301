"""
Chunk group ORM model.

A window of consecutive chunks summarized with a single summarizer call.

Dependencies: sqlalchemy, newsdigest.boundary.db.base
System role: Unit of work for the summarization stage
"""

import uuid

from sqlalchemy import Enum, ForeignKey, Index, Integer, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from newsdigest.boundary.db.base import Base, JSONType, TimestampMixin, UUIDMixin
from newsdigest.models.enums import GroupStatus


class ChunkGroupModel(Base, UUIDMixin, TimestampMixin):
    """
    Persisted chunk group.

    Attributes:
        id: UUID primary key
        content_item_id: Owning content item (CASCADE on delete)
        chunk_ids: JSON list of member chunk ids (as strings), in chunk order
        group_index: 0-based window position
        combined_text: Member texts joined with a blank line
        combined_tokens: Sum of member token counts
        status: PENDING/SUMMARIZED/FAILED

    Constraints:
        (content_item_id, group_index): UNIQUE; rebuilding groups resets
        them to PENDING
    """

    __tablename__ = "chunk_groups"
    __table_args__ = (
        UniqueConstraint("content_item_id", "group_index", name="uq_chunk_groups_item_index"),
        Index("ix_chunk_groups_item_status", "content_item_id", "status"),
    )

    content_item_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("content_items.id", ondelete="CASCADE"),
        nullable=False,
    )

    chunk_ids: Mapped[list[str]] = mapped_column(JSONType, nullable=False, default=list)

    group_index: Mapped[int] = mapped_column(Integer, nullable=False)

    combined_text: Mapped[str] = mapped_column(Text, nullable=False)

    combined_tokens: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    status: Mapped[GroupStatus] = mapped_column(
        Enum(GroupStatus, native_enum=False),
        nullable=False,
        default=GroupStatus.PENDING,
    )
