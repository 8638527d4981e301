"""
Partial summary ORM model.

Durable staging buffer for per-group summaries. Rows survive process
restarts and are cleared once the final summary for their content item
has been written.

Dependencies: sqlalchemy, newsdigest.boundary.db.base
System role: Staging area between group summarization and final merge
"""

import uuid

from sqlalchemy import Enum, ForeignKey, Integer, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from newsdigest.boundary.db.base import Base, JSONType, TimestampMixin, UUIDMixin
from newsdigest.models.enums import Sentiment


class PartialSummaryModel(Base, UUIDMixin, TimestampMixin):
    """
    Summary of one chunk group, awaiting aggregation.

    Attributes:
        id: UUID primary key
        content_item_id: Owning content item (CASCADE on delete)
        chunk_group_id: Group this partial summarizes
        group_index: Copied from the group; defines merge order
        summary: Summary text
        key_points: JSON list of key point strings
        category: Free-form topic label
        sentiment: POSITIVE/NEGATIVE/NEUTRAL
        original_text: The group's combined text

    Constraints:
        (content_item_id, group_index): UNIQUE; re-summarizing a group
        replaces its staged partial
    """

    __tablename__ = "partial_summaries"
    __table_args__ = (
        UniqueConstraint("content_item_id", "group_index", name="uq_partial_summaries_item_index"),
    )

    content_item_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("content_items.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    chunk_group_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("chunk_groups.id", ondelete="CASCADE"),
        nullable=False,
    )

    group_index: Mapped[int] = mapped_column(Integer, nullable=False)

    summary: Mapped[str] = mapped_column(Text, nullable=False)

    key_points: Mapped[list[str]] = mapped_column(JSONType, nullable=False, default=list)

    category: Mapped[str] = mapped_column(String(255), nullable=False, default="General")

    sentiment: Mapped[Sentiment] = mapped_column(
        Enum(Sentiment, native_enum=False),
        nullable=False,
        default=Sentiment.NEUTRAL,
    )

    original_text: Mapped[str] = mapped_column(Text, nullable=False, default="")
