"""
Final summary ORM model.

One row per URL holding the finished digest of a content item.

Dependencies: sqlalchemy, newsdigest.boundary.db.base
System role: Pipeline output, served by the read API
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Enum, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from newsdigest.boundary.db.base import Base, JSONType, TimestampMixin, UUIDMixin, utcnow
from newsdigest.models.enums import ContentKind, Sentiment


class SummaryModel(Base, UUIDMixin, TimestampMixin):
    """
    Final summary of a content item.

    Attributes:
        id: UUID primary key
        url: Source URL (unique natural key, one final summary per URL)
        title: Content item title
        original_text: Source text (truncated) the summary was produced from
        summary: Summary text
        key_points: JSON list of key point strings
        code_snippets: JSON list copied from the content item
        content_kind: ARTICLE/CODE/MIXED
        sentiment: POSITIVE/NEGATIVE/NEUTRAL
        category: Topic label
        content_item_id: Source content item
        chunk_group_id: Set only when a single partial was promoted directly
        is_partial: Always False for rows written by the aggregator
        crawled_at: Copied from the content item
        summarized_at: When the summary was written
    """

    __tablename__ = "summaries"

    url: Mapped[str] = mapped_column(String(2048), nullable=False, unique=True)

    title: Mapped[str] = mapped_column(String(1024), nullable=False, default="")

    original_text: Mapped[str] = mapped_column(Text, nullable=False, default="")

    summary: Mapped[str] = mapped_column(Text, nullable=False)

    key_points: Mapped[list[str]] = mapped_column(JSONType, nullable=False, default=list)

    code_snippets: Mapped[list[str]] = mapped_column(JSONType, nullable=False, default=list)

    content_kind: Mapped[ContentKind] = mapped_column(
        Enum(ContentKind, native_enum=False),
        nullable=False,
        default=ContentKind.ARTICLE,
    )

    sentiment: Mapped[Sentiment] = mapped_column(
        Enum(Sentiment, native_enum=False),
        nullable=False,
        default=Sentiment.NEUTRAL,
    )

    category: Mapped[str] = mapped_column(String(255), nullable=False, default="General")

    content_item_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("content_items.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    chunk_group_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("chunk_groups.id", ondelete="SET NULL"),
        nullable=True,
    )

    is_partial: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    crawled_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    summarized_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        index=True,
    )
