"""
Content item ORM model.

Stores crawled documents pushed by the upstream crawler and tracks
their progress through the chunking stage.

Dependencies: sqlalchemy, newsdigest.boundary.db.base, newsdigest.models.enums
System role: Entry point of the pipeline state store
"""

from datetime import datetime

from sqlalchemy import DateTime, Enum, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from newsdigest.boundary.db.base import Base, JSONType, TimestampMixin, UUIDMixin
from newsdigest.models.enums import ContentKind, ContentStatus


class ContentItemModel(Base, UUIDMixin, TimestampMixin):
    """
    Crawled document awaiting chunking and summarization.

    Attributes:
        id: UUID primary key (auto-generated)
        url: Canonical source URL (unique natural key)
        title: Document title
        raw_text: Full extracted text
        code_snippets: JSON list of code snippets extracted by the crawler
        content_kind: ARTICLE/CODE/MIXED classification
        total_tokens: Estimated token count of raw_text
        status: PENDING/CHUNKED/FAILED/AGGREGATION_FAILED
        error_message: Last failure reason (None unless failed)
        crawled_at: When the crawler fetched the document
        created_at: Ingestion timestamp; drives FIFO batch selection
        updated_at: Last status change

    Constraints:
        url: UNIQUE; re-ingesting the same URL updates in place and
             resets status to PENDING

    Workflow:
        1. Crawler pushes document, row upserted with status=PENDING
        2. Chunking stage persists chunks and groups, status → CHUNKED
        3. Any chunking error, status → FAILED with error_message
        4. Aggregator finds nothing to summarize, status → AGGREGATION_FAILED
    """

    __tablename__ = "content_items"
    __table_args__ = (
        Index("ix_content_items_status_created_at", "status", "created_at"),
    )

    url: Mapped[str] = mapped_column(
        String(2048),
        nullable=False,
        unique=True,
    )

    title: Mapped[str] = mapped_column(
        String(1024),
        nullable=False,
        default="",
    )

    raw_text: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    code_snippets: Mapped[list[str]] = mapped_column(
        JSONType,
        nullable=False,
        default=list,
    )

    content_kind: Mapped[ContentKind] = mapped_column(
        Enum(ContentKind, native_enum=False),
        nullable=False,
        default=ContentKind.ARTICLE,
    )

    total_tokens: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
    )

    status: Mapped[ContentStatus] = mapped_column(
        Enum(ContentStatus, native_enum=False),
        nullable=False,
        default=ContentStatus.PENDING,
    )

    error_message: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        doc="Failure reason recorded when the item leaves the happy path",
    )

    crawled_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
