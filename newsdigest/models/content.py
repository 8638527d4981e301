"""
Content ingestion schemas.

Request/response schemas for pushing crawled documents into the pipeline.

Dependencies: pydantic
System role: Ingestion API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from newsdigest.models.enums import ContentKind, ContentStatus


class CrawledDocument(BaseModel):
    """Crawled document pushed by the upstream crawler."""

    url: str = Field(min_length=1, max_length=2048, description="Canonical source URL")
    title: str = Field(default="", max_length=1024, description="Document title")
    raw_text: str = Field(description="Full extracted text")
    code_snippets: list[str] = Field(default_factory=list, description="Code snippets extracted by the crawler")
    content_kind: ContentKind | None = Field(
        default=None,
        description="Document kind; classified from code_snippets when omitted",
    )
    crawled_at: datetime | None = Field(default=None, description="When the document was fetched")


class ContentIngestResponse(BaseModel):
    """Response schema for an accepted document."""

    id: uuid.UUID
    url: str
    content_kind: ContentKind
    total_tokens: int
    status: ContentStatus


class ContentItemResponse(ContentIngestResponse):
    """Processing state of a stored content item."""

    model_config = ConfigDict(from_attributes=True)

    title: str
    error_message: str | None = None
    created_at: datetime
    updated_at: datetime
