"""
Summary schemas.

Response schemas for reading final summaries.

Dependencies: pydantic
System role: Summary API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from newsdigest.models.enums import ContentKind, Sentiment


class SummaryResponse(BaseModel):
    """Final summary of one URL."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    url: str
    title: str
    summary: str
    key_points: list[str]
    code_snippets: list[str]
    content_kind: ContentKind
    sentiment: Sentiment
    category: str
    content_item_id: uuid.UUID | None = None
    crawled_at: datetime | None = None
    summarized_at: datetime


class SummaryListResponse(BaseModel):
    """Paginated summary list response."""

    summaries: list[SummaryResponse]
    total: int
    limit: int
    offset: int
