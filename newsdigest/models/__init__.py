"""
Domain models and API schemas.

Exports shared enumerations and the pydantic request/response schemas.
"""

from newsdigest.models.content import ContentIngestResponse, ContentItemResponse, CrawledDocument
from newsdigest.models.enums import ContentKind, ContentStatus, GroupStatus, Sentiment
from newsdigest.models.pipeline import PipelineStatus
from newsdigest.models.summary import SummaryListResponse, SummaryResponse

__all__ = [
    "ContentIngestResponse",
    "ContentItemResponse",
    "ContentKind",
    "ContentStatus",
    "CrawledDocument",
    "GroupStatus",
    "PipelineStatus",
    "Sentiment",
    "SummaryListResponse",
    "SummaryResponse",
]
