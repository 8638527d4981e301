"""
Core business logic module.

Contains domain business logic, exception hierarchy, and core components:
text segmentation (chunking) and summary generation (summarization).
"""

from newsdigest.core.exceptions import (
    AggregationError,
    ChunkingError,
    ContentItemNotFoundError,
    NewsDigestException,
    SummarizationError,
    SummaryNotFoundError,
    ValidationError,
)

__all__ = [
    "NewsDigestException",
    "ValidationError",
    "ContentItemNotFoundError",
    "SummaryNotFoundError",
    "ChunkingError",
    "SummarizationError",
    "AggregationError",
]
