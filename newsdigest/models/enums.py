"""
Shared enumerations for pipeline state.

Closed sets of values for content kinds, lifecycle statuses and sentiment.
Persisted as non-native SQL enums so PostgreSQL and SQLite share a schema.

Dependencies: enum (stdlib)
System role: Domain vocabulary shared by core, persistence and API layers
"""

import enum


class ContentKind(str, enum.Enum):
    """
    Kind of crawled document.

    ARTICLE: Prose without extracted code
    CODE: Predominantly code (more than three snippets)
    MIXED: Prose with some code snippets
    """

    ARTICLE = "article"
    CODE = "code"
    MIXED = "mixed"


class ContentStatus(str, enum.Enum):
    """
    Content item lifecycle states.

    PENDING: Ingested, awaiting chunking
    CHUNKED: Chunks and groups persisted, summarization may proceed
    FAILED: Chunking or persistence error; error_message holds details
    AGGREGATION_FAILED: Every chunk group failed, no final summary possible
    """

    PENDING = "pending"
    CHUNKED = "chunked"
    FAILED = "failed"
    AGGREGATION_FAILED = "aggregation_failed"


class GroupStatus(str, enum.Enum):
    """
    Chunk group lifecycle states.

    PENDING: Awaiting a summarizer call
    SUMMARIZED: Partial summary staged
    FAILED: Summarizer call failed for this group
    """

    PENDING = "pending"
    SUMMARIZED = "summarized"
    FAILED = "failed"


class Sentiment(str, enum.Enum):
    """Overall tone reported by the summarizer."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
