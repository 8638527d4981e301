"""
Pipeline status schema.

Dependencies: pydantic
System role: Operational snapshot of the pipeline state store
"""

from pydantic import BaseModel, Field


class PipelineStatus(BaseModel):
    """Counts across every pipeline table."""

    content_items: dict[str, int] = Field(description="Content item count per status")
    pending_tokens: int = Field(description="Estimated tokens awaiting chunking")
    total_chunks: int
    chunk_groups: dict[str, int] = Field(description="Chunk group count per status")
    items_awaiting_summary: int = Field(description="Content items with pending groups")
    total_summaries: int
    summaries_last_24h: int
