"""
Database models package.

Exports:
  - ContentItemModel: Crawled document and its chunking status
  - ChunkModel: Boundary-aligned segment of a content item
  - ChunkGroupModel: Window of chunks summarized together
  - PartialSummaryModel: Durable staging row for a group summary
  - SummaryModel: Final per-URL summary

Dependencies: sqlalchemy, newsdigest.boundary.db.base
System role: Database model definitions for pipeline entities
"""

from newsdigest.boundary.db.models.content_item_model import ContentItemModel
from newsdigest.boundary.db.models.chunk_model import ChunkModel
from newsdigest.boundary.db.models.chunk_group_model import ChunkGroupModel
from newsdigest.boundary.db.models.partial_summary_model import PartialSummaryModel
from newsdigest.boundary.db.models.summary_model import SummaryModel

__all__ = [
    "ContentItemModel",
    "ChunkModel",
    "ChunkGroupModel",
    "PartialSummaryModel",
    "SummaryModel",
]
