"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - ContentItemModel, ChunkModel, ChunkGroupModel, PartialSummaryModel, SummaryModel: Pipeline entities
  - content_item_crud, chunk_crud, chunk_group_crud, partial_summary_crud, summary_crud: CRUD singletons

Dependencies: sqlalchemy, newsdigest.configs
System role: Durable pipeline state store shared by the API and the workers
"""

from newsdigest.boundary.db.base import Base, TimestampMixin, UUIDMixin
from newsdigest.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from newsdigest.boundary.db.models import (
    ChunkGroupModel,
    ChunkModel,
    ContentItemModel,
    PartialSummaryModel,
    SummaryModel,
)
from newsdigest.boundary.db.CRUD import (
    BaseCRUD,
    ChunkCRUD,
    ChunkGroupCRUD,
    ContentItemCRUD,
    PartialSummaryCRUD,
    SummaryCRUD,
    chunk_crud,
    chunk_group_crud,
    content_item_crud,
    partial_summary_crud,
    summary_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "ContentItemModel",
    "ChunkModel",
    "ChunkGroupModel",
    "PartialSummaryModel",
    "SummaryModel",
    # CRUD classes
    "BaseCRUD",
    "ContentItemCRUD",
    "ChunkCRUD",
    "ChunkGroupCRUD",
    "PartialSummaryCRUD",
    "SummaryCRUD",
    # CRUD singletons
    "content_item_crud",
    "chunk_crud",
    "chunk_group_crud",
    "partial_summary_crud",
    "summary_crud",
]
