"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from newsdigest.boundary.db.CRUD import content_item_crud, summary_crud

    # Use singleton instances
    items = await content_item_crud.get_pending(db, limit=5)

    # Or instantiate classes directly for custom behavior
    from newsdigest.boundary.db.CRUD import SummaryCRUD
    custom_crud = SummaryCRUD()
"""

from newsdigest.boundary.db.CRUD.base_crud import BaseCRUD
from newsdigest.boundary.db.CRUD.content_item_crud import ContentItemCRUD, content_item_crud
from newsdigest.boundary.db.CRUD.chunk_crud import ChunkCRUD, chunk_crud
from newsdigest.boundary.db.CRUD.chunk_group_crud import ChunkGroupCRUD, chunk_group_crud
from newsdigest.boundary.db.CRUD.partial_summary_crud import PartialSummaryCRUD, partial_summary_crud
from newsdigest.boundary.db.CRUD.summary_crud import SummaryCRUD, summary_crud

__all__ = [
    "BaseCRUD",
    "ContentItemCRUD",
    "content_item_crud",
    "ChunkCRUD",
    "chunk_crud",
    "ChunkGroupCRUD",
    "chunk_group_crud",
    "PartialSummaryCRUD",
    "partial_summary_crud",
    "SummaryCRUD",
    "summary_crud",
]
