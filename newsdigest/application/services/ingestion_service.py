"""
Ingestion service orchestrator.

Accepts crawled documents from the upstream crawler, classifies their
content kind and stores them as PENDING content items.

Dependencies: newsdigest.boundary.db.CRUD, newsdigest.core.chunking
System role: Upstream push into the pipeline state store
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from newsdigest.boundary.db.CRUD.content_item_crud import content_item_crud
from newsdigest.boundary.db.models.content_item_model import ContentItemModel
from newsdigest.core.chunking.tokens import estimate_tokens
from newsdigest.core.exceptions import ContentItemNotFoundError, ValidationError
from newsdigest.models.content import CrawledDocument
from newsdigest.models.enums import ContentKind

logger = logging.getLogger(__name__)

CODE_SNIPPET_THRESHOLD = 3


def classify_content_kind(code_snippets: list[str]) -> ContentKind:
    """
    Classify a document by how much code the crawler extracted.

    Args:
        code_snippets: Extracted snippets

    Returns:
        ContentKind: CODE above three snippets, MIXED with any, ARTICLE otherwise
    """
    if len(code_snippets) > CODE_SNIPPET_THRESHOLD:
        return ContentKind.CODE
    if code_snippets:
        return ContentKind.MIXED
    return ContentKind.ARTICLE


class IngestionService:
    """
    Ingestion service orchestrator.

    Re-ingesting a known URL overwrites the stored document and queues it
    for chunking again.
    """

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize ingestion service.

        Args:
            db: AsyncSession for database operations
        """
        self.db = db

    async def ingest(self, document: CrawledDocument) -> ContentItemModel:
        """
        Store a crawled document as a PENDING content item.

        Args:
            document: Crawled document

        Returns:
            ContentItemModel: Stored content item

        Raises:
            ValidationError: If the document has no text
        """
        if not document.raw_text.strip():
            raise ValidationError("Document text is empty", field="raw_text")

        content_kind = document.content_kind or classify_content_kind(document.code_snippets)

        item = await content_item_crud.upsert_by_url(
            self.db,
            url=document.url,
            title=document.title,
            raw_text=document.raw_text,
            content_kind=content_kind,
            total_tokens=estimate_tokens(document.raw_text),
            code_snippets=document.code_snippets,
            crawled_at=document.crawled_at,
        )
        await self.db.commit()

        logger.info(
            f"{__name__}:ingest - Content item queued",
            extra={"content_item_id": str(item.id), "content_kind": content_kind.value},
        )
        return item

    async def get_item(self, content_item_id: UUID) -> ContentItemModel:
        """
        Retrieve a content item to report its processing state.

        Args:
            content_item_id: Content item UUID

        Returns:
            ContentItemModel

        Raises:
            ContentItemNotFoundError: If no content item has this id
        """
        item = await content_item_crud.get_by_id(self.db, content_item_id)
        if item is None:
            raise ContentItemNotFoundError(str(content_item_id))
        return item
