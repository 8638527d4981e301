"""
Content ingestion API endpoints.

Routes: POST /content, GET /content/{id}

Dependencies: newsdigest.application.ingestion_service, newsdigest.models
System role: Upstream crawler push HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from newsdigest.api.deps import get_ingestion_service
from newsdigest.application.services.ingestion_service import IngestionService
from newsdigest.core.exceptions import ContentItemNotFoundError, ValidationError
from newsdigest.models.content import ContentIngestResponse, ContentItemResponse, CrawledDocument

router = APIRouter(prefix="/content", tags=["content"])


@router.post("", response_model=ContentIngestResponse, status_code=status.HTTP_201_CREATED)
async def ingest_content(
    document: CrawledDocument,
    ingestion_service: IngestionService = Depends(get_ingestion_service),
) -> ContentIngestResponse:
    """
    Queue a crawled document for chunking and summarization.

    Re-posting a known URL replaces the stored document and restarts
    its processing.

    Args:
        document: Crawled document
        ingestion_service: Injected IngestionService

    Returns:
        ContentIngestResponse: Stored content item id, kind and token estimate

    Raises:
        HTTPException(422): Document text is empty
    """
    try:
        item = await ingestion_service.ingest(document)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.message)

    return ContentIngestResponse(
        id=item.id,
        url=item.url,
        content_kind=item.content_kind,
        total_tokens=item.total_tokens,
        status=item.status,
    )


@router.get("/{content_item_id}", response_model=ContentItemResponse)
async def get_content_item(
    content_item_id: UUID,
    ingestion_service: IngestionService = Depends(get_ingestion_service),
) -> ContentItemResponse:
    """
    Get the processing state of a content item.

    Raises:
        HTTPException(404): Content item not found
    """
    try:
        item = await ingestion_service.get_item(content_item_id)
    except ContentItemNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return ContentItemResponse.model_validate(item)
