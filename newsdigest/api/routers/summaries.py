"""
Summary API endpoints.

Routes: GET /summaries, GET /summaries/{id}

Dependencies: newsdigest.application.summary_service, newsdigest.models
System role: Final summary read HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query

from newsdigest.api.deps import get_summary_service
from newsdigest.application.services.summary_service import SummaryService
from newsdigest.core.exceptions import SummaryNotFoundError
from newsdigest.models.summary import SummaryListResponse, SummaryResponse

router = APIRouter(prefix="/summaries", tags=["summaries"])


@router.get("", response_model=SummaryListResponse)
async def list_summaries(
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    summary_service: SummaryService = Depends(get_summary_service),
) -> SummaryListResponse:
    """
    List final summaries, most recently summarized first.

    Args:
        limit: Page size (1-100)
        offset: Rows to skip
        summary_service: Injected SummaryService

    Returns:
        SummaryListResponse: Page of summaries with the overall total
    """
    summaries, total = await summary_service.list_summaries(limit=limit, offset=offset)
    return SummaryListResponse(
        summaries=[SummaryResponse.model_validate(summary) for summary in summaries],
        total=total,
        limit=limit,
        offset=offset,
    )


@router.get("/{summary_id}", response_model=SummaryResponse)
async def get_summary(
    summary_id: UUID,
    summary_service: SummaryService = Depends(get_summary_service),
) -> SummaryResponse:
    """
    Get one final summary.

    Raises:
        HTTPException(404): Summary not found
    """
    try:
        summary = await summary_service.get_summary(summary_id)
    except SummaryNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    return SummaryResponse.model_validate(summary)
