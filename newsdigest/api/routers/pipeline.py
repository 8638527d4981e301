"""
Pipeline status API endpoints.

Routes: GET /pipeline/status

Dependencies: newsdigest.application.status_service
System role: Pipeline monitoring HTTP API
"""

from fastapi import APIRouter, Depends

from newsdigest.api.deps import get_status_service
from newsdigest.application.services.status_service import PipelineStatusService
from newsdigest.models.pipeline import PipelineStatus

router = APIRouter(prefix="/pipeline", tags=["pipeline"])


@router.get("/status", response_model=PipelineStatus)
async def get_pipeline_status(
    status_service: PipelineStatusService = Depends(get_status_service),
) -> PipelineStatus:
    """
    Get counts across the pipeline state store.

    Example Response:
        {
            "content_items": {"pending": 3, "chunked": 40, "failed": 1, "aggregation_failed": 0},
            "pending_tokens": 5120,
            "total_chunks": 212,
            "chunk_groups": {"pending": 6, "summarized": 101, "failed": 2},
            "items_awaiting_summary": 2,
            "total_summaries": 38,
            "summaries_last_24h": 12
        }
    """
    return await status_service.get_status()
