"""Service orchestrators."""

from .ingestion_service import IngestionService
from .status_service import PipelineStatusService
from .summary_service import SummaryService

__all__ = [
    "IngestionService",
    "PipelineStatusService",
    "SummaryService",
]
