"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: newsdigest.application, newsdigest.boundary
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from newsdigest.application.services import (
    IngestionService,
    PipelineStatusService,
    SummaryService,
)
from newsdigest.boundary.db import get_async_db


def get_ingestion_service(db: AsyncSession = Depends(get_async_db)) -> IngestionService:
    """
    Get ingestion service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        IngestionService: Ingestion service instance
    """
    return IngestionService(db=db)


def get_status_service(db: AsyncSession = Depends(get_async_db)) -> PipelineStatusService:
    """
    Get pipeline status service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        PipelineStatusService: Status service instance
    """
    return PipelineStatusService(db=db)


def get_summary_service(db: AsyncSession = Depends(get_async_db)) -> SummaryService:
    """
    Get summary service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        SummaryService: Summary service instance
    """
    return SummaryService(db=db)
