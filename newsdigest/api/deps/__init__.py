"""API dependencies."""

from .dependencies import (
    get_ingestion_service,
    get_status_service,
    get_summary_service,
)

__all__ = [
    "get_ingestion_service",
    "get_status_service",
    "get_summary_service",
]
