"""API routers."""

from .content import router as content_router
from .health import router as health_router
from .pipeline import router as pipeline_router
from .summaries import router as summaries_router

__all__ = [
    "content_router",
    "health_router",
    "pipeline_router",
    "summaries_router",
]
