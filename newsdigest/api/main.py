"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, newsdigest.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from newsdigest.boundary.db.connection import get_async_engine
from newsdigest.configs import get_settings
from newsdigest.observability import configure_logging

from .routers import (
    content_router,
    health_router,
    pipeline_router,
    summaries_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    logger = logging.getLogger("uvicorn")
    logger.info("newsdigest API starting")

    yield

    # Shutdown
    await get_async_engine().dispose()
    logger.info("Database connections closed")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="newsdigest API",
        description="Ingest crawled content and read chunked LLM summaries",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(content_router, prefix="/api/v1")
    app.include_router(pipeline_router, prefix="/api/v1")
    app.include_router(summaries_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    load_dotenv()
    configure_logging(get_settings().log_level)
    uvicorn.run(
        "newsdigest.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
