"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI and the workers.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from newsdigest.configs.base import BaseSettings
from newsdigest.configs.chunking import ChunkingSettings
from newsdigest.configs.database import DatabaseSettings
from newsdigest.configs.summarizer import SummarizerSettings
from newsdigest.configs.workers import WorkerSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    chunking: ChunkingSettings = Field(default_factory=ChunkingSettings)
    summarizer: SummarizerSettings = Field(default_factory=SummarizerSettings)
    workers: WorkerSettings = Field(default_factory=WorkerSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from newsdigest.configs import get_settings
        settings = get_settings()
        batch_size = settings.workers.chunker_batch_size
    """
    return Settings()
