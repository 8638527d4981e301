"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from newsdigest.configs.chunking import ChunkingSettings
from newsdigest.configs.database import DatabaseSettings
from newsdigest.configs.settings import Settings, get_settings
from newsdigest.configs.summarizer import SummarizerSettings
from newsdigest.configs.workers import WorkerSettings

__all__ = [
    "ChunkingSettings",
    "DatabaseSettings",
    "Settings",
    "SummarizerSettings",
    "WorkerSettings",
    "get_settings",
]
