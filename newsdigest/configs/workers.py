"""
Worker configuration settings.

Batch sizes and poll backoff timings for the chunking and summarization
stages.

Dependencies: pydantic, pydantic_settings
System role: Batch coordinator tuning
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from newsdigest.configs.base import BaseSettings


class WorkerSettings(BaseSettings):
    """Per-stage batch and backoff configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="WORKER_",
        case_sensitive=False,
        extra="ignore",
    )

    chunker_batch_size: int = Field(default=5, ge=1, description="Content items per chunking batch")
    chunker_idle_delay: float = Field(default=10.0, description="Seconds to wait after an empty batch")
    chunker_busy_delay: float = Field(default=2.0, description="Seconds to wait after a batch with work")
    chunker_error_delay: float = Field(default=15.0, description="Seconds to wait after a failed batch")

    summarizer_batch_size: int = Field(default=3, ge=1, description="Content items per summarization batch")
    summarizer_idle_delay: float = Field(default=15.0, description="Seconds to wait after an empty batch")
    summarizer_busy_delay: float = Field(default=5.0, description="Seconds to wait after a batch with work")
    summarizer_error_delay: float = Field(default=30.0, description="Seconds to wait after a failed batch")
