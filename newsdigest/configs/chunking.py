"""
Chunking configuration settings.

Token budgets for the chunk packer and group builder. Character budgets
are derived at the fixed 4-characters-per-token ratio and only drive the
fixed-width fallback path.

Dependencies: pydantic, pydantic_settings
System role: Sizing knobs for segmentation and grouping
"""

from pydantic import Field, model_validator
from pydantic_settings import SettingsConfigDict

from newsdigest.configs.base import BaseSettings
from newsdigest.core.chunking.tokens import CHARS_PER_TOKEN


class ChunkingSettings(BaseSettings):
    """Chunk and group sizing configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CHUNKING_",
        case_sensitive=False,
        extra="ignore",
    )

    max_tokens_per_chunk: int = Field(
        default=1200,
        gt=0,
        description="Soft upper bound on chunk size in tokens",
    )
    min_tokens_per_chunk: int = Field(
        default=300,
        ge=0,
        description="Chunks are only finalized once they reach this size",
    )
    overlap_tokens: int = Field(
        default=100,
        ge=0,
        description="Trailing context seeded into the next chunk",
    )
    chunks_per_group: int = Field(
        default=2,
        ge=1,
        description="Step between consecutive group windows",
    )
    max_chunks_per_group: int = Field(
        default=3,
        ge=1,
        description="Width of each group window",
    )

    @property
    def max_chars_per_chunk(self) -> int:
        """Fallback slice width in characters."""
        return self.max_tokens_per_chunk * CHARS_PER_TOKEN

    @property
    def min_chars_per_chunk(self) -> int:
        """Character equivalent of the minimum chunk size."""
        return self.min_tokens_per_chunk * CHARS_PER_TOKEN

    @property
    def overlap_chars(self) -> int:
        """Fallback slice overlap in characters."""
        return self.overlap_tokens * CHARS_PER_TOKEN

    @model_validator(mode="after")
    def _check_budgets(self) -> "ChunkingSettings":
        if self.min_tokens_per_chunk > self.max_tokens_per_chunk:
            raise ValueError("min_tokens_per_chunk must not exceed max_tokens_per_chunk")
        if self.overlap_tokens >= self.max_tokens_per_chunk:
            raise ValueError("overlap_tokens must be smaller than max_tokens_per_chunk")
        if self.max_chunks_per_group < self.chunks_per_group:
            raise ValueError("max_chunks_per_group must be >= chunks_per_group")
        return self
