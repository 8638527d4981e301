"""
Summarizer configuration settings.

Model selection, prompt limits and rate limiting for the external
summarization capability.

Dependencies: pydantic_settings
System role: Summarizer configuration for chunk group and merge calls
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from newsdigest.configs.base import BaseSettings


class SummarizerSettings(BaseSettings):
    """Google Generative AI summarizer configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SUMMARIZER_",
        case_sensitive=False,
        extra="ignore",
    )

    model_id: str = Field(
        default="gemini-3-flash-preview",
        description="Google Generative AI model identifier",
    )
    temperature: float = Field(default=0.3, description="Sampling temperature")
    max_output_tokens: int = Field(
        default=3500,
        description="Output token cap for chunk group summaries",
    )
    merge_max_output_tokens: int = Field(
        default=1200,
        description="Output token cap for the final merge call",
    )
    summary_language: str = Field(
        default="English",
        description="Language the summary and key points are written in",
    )
    max_input_chars: int = Field(
        default=12000,
        description="Group text beyond this many characters is truncated in the prompt",
    )
    requests_per_second: float = Field(
        default=1 / 1.5,
        gt=0,
        description="Sustained summarizer call rate shared by the summarization stage",
    )
    burst: int = Field(
        default=1,
        ge=1,
        description="Token bucket capacity",
    )
