"""
Shared settings foundation.

Every settings group reads the same .env file and ignores unrelated keys,
so the worker process and the API can share one environment. The process
level fields here are read by both entry points when logging starts.

Dependencies: pydantic, pydantic_settings
System role: Parent of every newsdigest settings group
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Settings parent carrying the .env source and process level fields."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment name reported when the worker or API starts",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level for the worker and API processes",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if not isinstance(logging.getLevelName(normalized), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalized
