"""
Exception hierarchy for the newsdigest pipeline.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class NewsDigestException(Exception):
    """Base exception for all newsdigest errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(NewsDigestException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class ContentItemNotFoundError(NewsDigestException):
    """Raised when a content item cannot be found."""

    def __init__(self, content_item_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["content_item_id"] = content_item_id
        super().__init__(f"Content item not found: {content_item_id}", details)


class SummaryNotFoundError(NewsDigestException):
    """Raised when a final summary cannot be found."""

    def __init__(self, summary_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["summary_id"] = summary_id
        super().__init__(f"Summary not found: {summary_id}", details)


class ChunkingError(NewsDigestException):
    """Raised when a content item cannot be chunked or grouped."""

    def __init__(
        self,
        message: str,
        content_item_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize chunking error.

        Args:
            message: Error message
            content_item_id: ID of the content item that failed
            details: Additional context
        """
        details = details or {}
        if content_item_id:
            details["content_item_id"] = content_item_id
        super().__init__(message, details)


class SummarizationError(NewsDigestException):
    """Raised when the summarizer returns nothing usable for a call."""

    pass


class AggregationError(NewsDigestException):
    """Raised when partial summaries cannot be merged into a final summary."""

    pass
