"""
Summarization data contracts.

SummaryContext describes where a piece of text sits within its article,
SummaryResult is the parsed summarizer output, and Summarizer is the
capability the aggregator depends on.

Dependencies: pydantic
System role: Boundary between the aggregator and the LLM summarizer
"""

from dataclasses import dataclass
from typing import Protocol, Sequence

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from newsdigest.models.enums import ContentKind, Sentiment

CATEGORY_MAX_CHARS = 255


@dataclass(frozen=True)
class SummaryContext:
    """Position of the summarized text within its content item."""

    title: str
    content_kind: ContentKind
    part_number: int = 1
    total_parts: int = 1

    @property
    def is_multi_part(self) -> bool:
        return self.total_parts > 1

    def describe(self) -> str:
        """Human-readable position line injected into prompts."""
        if self.is_multi_part:
            return f'This is part {self.part_number} of {self.total_parts} parts of the article "{self.title}".'
        return f'This is the complete article "{self.title}".'


class SummaryResult(BaseModel):
    """
    Parsed summarizer output.

    Accepts both ``keyPoints`` and ``key_points``. Unknown sentiment labels
    degrade to neutral rather than failing validation.
    """

    model_config = ConfigDict(populate_by_name=True)

    summary: str = Field(default="Summary not available")
    key_points: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("key_points", "keyPoints"),
    )
    category: str = Field(default="General")
    sentiment: Sentiment = Field(default=Sentiment.NEUTRAL)

    @field_validator("summary", mode="before")
    @classmethod
    def _default_empty_summary(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return "Summary not available"
        return value

    @field_validator("key_points", mode="before")
    @classmethod
    def _coerce_key_points(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return [str(point) for point in value if point is not None]

    @field_validator("category", mode="before")
    @classmethod
    def _default_empty_category(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return "General"
        if isinstance(value, str):
            return value.strip()[:CATEGORY_MAX_CHARS]
        return value

    @field_validator("sentiment", mode="before")
    @classmethod
    def _coerce_sentiment(cls, value):
        if isinstance(value, Sentiment):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized in {sentiment.value for sentiment in Sentiment}:
                return normalized
        return Sentiment.NEUTRAL


class Summarizer(Protocol):
    """External summarization capability."""

    async def summarize(self, text: str, context: SummaryContext) -> SummaryResult:
        """Summarize one chunk group's text."""
        ...

    async def merge(
        self,
        partials: Sequence[SummaryResult],
        context: SummaryContext,
    ) -> SummaryResult:
        """Merge ordered partial summaries into one final summary."""
        ...
