"""
LLM-backed summarizer.

Summarizes chunk group text and merges partial summaries using Google
Generative AI through LangChain. Responses are expected as JSON; anything
unparseable degrades to a deterministic fallback instead of failing.

Dependencies: langchain_google_genai, langchain_core
System role: External summarization capability for the summary aggregator
"""

import json
import logging
import re
from typing import Any, Sequence

from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI
from pydantic import ValidationError

from newsdigest.configs.summarizer import SummarizerSettings
from newsdigest.core.exceptions import AggregationError, SummarizationError
from newsdigest.core.summarization.prompts import MERGE_PROMPT, get_group_prompt
from newsdigest.core.summarization.schema import SummaryContext, SummaryResult
from newsdigest.models.enums import ContentKind, Sentiment

logger = logging.getLogger(__name__)

TRUNCATION_MARKER = "...[truncated]"
FALLBACK_SUMMARY_CHARS = 500
FALLBACK_KEY_POINT = "Content analysis available"
MERGE_FALLBACK_KEY_POINTS = 6

_CODE_FENCE_RE = re.compile(r"^\s*```(?:json)?\s*|\s*```\s*$")


def truncate_input(text: str, max_chars: int) -> str:
    """Cut text to max_chars, appending a marker when anything was dropped."""
    if len(text) <= max_chars:
        return text
    return f"{text[:max_chars]} {TRUNCATION_MARKER}"


def strip_code_fences(text: str) -> str:
    """Remove markdown code fences wrapped around a JSON payload."""
    return _CODE_FENCE_RE.sub("", text).strip()


def response_text(content: Any) -> str:
    """
    Flatten a chat model response content into plain text.

    Gemini models may return a list of content parts instead of a string.
    """
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type", "text") == "text":
                parts.append(str(part.get("text", "")))
        return "".join(parts)
    return "" if content is None else str(content)


def pool_key_points(partials: Sequence[SummaryResult]) -> list[str]:
    """
    Pool key points across partials in order.

    Blank points are dropped and repeats keep their first position.
    """
    pooled: list[str] = []
    seen: set[str] = set()
    for partial in partials:
        for point in partial.key_points:
            normalized = point.strip()
            if normalized and normalized not in seen:
                seen.add(normalized)
                pooled.append(normalized)
    return pooled


def fallback_summary(raw: str, content_kind: ContentKind) -> SummaryResult:
    """Build the degraded result for an unparseable group response."""
    return SummaryResult(
        summary=raw[:FALLBACK_SUMMARY_CHARS],
        key_points=[FALLBACK_KEY_POINT],
        category="Programming" if content_kind == ContentKind.CODE else "General",
        sentiment=Sentiment.NEUTRAL,
    )


def parse_summary_response(raw: str, content_kind: ContentKind) -> SummaryResult:
    """
    Parse a chunk group response.

    Args:
        raw: Raw model output
        content_kind: Kind of the summarized content (drives fallback category)

    Returns:
        SummaryResult: Parsed result, or the fallback when output is not a JSON object
    """
    try:
        data = json.loads(strip_code_fences(raw))
        if not isinstance(data, dict):
            raise ValueError(f"Expected JSON object, got {type(data).__name__}")
        return SummaryResult.model_validate(data)

    except (json.JSONDecodeError, ValidationError, ValueError) as e:
        logger.warning(f"{__name__}:parse_summary_response - Falling back: {type(e).__name__}: {e}")
        logger.debug(f"{__name__}:parse_summary_response - Raw response: {raw}")
        return fallback_summary(raw, content_kind)


def parse_merge_response(
    raw: str,
    partials: Sequence[SummaryResult],
    pooled_key_points: list[str],
) -> SummaryResult:
    """
    Parse a merge response.

    Missing fields are filled from the first partial and the pooled key
    points. Unparseable output falls back to those values entirely.

    Args:
        raw: Raw model output
        partials: Partial summaries in merge order (non-empty)
        pooled_key_points: De-duplicated key points across partials

    Returns:
        SummaryResult: Final merged result
    """
    first = partials[0]
    try:
        data = json.loads(strip_code_fences(raw))
        if not isinstance(data, dict):
            raise ValueError(f"Expected JSON object, got {type(data).__name__}")

        if not data.get("keyPoints") and not data.get("key_points"):
            data["key_points"] = pooled_key_points[:MERGE_FALLBACK_KEY_POINTS]
        data.setdefault("category", first.category)
        data.setdefault("sentiment", first.sentiment)
        if not data.get("summary"):
            data["summary"] = "Final summary not available"
        return SummaryResult.model_validate(data)

    except (json.JSONDecodeError, ValidationError, ValueError) as e:
        logger.warning(f"{__name__}:parse_merge_response - Falling back: {type(e).__name__}: {e}")
        logger.debug(f"{__name__}:parse_merge_response - Raw response: {raw}")
        return SummaryResult(
            summary=first.summary,
            key_points=pooled_key_points[:MERGE_FALLBACK_KEY_POINTS],
            category=first.category,
            sentiment=first.sentiment,
        )


class LLMSummarizer:
    """
    Summarizer backed by a LangChain chat model.

    Usage:
        summarizer = LLMSummarizer(get_settings().summarizer)
        result = await summarizer.summarize(
            text=group.combined_text,
            context=SummaryContext(title="...", content_kind=ContentKind.ARTICLE),
        )
    """

    def __init__(
        self,
        settings: SummarizerSettings,
        llm: BaseChatModel | None = None,
        merge_llm: BaseChatModel | None = None,
    ) -> None:
        """
        Initialize summarizer.

        Args:
            settings: Model, language and prompt limits
            llm: Chat model for chunk group calls (Gemini when None)
            merge_llm: Chat model for merge calls (Gemini with the merge
                output cap when None)
        """
        self._settings = settings
        self._llm = llm or ChatGoogleGenerativeAI(
            model=settings.model_id,
            temperature=settings.temperature,
            max_output_tokens=settings.max_output_tokens,
        )
        self._merge_llm = merge_llm or llm or ChatGoogleGenerativeAI(
            model=settings.model_id,
            temperature=settings.temperature,
            max_output_tokens=settings.merge_max_output_tokens,
        )
        logger.info(f"{__name__}:__init__ - Initialized summarizer with {settings.model_id}")

    async def summarize(self, text: str, context: SummaryContext) -> SummaryResult:
        """
        Summarize one chunk group.

        Args:
            text: Group combined text
            context: Title, kind and part position

        Returns:
            SummaryResult: Parsed or fallback summary

        Raises:
            SummarizationError: If the model call fails or returns nothing
        """
        prompt = get_group_prompt(context.content_kind)
        messages = prompt.format_messages(
            language=self._settings.summary_language,
            context_info=context.describe(),
            content_kind=context.content_kind.value,
            content=truncate_input(text, self._settings.max_input_chars),
        )

        try:
            response = await self._llm.ainvoke(messages)
        except Exception as e:
            logger.error(f"{__name__}:summarize - {type(e).__name__}: {e}")
            raise SummarizationError(
                f"Summarizer call failed: {e}",
                details={"title": context.title, "part": context.part_number},
            ) from e

        raw = response_text(response.content)
        if not raw.strip():
            raise SummarizationError(
                "Empty response from summarizer",
                details={"title": context.title, "part": context.part_number},
            )

        return parse_summary_response(raw, context.content_kind)

    async def merge(
        self,
        partials: Sequence[SummaryResult],
        context: SummaryContext,
    ) -> SummaryResult:
        """
        Merge partial summaries into one final summary.

        Args:
            partials: Partial summaries in ascending group order
            context: Title and kind of the content item

        Returns:
            SummaryResult: Parsed or fallback merged summary

        Raises:
            AggregationError: If there is nothing to merge, or the model call
                fails or returns nothing
        """
        if not partials:
            raise AggregationError("No partial summaries to merge", details={"title": context.title})

        pooled = pool_key_points(partials)
        messages = MERGE_PROMPT.format_messages(
            language=self._settings.summary_language,
            title=context.title,
            content_kind=context.content_kind.value,
            partial_summaries="\n\n".join(
                f"Part {i}: {partial.summary}" for i, partial in enumerate(partials, start=1)
            ),
            key_points="\n".join(f"• {point}" for point in pooled),
        )

        try:
            response = await self._merge_llm.ainvoke(messages)
        except Exception as e:
            logger.error(f"{__name__}:merge - {type(e).__name__}: {e}")
            raise AggregationError(
                f"Merge call failed: {e}",
                details={"title": context.title, "parts": len(partials)},
            ) from e

        raw = response_text(response.content)
        if not raw.strip():
            raise AggregationError(
                "Empty response from summarizer during merge",
                details={"title": context.title, "parts": len(partials)},
            )

        return parse_merge_response(raw, partials, pooled)
