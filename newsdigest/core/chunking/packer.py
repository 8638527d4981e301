"""
Chunk packing.

Walks ordered text boundaries under a token budget and emits overlapping,
boundary-aligned chunks. Falls back to fixed-width character slicing when
the text offers no natural split points.

Dependencies: newsdigest.core.chunking.boundaries, newsdigest.core.chunking.tokens
System role: Second step of segmentation, produces chunk texts for persistence
"""

import logging
from typing import TYPE_CHECKING, Sequence

from newsdigest.core.chunking.boundaries import (
    TextBoundary,
    find_text_boundaries,
    terminal_boundary,
)
from newsdigest.core.chunking.tokens import CHARS_PER_TOKEN, estimate_tokens

if TYPE_CHECKING:
    from newsdigest.configs.chunking import ChunkingSettings

logger = logging.getLogger(__name__)


class ChunkPacker:
    """
    Pack text segments between boundaries into chunks.

    The maximum size is a soft limit: a chunk still below the minimum
    absorbs the next segment even when that overflows the maximum, so
    undersized chunks are only produced at the end of a document.
    """

    def __init__(self, settings: "ChunkingSettings") -> None:
        """
        Initialize packer with token budgets.

        Args:
            settings: Chunking settings (token budgets and derived char budgets)
        """
        self._settings = settings

    def pack(
        self,
        text: str,
        boundaries: Sequence[TextBoundary] | None = None,
    ) -> list[str]:
        """
        Split text into trimmed chunks.

        Args:
            text: Raw document text
            boundaries: Pre-computed boundaries; detected from text when None

        Returns:
            list[str]: Chunk texts in document order
        """
        if boundaries is None:
            boundaries = find_text_boundaries(text)

        if text and not boundaries:
            logger.debug(f"{__name__}:pack - No boundaries found, using fixed-width slicing")
            return self.fallback_slices(text)

        max_tokens = self._settings.max_tokens_per_chunk
        min_tokens = self._settings.min_tokens_per_chunk
        overlap_tokens = self._settings.overlap_tokens

        chunks: list[str] = []
        current = ""
        current_tokens = 0
        last_offset = 0

        for boundary in [*boundaries, terminal_boundary(text)]:
            segment = text[last_offset:boundary.offset]
            segment_tokens = estimate_tokens(segment)

            if current and current_tokens + segment_tokens > max_tokens:
                # Measured on the text that would be emitted
                if estimate_tokens(current.strip()) >= min_tokens:
                    self._emit(chunks, current)
                    if overlap_tokens > 0:
                        current = self.overlap_seed(current) + segment
                        current_tokens = estimate_tokens(current)
                    else:
                        current = segment
                        current_tokens = segment_tokens
                else:
                    # Under the minimum: accept the overflow rather than emit a tiny chunk
                    current += segment
                    current_tokens += segment_tokens
            else:
                current += segment
                current_tokens += segment_tokens

            last_offset = boundary.offset

        self._emit(chunks, current)

        if not chunks and text:
            logger.debug(f"{__name__}:pack - Boundary walk produced no chunks, using fixed-width slicing")
            return self.fallback_slices(text)

        return chunks

    def fallback_slices(self, text: str) -> list[str]:
        """
        Slide a fixed-width character window across text.

        Args:
            text: Raw document text

        Returns:
            list[str]: Non-empty trimmed slices of max_chars_per_chunk characters,
                stepped by max_chars_per_chunk - overlap_chars
        """
        width = self._settings.max_chars_per_chunk
        step = width - self._settings.overlap_chars

        slices = []
        for start in range(0, len(text), step):
            piece = text[start:start + width].strip()
            if piece:
                slices.append(piece)
        return slices

    def overlap_seed(self, chunk: str) -> str:
        """
        Take the trailing context of a finalized chunk.

        Prefers to start just after the last ". " in the trailing window so
        the next chunk does not open mid-sentence.

        Args:
            chunk: The chunk that was just finalized (untrimmed)

        Returns:
            str: Text to prepend to the next chunk
        """
        overlap_chars = self._settings.overlap_tokens * CHARS_PER_TOKEN
        if len(chunk) <= overlap_chars:
            return chunk

        start = len(chunk) - overlap_chars
        window = chunk[start:]

        sentence_end = window.rfind(". ")
        if sentence_end > overlap_chars / 2:
            return chunk[start + sentence_end + 2:]

        return window

    @staticmethod
    def _emit(chunks: list[str], text: str) -> None:
        stripped = text.strip()
        if stripped:
            chunks.append(stripped)
