"""
Text boundary detection.

Scans raw text for candidate split points (paragraph breaks, section
headers, code block edges, sentence ends), each tagged with a priority.

Dependencies: re (stdlib)
System role: First step of segmentation, feeds the chunk packer
"""

import enum
import re
from dataclasses import dataclass


class BoundaryKind(str, enum.Enum):
    """Kind of split point found in text."""

    PARAGRAPH = "paragraph"
    SECTION = "section"
    CODE_BLOCK = "code_block"
    SENTENCE = "sentence"


BOUNDARY_PRIORITIES: dict[BoundaryKind, int] = {
    BoundaryKind.PARAGRAPH: 100,
    BoundaryKind.SECTION: 90,
    BoundaryKind.CODE_BLOCK: 85,
    BoundaryKind.SENTENCE: 50,
}

PARAGRAPH_PATTERN = re.compile(r"\n\s*\n")
SECTION_PATTERN = re.compile(r"^#+[ \t]+\S.*(?:\n|$)", re.MULTILINE)
CODE_BLOCK_PATTERN = re.compile(r"```[\s\S]*?```|<pre>[\s\S]*?</pre>")
SENTENCE_PATTERN = re.compile(r"[.!?]\s+(?=[A-Z])")


@dataclass(frozen=True)
class TextBoundary:
    """A candidate cut point at a character offset."""

    offset: int
    kind: BoundaryKind
    priority: int


def _boundary(offset: int, kind: BoundaryKind) -> TextBoundary:
    return TextBoundary(offset=offset, kind=kind, priority=BOUNDARY_PRIORITIES[kind])


def find_text_boundaries(text: str) -> list[TextBoundary]:
    """
    Find every candidate split point in text.

    Paragraph and section boundaries sit just after their match, code
    blocks contribute both their start and end offsets, and sentence
    boundaries sit one character past the terminal punctuation.

    Args:
        text: Raw document text

    Returns:
        list[TextBoundary]: Candidates sorted ascending by offset; duplicate
            offsets are kept
    """
    boundaries: list[TextBoundary] = []

    for match in PARAGRAPH_PATTERN.finditer(text):
        boundaries.append(_boundary(match.end(), BoundaryKind.PARAGRAPH))

    for match in SECTION_PATTERN.finditer(text):
        boundaries.append(_boundary(match.end(), BoundaryKind.SECTION))

    for match in CODE_BLOCK_PATTERN.finditer(text):
        boundaries.append(_boundary(match.start(), BoundaryKind.CODE_BLOCK))
        boundaries.append(_boundary(match.end(), BoundaryKind.CODE_BLOCK))

    for match in SENTENCE_PATTERN.finditer(text):
        boundaries.append(_boundary(match.start() + 1, BoundaryKind.SENTENCE))

    boundaries.sort(key=lambda boundary: boundary.offset)
    return boundaries


def terminal_boundary(text: str) -> TextBoundary:
    """End-of-text boundary that guarantees the final segment is covered."""
    return _boundary(len(text), BoundaryKind.PARAGRAPH)
