"""
Text segmentation: boundary detection, chunk packing and group building.
"""

from newsdigest.core.chunking.boundaries import (
    BoundaryKind,
    TextBoundary,
    find_text_boundaries,
    terminal_boundary,
)
from newsdigest.core.chunking.grouping import ChunkGroupDraft, build_chunk_groups
from newsdigest.core.chunking.packer import ChunkPacker
from newsdigest.core.chunking.tokens import CHARS_PER_TOKEN, estimate_tokens

__all__ = [
    "BoundaryKind",
    "CHARS_PER_TOKEN",
    "ChunkGroupDraft",
    "ChunkPacker",
    "TextBoundary",
    "build_chunk_groups",
    "estimate_tokens",
    "find_text_boundaries",
    "terminal_boundary",
]
