"""
Chunk group building.

Batches persisted chunks into summarization windows. Windows start every
``chunks_per_group`` chunks but span up to ``max_chunks_per_group`` chunks,
so consecutive groups share members whenever the width exceeds the step.

Dependencies: dataclasses (stdlib)
System role: Third step of segmentation, produces one summarizer input per group
"""

import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from newsdigest.boundary.db.models.chunk_model import ChunkModel

GROUP_SEPARATOR = "\n\n"


@dataclass
class ChunkGroupDraft:
    """Unpersisted chunk group ready for upsert."""

    content_item_id: uuid.UUID
    group_index: int
    combined_text: str
    combined_tokens: int
    chunk_ids: list[uuid.UUID] = field(default_factory=list)


def build_chunk_groups(
    chunks: Sequence["ChunkModel"],
    chunks_per_group: int,
    max_chunks_per_group: int,
) -> list[ChunkGroupDraft]:
    """
    Build overlapping chunk group windows for one content item.

    Args:
        chunks: Persisted chunks of a single content item, ordered by chunk_index
        chunks_per_group: Step between window starts
        max_chunks_per_group: Window width

    Returns:
        list[ChunkGroupDraft]: Groups with group_index = start // chunks_per_group
    """
    if not chunks:
        return []

    content_item_id = chunks[0].content_item_id
    groups = []

    for start in range(0, len(chunks), chunks_per_group):
        window = chunks[start:start + max_chunks_per_group]
        groups.append(
            ChunkGroupDraft(
                content_item_id=content_item_id,
                group_index=start // chunks_per_group,
                combined_text=GROUP_SEPARATOR.join(chunk.chunk_text for chunk in window),
                combined_tokens=sum(chunk.token_count for chunk in window),
                chunk_ids=[chunk.id for chunk in window if chunk.id is not None],
            )
        )

    return groups
