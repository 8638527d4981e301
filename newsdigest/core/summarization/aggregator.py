"""
Summary aggregation.

Drives one content item from pending chunk groups to a single final
summary: summarizes each pending group, stages the partial results
durably, then promotes or merges them into the per-URL summary.

Dependencies: sqlalchemy, newsdigest.boundary.db.CRUD, newsdigest.core.summarization
System role: Business logic of the summarization stage
"""

import logging
from typing import TYPE_CHECKING, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from newsdigest.boundary.db.base import utcnow
from newsdigest.boundary.db.CRUD.chunk_group_crud import chunk_group_crud
from newsdigest.boundary.db.CRUD.content_item_crud import content_item_crud
from newsdigest.boundary.db.CRUD.partial_summary_crud import partial_summary_crud
from newsdigest.boundary.db.CRUD.summary_crud import summary_crud
from newsdigest.boundary.db.models.content_item_model import ContentItemModel
from newsdigest.boundary.db.models.partial_summary_model import PartialSummaryModel
from newsdigest.boundary.db.models.summary_model import SummaryModel
from newsdigest.core.summarization.schema import Summarizer, SummaryContext, SummaryResult
from newsdigest.models.enums import ContentStatus

if TYPE_CHECKING:
    from newsdigest.workers.rate_limiter import AsyncTokenBucket

logger = logging.getLogger(__name__)

SINGLE_PART_TEXT_LIMIT = 10000
MERGED_TEXT_LIMIT = 15000


def _to_result(partial: PartialSummaryModel) -> SummaryResult:
    return SummaryResult(
        summary=partial.summary,
        key_points=list(partial.key_points or []),
        category=partial.category,
        sentiment=partial.sentiment,
    )


class SummaryAggregator:
    """
    Turn a chunked content item into its final summary.

    Every summarizer call, including the merge, waits on the shared rate
    limiter first. Group outcomes are committed one at a time so a crash
    never loses a summary that was already paid for.
    """

    def __init__(
        self,
        summarizer: Summarizer,
        rate_limiter: "AsyncTokenBucket | None" = None,
    ) -> None:
        """
        Initialize aggregator.

        Args:
            summarizer: Summarization capability
            rate_limiter: Shared limiter for summarizer calls (unlimited when None)
        """
        self._summarizer = summarizer
        self._rate_limiter = rate_limiter

    async def _throttle(self) -> None:
        if self._rate_limiter is not None:
            await self._rate_limiter.acquire()

    async def summarize_pending_groups(
        self,
        session: AsyncSession,
        item: ContentItemModel,
    ) -> int:
        """
        Summarize every pending group of an item in ascending group_index.

        Successful groups are staged as partial summaries and marked
        SUMMARIZED; failing groups are marked FAILED. Each outcome is
        committed before the next call. When the last pending group fails with
        nothing staged, the item is marked AGGREGATION_FAILED in that same
        commit.

        Args:
            session: Async database session
            item: CHUNKED content item

        Returns:
            int: Number of groups summarized successfully
        """
        groups = await chunk_group_crud.get_pending_for_item(session, item.id)
        if not groups:
            return 0

        total_parts = await chunk_group_crud.count_for_item(session, item.id)
        succeeded = 0

        for group in groups:
            context = SummaryContext(
                title=item.title,
                content_kind=item.content_kind,
                part_number=group.group_index + 1,
                total_parts=total_parts,
            )

            await self._throttle()
            try:
                result = await self._summarizer.summarize(group.combined_text, context)
            except Exception as e:
                logger.error(
                    f"{__name__}:summarize_pending_groups - Group failed: {type(e).__name__}: {e}",
                    extra={"content_item_id": str(item.id), "group_index": group.group_index},
                )
                await chunk_group_crud.mark_failed(session, group.id)
                await self._fail_if_exhausted(session, item)
                await session.commit()
                continue

            await partial_summary_crud.stage(
                session,
                content_item_id=item.id,
                chunk_group_id=group.id,
                group_index=group.group_index,
                summary=result.summary,
                key_points=result.key_points,
                category=result.category,
                sentiment=result.sentiment,
                original_text=group.combined_text,
            )
            await chunk_group_crud.mark_summarized(session, group.id)
            await session.commit()
            succeeded += 1

            logger.debug(
                f"{__name__}:summarize_pending_groups - Staged part {context.part_number}/{total_parts}",
                extra={"content_item_id": str(item.id), "group_index": group.group_index},
            )

        return succeeded

    async def finalize(
        self,
        session: AsyncSession,
        item: ContentItemModel,
    ) -> SummaryModel | None:
        """
        Write the final summary from the staged partials.

        A single partial is promoted as-is; several are merged in ascending
        group order. When nothing was staged and no group is still pending
        the item is marked AGGREGATION_FAILED. A failed merge keeps the
        partials staged so the next pass retries it.

        Args:
            session: Async database session
            item: CHUNKED content item

        Returns:
            SummaryModel if a final summary was written, None otherwise
        """
        partials = await partial_summary_crud.get_for_item(session, item.id)

        if not partials:
            if item.status == ContentStatus.CHUNKED and await self._fail_if_exhausted(session, item):
                await session.commit()
            return None

        if len(partials) == 1:
            partial = partials[0]
            result = _to_result(partial)
            original_text = partial.original_text[:SINGLE_PART_TEXT_LIMIT]
            chunk_group_id = partial.chunk_group_id
        else:
            result = await self._merge(item, partials)
            if result is None:
                return None
            original_text = "\n\n".join(p.original_text for p in partials)[:MERGED_TEXT_LIMIT]
            chunk_group_id = None

        summary = await summary_crud.upsert_by_url(
            session,
            url=item.url,
            title=item.title,
            original_text=original_text,
            summary=result.summary,
            key_points=result.key_points,
            code_snippets=list(item.code_snippets or []),
            content_kind=item.content_kind,
            sentiment=result.sentiment,
            category=result.category,
            content_item_id=item.id,
            chunk_group_id=chunk_group_id,
            is_partial=False,
            crawled_at=item.crawled_at,
            summarized_at=utcnow(),
        )
        await partial_summary_crud.clear_for_item(session, item.id)
        await session.commit()

        logger.info(
            f"{__name__}:finalize - Final summary written from {len(partials)} part(s)",
            extra={"content_item_id": str(item.id), "summary_id": str(summary.id)},
        )
        return summary

    async def _fail_if_exhausted(self, session: AsyncSession, item: ContentItemModel) -> bool:
        """Mark the item AGGREGATION_FAILED when no group is pending and nothing is staged."""
        if await chunk_group_crud.get_pending_for_item(session, item.id):
            return False
        if await partial_summary_crud.get_for_item(session, item.id):
            return False

        logger.warning(
            f"{__name__}:_fail_if_exhausted - No partial summaries, marking aggregation failed",
            extra={"content_item_id": str(item.id)},
        )
        await content_item_crud.mark_aggregation_failed(
            session,
            item.id,
            "No chunk group produced a summary",
        )
        return True

    async def _merge(
        self,
        item: ContentItemModel,
        partials: Sequence[PartialSummaryModel],
    ) -> SummaryResult | None:
        context = SummaryContext(
            title=item.title,
            content_kind=item.content_kind,
            part_number=1,
            total_parts=len(partials),
        )
        await self._throttle()
        try:
            return await self._summarizer.merge([_to_result(p) for p in partials], context)
        except Exception as e:
            logger.error(
                f"{__name__}:_merge - Merge failed, keeping partials for retry: {type(e).__name__}: {e}",
                extra={"content_item_id": str(item.id), "parts": len(partials)},
            )
            return None

    async def process(self, session: AsyncSession, item: ContentItemModel) -> bool:
        """
        Summarize pending groups, then finalize.

        Returns:
            bool: True when a final summary was written
        """
        await self.summarize_pending_groups(session, item)
        return await self.finalize(session, item) is not None
