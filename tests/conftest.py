"""
Shared test fixtures and configuration for entire test suite.

Provides: SQLite-backed async sessions, a deterministic summarizer,
small chunking settings and content item seeding helpers
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from typing import Sequence

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from newsdigest.boundary.db.base import Base
from newsdigest.boundary.db.connection import get_async_session_factory
from newsdigest.boundary.db.CRUD.content_item_crud import content_item_crud
from newsdigest.boundary.db.models.content_item_model import ContentItemModel
from newsdigest.configs.chunking import ChunkingSettings
from newsdigest.core.chunking.tokens import estimate_tokens
from newsdigest.core.exceptions import SummarizationError
from newsdigest.core.summarization.schema import SummaryContext, SummaryResult
from newsdigest.core.summarization.summarizer import pool_key_points
from newsdigest.models.enums import ContentKind, Sentiment


class FakeSummarizer:
    """
    Deterministic stand-in for the LLM summarizer.

    Records every call. Parts listed in ``fail_parts`` raise
    SummarizationError; ``merge_error`` is raised from merge when set.
    """

    def __init__(
        self,
        fail_parts: Sequence[int] = (),
        merge_error: Exception | None = None,
    ) -> None:
        self.fail_parts = set(fail_parts)
        self.merge_error = merge_error
        self.calls: list[SummaryContext] = []
        self.texts: list[str] = []
        self.merge_calls: list[list[SummaryResult]] = []

    async def summarize(self, text: str, context: SummaryContext) -> SummaryResult:
        self.calls.append(context)
        self.texts.append(text)
        if context.part_number in self.fail_parts:
            raise SummarizationError(f"Part {context.part_number} failed")
        return SummaryResult(
            summary=f"Summary of part {context.part_number}",
            key_points=[f"Point {context.part_number}", "Shared point"],
            category="Technology",
            sentiment=Sentiment.POSITIVE,
        )

    async def merge(
        self,
        partials: Sequence[SummaryResult],
        context: SummaryContext,
    ) -> SummaryResult:
        self.merge_calls.append(list(partials))
        if self.merge_error is not None:
            raise self.merge_error
        return SummaryResult(
            summary="Merged summary",
            key_points=pool_key_points(partials)[:6],
            category="Technology",
            sentiment=Sentiment.POSITIVE,
        )


@pytest.fixture
async def test_engine(tmp_path):
    """
    Create file-backed SQLite async engine with all tables.

    A file database gives every session its own connection, matching how
    the workers use PostgreSQL.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'newsdigest.db'}")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return get_async_session_factory(test_engine)


@pytest.fixture
async def test_async_db(session_factory):
    """
    Async session for direct CRUD assertions.

    Yields:
        AsyncSession: Test database session
    """
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def fake_summarizer() -> FakeSummarizer:
    """Summarizer that always succeeds."""
    return FakeSummarizer()


@pytest.fixture
def chunking_settings() -> ChunkingSettings:
    """Small token budgets so short test texts produce several chunks."""
    return ChunkingSettings(
        max_tokens_per_chunk=40,
        min_tokens_per_chunk=10,
        overlap_tokens=5,
        chunks_per_group=2,
        max_chunks_per_group=3,
    )


def make_paragraphs(count: int, sentences_per_paragraph: int = 3) -> str:
    """Build prose with predictable paragraph and sentence boundaries."""
    paragraphs = []
    for p in range(count):
        sentences = [
            f"Paragraph {p} sentence {s} talks about async pipelines and durable state."
            for s in range(sentences_per_paragraph)
        ]
        paragraphs.append(" ".join(sentences))
    return "\n\n".join(paragraphs)


async def seed_content_item(
    session: AsyncSession,
    url: str = "https://example.com/article",
    raw_text: str | None = None,
    title: str = "Example Article",
    content_kind: ContentKind = ContentKind.ARTICLE,
    code_snippets: list[str] | None = None,
) -> ContentItemModel:
    """Insert a PENDING content item and commit."""
    raw_text = make_paragraphs(6) if raw_text is None else raw_text
    item = await content_item_crud.upsert_by_url(
        session,
        url=url,
        title=title,
        raw_text=raw_text,
        content_kind=content_kind,
        total_tokens=estimate_tokens(raw_text),
        code_snippets=code_snippets,
    )
    await session.commit()
    return item


@pytest.fixture
def summarizer_factory():
    """Build FakeSummarizers with scripted failures."""
    return FakeSummarizer


@pytest.fixture
def seed_item():
    """Content item seeding helper."""
    return seed_content_item


@pytest.fixture
def paragraphs():
    """Prose builder helper."""
    return make_paragraphs
