"""
Integration tests for the generic BaseCRUD operations.

System role: Verification of shared CRUD behavior
"""

import uuid

import pytest

from newsdigest.boundary.db.CRUD.summary_crud import summary_crud
from newsdigest.models.enums import ContentKind


class TestBaseCRUD:
    """Test suite for BaseCRUD through the summary CRUD singleton."""

    @pytest.mark.asyncio
    async def test_create_should_apply_defaults(self, test_async_db) -> None:
        """Test created rows get an id, timestamps and column defaults."""
        # Arrange / Act
        summary = await summary_crud.create(
            test_async_db,
            url="https://example.com/a",
            summary="Summary",
            content_kind=ContentKind.CODE,
        )

        # Assert
        assert isinstance(summary.id, uuid.UUID)
        assert summary.created_at is not None
        assert summary.key_points == []
        assert summary.category == "General"
        assert summary.is_partial is False

    @pytest.mark.asyncio
    async def test_get_update_exists_delete(self, test_async_db) -> None:
        summary = await summary_crud.create(test_async_db, url="https://example.com/a", summary="Old")

        updated = await summary_crud.update_by_id(test_async_db, summary.id, summary="New")
        fetched = await summary_crud.get_by_id(test_async_db, summary.id)

        assert updated.summary == "New"
        assert fetched.summary == "New"
        assert await summary_crud.exists(test_async_db, summary.id) is True
        assert await summary_crud.delete_by_id(test_async_db, summary.id) is True
        assert await summary_crud.exists(test_async_db, summary.id) is False
        assert await summary_crud.delete_by_id(test_async_db, summary.id) is False

    @pytest.mark.asyncio
    async def test_missing_ids_should_return_none(self, test_async_db) -> None:
        missing = uuid.uuid4()

        assert await summary_crud.get_by_id(test_async_db, missing) is None
        assert await summary_crud.update_by_id(test_async_db, missing, summary="x") is None

    @pytest.mark.asyncio
    async def test_get_all_should_paginate(self, test_async_db) -> None:
        for i in range(3):
            await summary_crud.create(test_async_db, url=f"https://example.com/{i}", summary=f"S{i}")

        assert len(await summary_crud.get_all(test_async_db)) == 3
        assert len(await summary_crud.get_all(test_async_db, limit=2)) == 2
        assert len(await summary_crud.get_all(test_async_db, limit=2, offset=2)) == 1
