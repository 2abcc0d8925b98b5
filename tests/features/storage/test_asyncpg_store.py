"""Tests for the PostgreSQL record store with a mocked database manager."""

import json
from datetime import datetime, timezone

import asyncpg
import pytest

from neo_docs.core.exceptions import DuplicateRecordError, StorageError
from neo_docs.features.storage import AsyncPGRecordStore
from neo_docs.utils.uuid import generate_uuid_v7


def make_row(record_id, data):
    now = datetime.now(timezone.utc)
    return {"id": record_id, "data": json.dumps(data), "created_at": now, "updated_at": now}


class TestAsyncPGRecordStore:
    """Test SQL building and row mapping."""

    @pytest.fixture
    def store(self, mock_database):
        return AsyncPGRecordStore(mock_database, "articles", "content", unique_fields=("slug",))

    @pytest.mark.asyncio
    async def test_insert_maps_row(self, store, mock_database):
        record_id = generate_uuid_v7()
        mock_database.fetchrow.return_value = make_row(record_id, {"title": "Hello"})

        record = await store.insert({"title": "Hello", "id": "ignored"})

        assert record["id"] == record_id
        assert record["title"] == "Hello"
        query, _, payload, _, _ = mock_database.fetchrow.call_args.args
        assert "content.articles" in query
        assert json.loads(payload) == {"title": "Hello"}

    @pytest.mark.asyncio
    async def test_non_identifier_skips_database(self, store, mock_database):
        assert await store.find_by_id("my-slug") is None
        assert await store.delete("my-slug") is False
        mock_database.fetchrow.assert_not_called()
        mock_database.fetchval.assert_not_called()

    @pytest.mark.asyncio
    async def test_find_builds_filter_and_order(self, store, mock_database):
        await store.find({"state": "published"}, sort=["-created_at", "title"], skip=10, limit=5)

        query, *params = mock_database.fetch.call_args.args
        assert "WHERE" in query
        assert "ORDER BY created_at DESC NULLS LAST, data->'title' ASC NULLS FIRST" in query
        assert "OFFSET $3 LIMIT $4" in query
        assert params == ['"published"', '["published"]', 10, 5]

    @pytest.mark.asyncio
    async def test_count(self, store, mock_database):
        mock_database.fetchval.return_value = 3

        assert await store.count() == 3
        query = mock_database.fetchval.call_args.args[0]
        assert "WHERE" not in query

    @pytest.mark.asyncio
    async def test_unique_violation_becomes_duplicate(self, store, mock_database):
        mock_database.fetchrow.side_effect = asyncpg.UniqueViolationError("duplicate key")

        with pytest.raises(DuplicateRecordError):
            await store.insert({"slug": "hello"})

    @pytest.mark.asyncio
    async def test_connection_failure_becomes_storage_error(self, store, mock_database):
        mock_database.fetch.side_effect = OSError("connection refused")

        with pytest.raises(StorageError):
            await store.find()

    def test_rejects_unsafe_table_name(self, mock_database):
        with pytest.raises(StorageError):
            AsyncPGRecordStore(mock_database, "articles; DROP TABLE users")

    @pytest.mark.asyncio
    async def test_ensure_schema_creates_indexes(self, store, mock_database):
        await store.ensure_schema([{"title": 1, "views": -1}])

        queries = [call.args[0] for call in mock_database.execute.call_args_list]
        assert any("CREATE TABLE IF NOT EXISTS content.articles" in q for q in queries)
        assert any("articles_slug_uniq" in q for q in queries)
        assert any("(data->>'views') DESC" in q for q in queries)
