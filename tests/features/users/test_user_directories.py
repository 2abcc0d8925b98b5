"""Tests for user directories and the Redis user cache."""

import json

import pytest
from unittest.mock import AsyncMock

from neo_docs.config.constants import Role
from neo_docs.config.settings import DocumentSettings
from neo_docs.core.exceptions import ConfigurationError, StorageError
from neo_docs.features.users import (
    AsyncPGUserDirectory,
    CachedUserDirectory,
    User,
    create_cached_directory,
)
from neo_docs.utils.uuid import generate_uuid_v7


class TestMemoryUserDirectory:
    """Test the in-process directory."""

    @pytest.mark.asyncio
    async def test_lookup(self, users):
        user = await users.find_by_id("user-admin")

        assert user == User(id="user-admin", role=Role.ADMIN)
        assert await users.find_by_id("nobody") is None
        assert await users.find_by_id(None) is None

    @pytest.mark.asyncio
    async def test_remove(self, users):
        users.remove("user-admin")

        assert await users.find_by_id("user-admin") is None


class TestCachedUserDirectory:
    """Test Redis read-through caching."""

    @pytest.fixture
    def directory(self, users, mock_redis):
        return CachedUserDirectory(users, mock_redis, ttl=60, key_prefix="test:user")

    @pytest.mark.asyncio
    async def test_miss_reads_through_and_caches(self, directory, mock_redis):
        user = await directory.find_by_id("user-author")

        assert user.role == Role.AUTHOR
        mock_redis.get.assert_called_once_with("test:user:id:user-author")
        mock_redis.setex.assert_called_once_with(
            "test:user:id:user-author", 60, json.dumps({"id": "user-author", "role": "author"})
        )

    @pytest.mark.asyncio
    async def test_hit_skips_directory(self, mock_redis, mock_user_directory):
        mock_redis.get.return_value = b'{"id": "user-9", "role": "moderator"}'
        directory = CachedUserDirectory(mock_user_directory, mock_redis)

        user = await directory.find_by_id("user-9")

        assert user == User(id="user-9", role=Role.MODERATOR)
        mock_user_directory.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_user_is_not_cached(self, directory, mock_redis):
        assert await directory.find_by_id("nobody") is None
        mock_redis.setex.assert_not_called()

    @pytest.mark.asyncio
    async def test_cache_failure_falls_back(self, directory, mock_redis):
        mock_redis.get.side_effect = ConnectionError("redis down")
        mock_redis.setex.side_effect = ConnectionError("redis down")

        user = await directory.find_by_id("user-registered")

        assert user.role == Role.REGISTERED

    @pytest.mark.asyncio
    async def test_invalidate(self, directory, mock_redis):
        await directory.invalidate("user-author")

        mock_redis.delete.assert_called_once_with("test:user:id:user-author")

    def test_factory_requires_redis_url(self, users, settings):
        with pytest.raises(ConfigurationError):
            create_cached_directory(users, settings)


class TestAsyncPGUserDirectory:
    """Test the users table directory."""

    @pytest.mark.asyncio
    async def test_maps_row(self, mock_database):
        user_id = generate_uuid_v7()
        mock_database.fetchrow.return_value = {"id": user_id, "role": "Admin"}

        user = await AsyncPGUserDirectory(mock_database).find_by_id(user_id)

        assert user == User(id=user_id, role=Role.ADMIN)

    @pytest.mark.asyncio
    async def test_table_from_settings(self, mock_database):
        settings = DocumentSettings(_env_file=None, DOCUMENTS_SCHEMA="accounts", USERS_TABLE="members")

        await AsyncPGUserDirectory(mock_database, settings=settings).find_by_id(generate_uuid_v7())

        assert "accounts.members" in mock_database.fetchrow.call_args.args[0]

    @pytest.mark.asyncio
    async def test_non_uuid_skips_database(self, mock_database):
        assert await AsyncPGUserDirectory(mock_database).find_by_id("user-1") is None
        mock_database.fetchrow.assert_not_called()

    @pytest.mark.asyncio
    async def test_database_failure(self, mock_database):
        mock_database.fetchrow.side_effect = OSError("connection refused")

        with pytest.raises(StorageError):
            await AsyncPGUserDirectory(mock_database).find_by_id(generate_uuid_v7())
