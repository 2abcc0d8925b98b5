"""Pytest configuration and fixtures for neo-docs tests."""

import pytest
from unittest.mock import AsyncMock

from neo_docs.config.constants import Role
from neo_docs.config.settings import DocumentSettings
from neo_docs.factory import DocumentKind
from neo_docs.features.storage.repositories.memory_store import MemoryRecordStore
from neo_docs.features.users.repositories.memory_directory import MemoryUserDirectory


ARTICLE_OPTIONS = {
    "name": "articles",
    "database_schema": {
        "title": {"type": "string", "required": True},
        "body": "string",
        "views": {"type": "integer", "default": 0},
    },
    "slug_base": "title",
    "comments": {"enabled": True},
    "category": {"enabled": True},
    "sort_fields": ["title", "views"],
}


@pytest.fixture
def settings():
    """Settings isolated from the environment and any .env file."""
    return DocumentSettings(
        _env_file=None,
        DEFAULT_PAGE_SIZE=20,
        MAX_PAGE_SIZE=100,
    )


@pytest.fixture
def users():
    """User directory with one user per role."""
    directory = MemoryUserDirectory()
    directory.add("user-admin", Role.ADMIN)
    directory.add("user-moderator", Role.MODERATOR)
    directory.add("user-author", Role.AUTHOR)
    directory.add("user-registered", Role.REGISTERED)
    directory.add("user-other", Role.REGISTERED)
    directory.add("user-guest", Role.GUEST)
    return directory


@pytest.fixture
def article_options():
    """Fresh copy of the articles declaration."""
    return {
        **ARTICLE_OPTIONS,
        "database_schema": dict(ARTICLE_OPTIONS["database_schema"]),
    }


@pytest.fixture
def kind(article_options, users, settings):
    """Articles kind over in-memory stores."""
    return DocumentKind(article_options, users=users, settings=settings)


@pytest.fixture
def memory_store():
    """Empty in-memory record store with a unique slug."""
    return MemoryRecordStore("records", unique_fields=("slug",))


@pytest.fixture
def mock_user_directory():
    """Mock user directory for counting lookups."""
    directory = AsyncMock()
    directory.find_by_id = AsyncMock(return_value=None)
    return directory


@pytest.fixture
def mock_redis():
    """Mock async Redis client."""
    client = AsyncMock()
    client.get = AsyncMock(return_value=None)
    client.setex = AsyncMock(return_value=True)
    client.delete = AsyncMock(return_value=1)
    return client


@pytest.fixture
def mock_database():
    """Mock database manager for SQL-level store tests."""
    database = AsyncMock()
    database.fetch = AsyncMock(return_value=[])
    database.fetchrow = AsyncMock(return_value=None)
    database.fetchval = AsyncMock(return_value=0)
    database.execute = AsyncMock(return_value="OK")
    return database
