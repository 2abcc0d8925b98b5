"""Redis cache in front of a user directory.

Cache failures are logged and bypassed; they never fail a lookup.
"""

import json
import logging
from typing import Any, Optional

import redis.asyncio as redis

from ....config.constants import USER_CACHE_KEY
from ....config.settings import DocumentSettings, get_settings
from ....core.exceptions import ConfigurationError
from ..entities.protocols import UserDirectory
from ..entities.user import User

logger = logging.getLogger(__name__)


class CachedUserDirectory:
    """UserDirectory wrapper caching lookups in Redis."""

    def __init__(
        self,
        directory: UserDirectory,
        redis_client: redis.Redis,
        ttl: int = 300,
        key_prefix: str = "neo_docs:user",
    ):
        self._directory = directory
        self._redis = redis_client
        self._ttl = ttl
        self._key_prefix = key_prefix

    def _make_key(self, user_id: Any) -> str:
        return USER_CACHE_KEY.format(prefix=self._key_prefix, user_id=user_id)

    async def find_by_id(self, user_id: Any) -> Optional[User]:
        if user_id is None:
            return None

        cached = await self._get_cached(user_id)
        if cached is not None:
            return cached

        user = await self._directory.find_by_id(user_id)
        if user is not None:
            await self._set_cached(user)
        return user

    async def invalidate(self, user_id: Any) -> None:
        """Drop a cached user, e.g. after a role change."""
        try:
            await self._redis.delete(self._make_key(user_id))
        except Exception as e:
            logger.warning(f"Failed to invalidate cached user {user_id}: {e}")

    async def _get_cached(self, user_id: Any) -> Optional[User]:
        try:
            result = await self._redis.get(self._make_key(user_id))
            if result is None:
                return None
            if isinstance(result, bytes):
                result = result.decode()
            return User.from_mapping(json.loads(result))
        except Exception as e:
            logger.warning(f"Failed to get user {user_id} from cache: {e}")
            return None

    async def _set_cached(self, user: User) -> None:
        try:
            await self._redis.setex(self._make_key(user.id), self._ttl, json.dumps(user.to_dict()))
        except Exception as e:
            logger.warning(f"Failed to cache user {user.id}: {e}")


def create_cached_directory(
    directory: UserDirectory,
    settings: Optional[DocumentSettings] = None,
) -> CachedUserDirectory:
    """Wrap a directory with a Redis client built from REDIS_URL."""
    settings = settings or get_settings()
    if not settings.redis_url:
        raise ConfigurationError("REDIS_URL is not configured")

    return CachedUserDirectory(
        directory,
        redis.from_url(settings.redis_url),
        ttl=settings.user_cache_ttl,
        key_prefix=settings.user_cache_prefix,
    )
