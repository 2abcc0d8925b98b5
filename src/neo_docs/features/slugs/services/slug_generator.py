"""Unique slug generation against a record store."""

import logging
from typing import Any, Optional

from ...storage.entities.protocols import RecordStore
from ..utils.validation import SlugRules

logger = logging.getLogger(__name__)


class UniqueSlugGenerator:
    """Slugifies the source and appends -2, -3, ... until the slug is free."""

    def __init__(self, slug_field: str = "slug", max_attempts: int = 1000):
        self._slug_field = slug_field
        self._max_attempts = max_attempts

    async def generate(self, source: Any, store: RecordStore, exclude_id: Optional[str] = None) -> str:
        base = SlugRules.slugify(source)
        candidate = base

        for attempt in range(2, self._max_attempts + 2):
            # An id-shaped slug would be looked up as an id and never found
            if not store.is_identifier(candidate):
                existing = await store.find_one({self._slug_field: candidate})
                if existing is None or existing.get("id") == exclude_id:
                    return candidate

            suffix = f"-{attempt}"
            candidate = base[:SlugRules.SLUG_MAX_LENGTH - len(suffix)].rstrip("-") + suffix

        # Unique index on the store still rejects a collision
        logger.warning(f"Slug space for '{base}' exhausted in '{store.name}'")
        return candidate
