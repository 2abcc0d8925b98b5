"""Lookup of a record by identifier or slug."""

import logging
from typing import Any, Optional

from ..entities.protocols import Record, RecordStore

logger = logging.getLogger(__name__)


class IdentityResolver:
    """Resolves an identity to a record with exactly one lookup.

    Values in the store's native identifier format are looked up by id,
    anything else by the slug field. There is no fallback between the two.
    """

    def __init__(self, slug_field: str = "slug"):
        self._slug_field = slug_field

    async def resolve(self, identity: Any, store: RecordStore) -> Optional[Record]:
        if identity is None or identity == "":
            return None

        if store.is_identifier(identity):
            return await store.find_by_id(identity)

        logger.debug(f"Resolving '{identity}' by {self._slug_field} in '{store.name}'")
        return await store.find_one({self._slug_field: str(identity)})
