"""User directory reading the users table through asyncpg."""

import logging
from typing import Any, Optional

from ....config.settings import DocumentSettings, get_settings
from ....core.exceptions import StorageError
from ....database.connection import DatabaseManager
from ....utils.uuid import is_valid_uuid
from ..entities.user import User
from ..utils.queries import USER_GET_BY_ID

logger = logging.getLogger(__name__)


class AsyncPGUserDirectory:
    """UserDirectory over an existing users table with ``id`` and ``role`` columns."""

    def __init__(
        self,
        database: DatabaseManager,
        schema: Optional[str] = None,
        table: Optional[str] = None,
        settings: Optional[DocumentSettings] = None,
    ):
        settings = settings or get_settings()
        self._db = database
        self._schema = schema or settings.documents_schema
        self._table = table or settings.users_table

    async def find_by_id(self, user_id: Any) -> Optional[User]:
        if not is_valid_uuid(user_id):
            return None

        query = USER_GET_BY_ID.format(schema=self._schema, table=self._table)
        try:
            row = await self._db.fetchrow(query, str(user_id))
        except Exception as e:
            logger.error(f"Failed to find user {user_id}: {e}")
            raise StorageError(f"Failed to find user: {e}") from e

        return self._map_row_to_user(row) if row else None

    @staticmethod
    def _map_row_to_user(row) -> User:
        return User.from_mapping({"id": row["id"], "role": row["role"]})
