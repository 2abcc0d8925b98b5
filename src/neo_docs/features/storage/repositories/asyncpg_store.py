"""PostgreSQL record store.

Stores one collection per table with the record payload in a jsonb column.
Accepts any DatabaseManager and schema name via dependency injection.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from ....config.constants import RECORD_MANAGED_FIELDS
from ....core.exceptions import StorageError
from ....database.connection import DatabaseManager
from ....utils.uuid import generate_uuid_v7, is_valid_uuid
from ..entities.protocols import Filter, Record
from ..utils.error_handling import handle_storage_errors
from ..utils.queries import (
    RECORD_COUNT,
    RECORD_CREATED_AT_INDEX_CREATE,
    RECORD_DATA_INDEX_CREATE,
    RECORD_DELETE,
    RECORD_FIELD_INDEX_CREATE,
    RECORD_GET_BY_ID,
    RECORD_INSERT,
    RECORD_LIST,
    RECORD_TABLE_CREATE,
    RECORD_UNIQUE_INDEX_CREATE,
    RECORD_UPDATE,
)
from ..utils.sorting import FIELD_NAME_PATTERN, parse_sort

logger = logging.getLogger(__name__)

# Fields kept in real columns rather than inside the jsonb payload
COLUMN_FIELDS = frozenset({"id", "created_at", "updated_at"})


def _to_json(value: Any) -> str:
    return json.dumps(value, default=str)


def _check_field(field: str) -> str:
    if not FIELD_NAME_PATTERN.match(field):
        raise StorageError(f"Invalid field name '{field}'")
    return field


class AsyncPGRecordStore:
    """RecordStore implementation over asyncpg."""

    def __init__(
        self,
        database: DatabaseManager,
        table: str,
        schema: str = "public",
        unique_fields: Iterable[str] = (),
    ):
        """Initialize with an existing database manager.

        Args:
            database: DatabaseManager owning the connection pool
            table: Table holding this collection
            schema: Database schema name
            unique_fields: Payload fields backed by a unique index
        """
        self._db = database
        self._schema = _check_field(schema)
        self.table = _check_field(table)
        self._unique_fields = tuple(_check_field(f) for f in unique_fields)

    @property
    def name(self) -> str:
        return self.table

    def _query(self, template: str, **parts: str) -> str:
        return template.format(schema=self._schema, table=self.table, **parts)

    def is_identifier(self, value: Any) -> bool:
        return is_valid_uuid(value)

    @handle_storage_errors("create record table")
    async def ensure_schema(self, indexes: Sequence[Mapping[str, int]] = ()) -> None:
        """Create the table and its indexes when missing."""
        await self._db.execute(self._query(RECORD_TABLE_CREATE))
        await self._db.execute(self._query(RECORD_DATA_INDEX_CREATE))
        await self._db.execute(self._query(RECORD_CREATED_AT_INDEX_CREATE))

        for field in self._unique_fields:
            await self._db.execute(self._query(RECORD_UNIQUE_INDEX_CREATE, field=field))

        for index in indexes:
            fields = [_check_field(field) for field in index]
            columns = ", ".join(
                f"(data->>'{field}') {'DESC' if index[field] < 0 else 'ASC'}" for field in fields
            )
            index_name = f"{self.table}_{'_'.join(fields)}_idx"
            await self._db.execute(
                self._query(RECORD_FIELD_INDEX_CREATE, index_name=index_name, columns=columns)
            )
        logger.info(f"Ensured table {self._schema}.{self.table}")

    @handle_storage_errors("find records")
    async def find(
        self,
        filter: Optional[Filter] = None,
        sort: Optional[Sequence[str]] = None,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[Record]:
        where, params = self._build_where(filter)
        order = self._build_order(sort)

        params.append(max(int(skip), 0))
        page = f"OFFSET ${len(params)}"
        if limit is not None:
            params.append(int(limit))
            page += f" LIMIT ${len(params)}"

        rows = await self._db.fetch(self._query(RECORD_LIST, where=where, order=order, page=page), *params)
        return [self._map_row_to_record(row) for row in rows]

    @handle_storage_errors("find record by id")
    async def find_by_id(self, record_id: Any) -> Optional[Record]:
        if not self.is_identifier(record_id):
            return None
        row = await self._db.fetchrow(self._query(RECORD_GET_BY_ID), str(record_id))
        return self._map_row_to_record(row) if row else None

    async def find_one(self, filter: Filter) -> Optional[Record]:
        records = await self.find(filter, limit=1)
        return records[0] if records else None

    @handle_storage_errors("count records")
    async def count(self, filter: Optional[Filter] = None) -> int:
        where, params = self._build_where(filter)
        return await self._db.fetchval(self._query(RECORD_COUNT, where=where), *params)

    @handle_storage_errors("insert record")
    async def insert(self, record: Record) -> Record:
        now = datetime.now(timezone.utc)
        data = {key: value for key, value in record.items() if key not in RECORD_MANAGED_FIELDS}
        row = await self._db.fetchrow(
            self._query(RECORD_INSERT), generate_uuid_v7(), _to_json(data), now, now
        )
        return self._map_row_to_record(row)

    @handle_storage_errors("update record")
    async def update(self, record_id: Any, changes: Record) -> Optional[Record]:
        if not self.is_identifier(record_id):
            return None
        data = {key: value for key, value in changes.items() if key not in RECORD_MANAGED_FIELDS}
        row = await self._db.fetchrow(
            self._query(RECORD_UPDATE), str(record_id), _to_json(data), datetime.now(timezone.utc)
        )
        return self._map_row_to_record(row) if row else None

    @handle_storage_errors("delete record")
    async def delete(self, record_id: Any) -> bool:
        if not self.is_identifier(record_id):
            return False
        deleted = await self._db.fetchval(self._query(RECORD_DELETE), str(record_id))
        return deleted is not None

    async def find_related(
        self,
        foreign_field: str,
        value: Any,
        sort: Optional[Sequence[str]] = None,
    ) -> List[Record]:
        return await self.find({foreign_field: value}, sort=sort or ["created_at"])

    def _build_where(self, filter: Optional[Filter]) -> Tuple[str, List[Any]]:
        conditions = []
        params: List[Any] = []

        for field, value in (filter or {}).items():
            _check_field(field)
            if field in COLUMN_FIELDS:
                params.append(str(value) if field == "id" else value)
                conditions.append(f"{field} = ${len(params)}")
            elif value is None:
                conditions.append(f"(data->'{field}' IS NULL OR data->'{field}' = 'null'::jsonb)")
            elif isinstance(value, list):
                params.append(_to_json(value))
                conditions.append(f"data->'{field}' = ${len(params)}::jsonb")
            else:
                # Scalar equality, or membership when the stored value is a list
                params.append(_to_json(value))
                scalar = len(params)
                params.append(_to_json([value]))
                conditions.append(
                    f"(data->'{field}' = ${scalar}::jsonb OR "
                    f"(jsonb_typeof(data->'{field}') = 'array' AND data->'{field}' @> ${len(params)}::jsonb))"
                )

        where = f"WHERE {' AND '.join(conditions)}" if conditions else ""
        return where, params

    def _build_order(self, sort: Optional[Sequence[str]]) -> str:
        clauses = []
        for field, descending in parse_sort(sort):
            _check_field(field)
            column = field if field in COLUMN_FIELDS else f"data->'{field}'"
            clauses.append(f"{column} {'DESC NULLS LAST' if descending else 'ASC NULLS FIRST'}")
        return f"ORDER BY {', '.join(clauses)}" if clauses else ""

    @staticmethod
    def _map_row_to_record(row) -> Record:
        data = row["data"]
        if isinstance(data, str):
            data = json.loads(data)
        return {
            "id": str(row["id"]),
            **data,
            "created_at": row["created_at"],
            "updated_at": row["updated_at"],
        }
