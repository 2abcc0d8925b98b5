"""In-process record store.

Keeps one collection in a dict keyed by identifier. Used by tests and by
embedded deployments without PostgreSQL.
"""

import copy
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ....config.constants import RECORD_MANAGED_FIELDS
from ....core.exceptions import DuplicateRecordError
from ....utils.uuid import generate_uuid_v7, is_valid_uuid
from ..entities.protocols import Filter, Record
from ..utils.sorting import parse_sort

logger = logging.getLogger(__name__)


def _matches(record: Record, filter: Optional[Filter]) -> bool:
    for field, expected in (filter or {}).items():
        stored = record.get(field)
        if isinstance(stored, list) and not isinstance(expected, list):
            if expected not in stored:
                return False
        elif stored != expected:
            return False
    return True


def _sort_key(field: str):
    def key(record: Record):
        value = record.get(field)
        # Missing values sort first, like a database NULLS FIRST ascending
        return (value is not None, value if value is not None else 0)
    return key


class MemoryRecordStore:
    """Dict-backed RecordStore implementation."""

    def __init__(self, name: str, unique_fields: Iterable[str] = ()):
        self._name = name
        self._unique_fields = tuple(unique_fields)
        self._records: Dict[str, Record] = {}

    @property
    def name(self) -> str:
        return self._name

    def is_identifier(self, value: Any) -> bool:
        return is_valid_uuid(value)

    async def find(
        self,
        filter: Optional[Filter] = None,
        sort: Optional[Sequence[str]] = None,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[Record]:
        records = [record for record in self._records.values() if _matches(record, filter)]

        # Stable sorts applied from the last key to the first
        for field, descending in reversed(parse_sort(sort)):
            records.sort(key=_sort_key(field), reverse=descending)

        end = skip + limit if limit is not None else None
        return [copy.deepcopy(record) for record in records[skip:end]]

    async def find_by_id(self, record_id: Any) -> Optional[Record]:
        if not self.is_identifier(record_id):
            return None
        record = self._records.get(str(record_id))
        return copy.deepcopy(record) if record is not None else None

    async def find_one(self, filter: Filter) -> Optional[Record]:
        for record in self._records.values():
            if _matches(record, filter):
                return copy.deepcopy(record)
        return None

    async def count(self, filter: Optional[Filter] = None) -> int:
        return sum(1 for record in self._records.values() if _matches(record, filter))

    async def insert(self, record: Record) -> Record:
        now = datetime.now(timezone.utc)
        stored = {key: value for key, value in copy.deepcopy(record).items() if key not in RECORD_MANAGED_FIELDS}
        stored.update(id=generate_uuid_v7(), created_at=now, updated_at=now)

        self._check_unique(stored)
        self._records[stored["id"]] = stored
        logger.debug(f"Inserted record {stored['id']} into '{self._name}'")
        return copy.deepcopy(stored)

    async def update(self, record_id: Any, changes: Record) -> Optional[Record]:
        if not self.is_identifier(record_id):
            return None
        current = self._records.get(str(record_id))
        if current is None:
            return None

        updated = dict(current)
        updated.update(
            {key: value for key, value in copy.deepcopy(changes).items() if key not in RECORD_MANAGED_FIELDS}
        )
        updated["updated_at"] = datetime.now(timezone.utc)

        self._check_unique(updated)
        self._records[updated["id"]] = updated
        return copy.deepcopy(updated)

    async def delete(self, record_id: Any) -> bool:
        if not self.is_identifier(record_id):
            return False
        return self._records.pop(str(record_id), None) is not None

    async def find_related(
        self,
        foreign_field: str,
        value: Any,
        sort: Optional[Sequence[str]] = None,
    ) -> List[Record]:
        return await self.find({foreign_field: value}, sort=sort or ["created_at"])

    def _check_unique(self, record: Record) -> None:
        for field in self._unique_fields:
            value = record.get(field)
            if value is None:
                continue
            for other in self._records.values():
                if other["id"] != record["id"] and other.get(field) == value:
                    raise DuplicateRecordError(field, value)
