"""Protocol for the storage collaborator.

One store serves one collection. Records are plain dicts; the store owns
``id``, ``created_at`` and ``updated_at``.
"""

from abc import abstractmethod
from typing import Any, Dict, List, Optional, Protocol, Sequence, runtime_checkable

Record = Dict[str, Any]
Filter = Dict[str, Any]


@runtime_checkable
class RecordStore(Protocol):
    """Persistence operations used by the document, comment and category services.

    Filters are equality maps; a filter value also matches a stored list
    that contains it. Sort entries are field names, prefixed with ``-``
    for descending order.
    """

    @property
    def name(self) -> str:
        """Collection name."""
        ...

    @abstractmethod
    def is_identifier(self, value: Any) -> bool:
        """Check whether a value has the store's native identifier format."""
        ...

    @abstractmethod
    async def find(
        self,
        filter: Optional[Filter] = None,
        sort: Optional[Sequence[str]] = None,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[Record]:
        """Find records matching a filter."""
        ...

    @abstractmethod
    async def find_by_id(self, record_id: Any) -> Optional[Record]:
        """Find a record by identifier."""
        ...

    @abstractmethod
    async def find_one(self, filter: Filter) -> Optional[Record]:
        """Find the first record matching a filter."""
        ...

    @abstractmethod
    async def count(self, filter: Optional[Filter] = None) -> int:
        """Count records matching a filter."""
        ...

    @abstractmethod
    async def insert(self, record: Record) -> Record:
        """Insert a record and return it with managed fields assigned."""
        ...

    @abstractmethod
    async def update(self, record_id: Any, changes: Record) -> Optional[Record]:
        """Apply a partial update and return the updated record, None when absent."""
        ...

    @abstractmethod
    async def delete(self, record_id: Any) -> bool:
        """Hard delete a record."""
        ...

    @abstractmethod
    async def find_related(
        self,
        foreign_field: str,
        value: Any,
        sort: Optional[Sequence[str]] = None,
    ) -> List[Record]:
        """Reverse relationship view: records whose ``foreign_field`` refers to ``value``."""
        ...
