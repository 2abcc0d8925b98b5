"""Protocol for the slug generator collaborator."""

from abc import abstractmethod
from typing import Any, Optional, Protocol, runtime_checkable

from ...storage.entities.protocols import RecordStore


@runtime_checkable
class SlugGenerator(Protocol):
    """Produces a slug that is unused in the given collection."""

    @abstractmethod
    async def generate(self, source: Any, store: RecordStore, exclude_id: Optional[str] = None) -> str:
        ...
