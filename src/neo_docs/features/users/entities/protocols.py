"""Protocol for the user directory collaborator."""

from abc import abstractmethod
from typing import Any, Optional, Protocol, runtime_checkable

from .user import User


@runtime_checkable
class UserDirectory(Protocol):
    """Looks users up by identifier."""

    @abstractmethod
    async def find_by_id(self, user_id: Any) -> Optional[User]:
        """Find a user by ID, None when unknown."""
        ...
