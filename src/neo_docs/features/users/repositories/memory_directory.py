"""In-process user directory."""

from typing import Any, Dict, Iterable, Optional

from ....config.constants import Role
from ..entities.user import User


class MemoryUserDirectory:
    """UserDirectory backed by a dict, for tests and embedded use."""

    def __init__(self, users: Iterable[User] = ()):
        self._users: Dict[str, User] = {user.id: user for user in users}

    def add(self, user_id: Any, role: Role) -> User:
        user = User(id=str(user_id), role=role)
        self._users[user.id] = user
        return user

    def remove(self, user_id: Any) -> None:
        self._users.pop(str(user_id), None)

    async def find_by_id(self, user_id: Any) -> Optional[User]:
        if user_id is None:
            return None
        return self._users.get(str(user_id))
