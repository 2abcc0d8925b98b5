"""Authorization steps shared by the document, comment and category services.

Each service subclasses EntityAccessController with its own store,
messages and permission set. Checks raise OperationError subclasses and
the public operations turn them into results with operation_result.
"""

import logging
from typing import Any, List, Optional, Sequence, Tuple

from ....config.constants import Role
from ....config.messages import DocumentMessage
from ....config.settings import DocumentSettings, get_settings
from ....core.exceptions import EntityNotFoundError, PermissionDeniedError
from ...pagination import PageData, paginate, resolve_limit
from ...permissions.entities import DocumentConfig, OwnedPermission, role_satisfies
from ...storage.entities import Filter, Record, RecordStore
from ...storage.services import IdentityResolver
from ...users.entities import User, UserDirectory

logger = logging.getLogger(__name__)


class EntityAccessController:
    """Base controller: actor resolution, role gates, ownership and listing."""

    # Message enum of the concrete kind; must define USER_NOT_FOUND and NO_PERMISSION
    messages = DocumentMessage

    def __init__(
        self,
        config: DocumentConfig,
        store: RecordStore,
        users: UserDirectory,
        identity_resolver: Optional[IdentityResolver] = None,
        settings: Optional[DocumentSettings] = None,
    ):
        self._config = config
        self._store = store
        self._users = users
        self._identity = identity_resolver or IdentityResolver()
        self._settings = settings or get_settings()

    @property
    def config(self) -> DocumentConfig:
        return self._config

    @property
    def store(self) -> RecordStore:
        return self._store

    async def _find_user(self, user_id: Any) -> Optional[User]:
        if user_id is None or user_id == "":
            return None
        return await self._users.find_by_id(user_id)

    async def _require_actor(self, user_id: Any, message: Any = None, field: str = "user") -> User:
        """Resolve a mandatory actor: missing id is a denial, unknown id is not found."""
        message = message or self.messages.USER_NOT_FOUND
        if user_id is None or user_id == "":
            raise PermissionDeniedError(message, field=field)

        actor = await self._find_user(user_id)
        if actor is None:
            raise EntityNotFoundError(message, field=field)
        return actor

    async def _authorize_read(self, required: Role, user_id: Any) -> Optional[User]:
        """Gate a read action. Unknown users are treated as lacking permission."""
        if required == Role.GUEST:
            return None
        if user_id is None or user_id == "":
            raise PermissionDeniedError(self.messages.USER_NOT_FOUND, field="user")

        actor = await self._find_user(user_id)
        if actor is None or not role_satisfies(actor.role, required):
            raise PermissionDeniedError(self.messages.NO_PERMISSION, field="user")
        return actor

    async def _authorize_create(self, required: Role, author_id: Any, message: Any) -> Optional[User]:
        if required == Role.GUEST:
            return None

        actor = await self._require_actor(author_id, message)
        if not role_satisfies(actor.role, required):
            raise PermissionDeniedError(self.messages.NO_PERMISSION, field="user")
        return actor

    async def _authorize_owned(
        self,
        policy: OwnedPermission,
        record: Record,
        user_id: Any,
        owner_field: str = "author_id",
    ) -> Optional[User]:
        """Gate an owner-aware action on an existing record.

        Order: actor resolution, role check, ownership check.
        """
        actor = None
        if not policy.is_open:
            actor = await self._require_actor(user_id)

        if policy.role != Role.GUEST and not role_satisfies(actor.role, policy.role):
            raise PermissionDeniedError(self.messages.NO_PERMISSION, field="user")

        if not policy.public and not self._is_owner(actor, record, owner_field):
            raise PermissionDeniedError(self.messages.NO_PERMISSION, field="user")

        return actor

    @staticmethod
    def _is_owner(actor: Optional[User], record: Record, owner_field: str = "author_id") -> bool:
        owner = record.get(owner_field)
        return actor is not None and owner is not None and str(owner) == str(actor.id)

    async def _get_record(self, identity: Any, message: Any, field: str) -> Record:
        record = await self._identity.resolve(identity, self._store)
        if record is None:
            raise EntityNotFoundError(message, field=field)
        return record

    async def _list(
        self,
        filter: Filter,
        page: Any,
        limit: Any,
        sort: Optional[Sequence[str]] = None,
    ) -> Tuple[List[Record], PageData]:
        limit = resolve_limit(
            limit,
            self._settings.default_page_size,
            self._settings.effective_max_page_size,
        )
        total = await self._store.count(filter)
        pagination = paginate(page, limit, total)
        records = await self._store.find(
            filter, sort=sort, skip=pagination.skip, limit=pagination.limit
        )
        return records, pagination.page_data
