"""Document access controller: getAll, getOne, create, edit and delete."""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from ....config.constants import DocumentState, Role, StatusCode
from ....config.messages import DocumentMessage
from ....config.settings import DocumentSettings
from ....core.error_handling import operation_result
from ....core.exceptions import (
    EntityNotFoundError,
    PermissionDeniedError,
    ValidationConflictError,
)
from ....core.results import OperationResult
from ...access.services import EntityAccessController
from ...permissions.entities import DocumentConfig, role_satisfies
from ...slugs.entities import SlugGenerator
from ...slugs.services import UniqueSlugGenerator
from ...storage.entities import Record, RecordStore
from ...storage.services import IdentityResolver
from ...storage.utils import restrict_sort
from ...users.entities import User, UserDirectory
from ..utils.schema_validation import validate_payload

logger = logging.getLogger(__name__)

# Always sortable, whatever sort_fields declares
TIMESTAMP_SORT_FIELDS = ("created_at", "updated_at")


class DocumentService(EntityAccessController):
    """Permission-gated CRUD over the records of one document kind."""

    messages = DocumentMessage

    def __init__(
        self,
        config: DocumentConfig,
        store: RecordStore,
        users: UserDirectory,
        slug_generator: Optional[SlugGenerator] = None,
        category_store: Optional[RecordStore] = None,
        identity_resolver: Optional[IdentityResolver] = None,
        settings: Optional[DocumentSettings] = None,
    ):
        super().__init__(config, store, users, identity_resolver, settings)
        self._slugs = slug_generator or UniqueSlugGenerator()
        self._category_store = category_store

    @operation_result("get all documents")
    async def get_all(
        self,
        page: Any = 1,
        limit: Any = None,
        sort: Union[str, Sequence[str], None] = None,
        user_id: Any = None,
    ) -> OperationResult[List[Record]]:
        """List documents, drafts included only for the get_drafts audience."""
        permissions = self._config.permissions
        actor = await self._authorize_read(permissions.get_all, user_id)

        filter: Dict[str, Any] = {"state": DocumentState.PUBLISHED.value}
        drafts = permissions.get_drafts
        if drafts.is_open:
            filter = {}
        elif user_id:
            if actor is None:
                actor = await self._find_user(user_id)
            if actor is not None and role_satisfies(actor.role, drafts.role):
                filter = {}

        sort = restrict_sort(sort, self._sortable_fields())
        records, page_data = await self._list(filter, page, limit, sort)
        return OperationResult.success(records, DocumentMessage.SUCCESS, page_data=page_data)

    @operation_result("get one document")
    async def get_one(self, identity: Any, user_id: Any = None) -> OperationResult[Record]:
        await self._authorize_read(self._config.permissions.get_one, user_id)

        record = await self._get_record(identity, DocumentMessage.DOCUMENT_NOT_FOUND, "document")
        return OperationResult.success(record, DocumentMessage.SUCCESS)

    @operation_result("create document")
    async def create(self, payload: Mapping[str, Any], author_id: Any = None) -> OperationResult[Record]:
        actor = await self._authorize_create(
            self._config.permissions.create, author_id, DocumentMessage.AUTHOR_NOT_FOUND
        )

        data = dict(payload) if isinstance(payload, Mapping) else payload
        if isinstance(data, dict):
            # The author is always the creating actor
            data.pop("author_id", None)
        data = validate_payload(data, self._config)
        data.setdefault("state", DocumentState.PUBLISHED.value)

        if self._config.category.enabled:
            data["categories"] = await self._resolve_categories(data.get("categories", []), actor)
        if self._config.has_author:
            data["author_id"] = actor.id
        if self._config.has_slug:
            data["slug"] = await self._slugs.generate(data.get(self._config.slug_base) or "", self._store)

        record = await self._store.insert(data)
        logger.info(f"Created {self._config.name} document {record['id']}")
        return OperationResult.success(record, DocumentMessage.SUCCESS_CREATE, status=StatusCode.CREATED)

    @operation_result("edit document")
    async def edit(
        self,
        identity: Any,
        payload: Mapping[str, Any],
        editor_id: Any = None,
    ) -> OperationResult[Record]:
        """Partially update a document.

        Checks run in a fixed order: existence, edit permission, ownership,
        then eligibility of a reassigned author against the create permission.
        """
        record = await self._get_record(identity, DocumentMessage.DOCUMENT_NOT_FOUND, "document")
        actor = await self._authorize_owned(self._config.permissions.edit, record, editor_id)

        new_author = None
        if self._config.has_author and isinstance(payload, Mapping) and "author_id" in payload:
            new_author = await self._check_new_author(payload["author_id"])

        changes = validate_payload(payload, self._config, partial=True)
        if new_author is not None:
            changes["author_id"] = new_author.id
        if "categories" in changes:
            changes["categories"] = await self._resolve_categories(changes["categories"], actor)

        updated = await self._store.update(record["id"], changes)
        if updated is None:
            raise EntityNotFoundError(DocumentMessage.DOCUMENT_NOT_FOUND, field="document")

        logger.info(f"Edited {self._config.name} document {record['id']}")
        return OperationResult.success(updated, DocumentMessage.SUCCESS_EDIT)

    @operation_result("delete document")
    async def delete(self, identity: Any, user_id: Any = None) -> OperationResult[Record]:
        record = await self._get_record(identity, DocumentMessage.DOCUMENT_NOT_FOUND, "document")
        await self._authorize_owned(self._config.permissions.delete, record, user_id)

        if not await self._store.delete(record["id"]):
            raise EntityNotFoundError(DocumentMessage.DOCUMENT_NOT_FOUND, field="document")

        logger.info(f"Deleted {self._config.name} document {record['id']}")
        return OperationResult.success(record, DocumentMessage.SUCCESS_DELETE)

    async def _check_new_author(self, new_author_id: Any) -> User:
        new_author = await self._find_user(new_author_id)
        if new_author is None:
            raise EntityNotFoundError(DocumentMessage.USER_NOT_FOUND, field="new_author")

        if not role_satisfies(new_author.role, self._config.permissions.create):
            raise ValidationConflictError(DocumentMessage.NEW_AUTHOR_IS_NOT_VALID, field="new_author")
        return new_author

    async def _resolve_categories(self, identities: List[str], actor: Optional[User]) -> List[str]:
        """Resolve category identities to ids, enforcing the category use permission."""
        if not identities:
            return []

        policy = self._config.category.permissions.use
        if not policy.is_open and actor is None:
            raise PermissionDeniedError(DocumentMessage.NO_PERMISSION, field="categories")
        if policy.role != Role.GUEST and not role_satisfies(actor.role, policy.role):
            raise PermissionDeniedError(DocumentMessage.NO_PERMISSION, field="categories")

        category_ids: List[str] = []
        for identity in identities:
            category = await self._identity.resolve(identity, self._category_store)
            if category is None:
                raise EntityNotFoundError(DocumentMessage.CATEGORY_NOT_FOUND, field="categories")
            if not policy.public and not self._is_owner(actor, category):
                raise PermissionDeniedError(DocumentMessage.NO_PERMISSION, field="categories")
            if category["id"] not in category_ids:
                category_ids.append(category["id"])
        return category_ids

    def _sortable_fields(self) -> Optional[Sequence[str]]:
        if not self._config.sort_fields:
            return None
        return tuple(self._config.sort_fields) + TIMESTAMP_SORT_FIELDS
