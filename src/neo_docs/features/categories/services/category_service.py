"""Category controller: one level of nesting over a slugged category list."""

import logging
from typing import Any, List, Mapping, Optional, Sequence, Union

from ....config.constants import DocumentState, StatusCode
from ....config.messages import CategoryMessage
from ....config.settings import DocumentSettings
from ....core.error_handling import operation_result
from ....core.exceptions import (
    EntityNotFoundError,
    FeatureDisabledError,
    ValidationConflictError,
)
from ....core.results import OperationResult
from ...access.services import EntityAccessController
from ...permissions.entities import DocumentConfig
from ...slugs.entities import SlugGenerator
from ...slugs.services import UniqueSlugGenerator
from ...storage.entities import Record, RecordStore
from ...storage.services import IdentityResolver
from ...storage.utils import restrict_sort
from ...users.entities import UserDirectory
from ..utils.validation import CATEGORY_SORT_FIELDS, validate_category

logger = logging.getLogger(__name__)


class CategoryService(EntityAccessController):
    """Permission-gated CRUD over the categories of one document kind.

    ``children`` and ``documents`` are reverse views computed on read.
    """

    messages = CategoryMessage

    def __init__(
        self,
        config: DocumentConfig,
        store: RecordStore,
        document_store: RecordStore,
        users: UserDirectory,
        slug_generator: Optional[SlugGenerator] = None,
        identity_resolver: Optional[IdentityResolver] = None,
        settings: Optional[DocumentSettings] = None,
    ):
        super().__init__(config, store, users, identity_resolver, settings)
        self._document_store = document_store
        self._slugs = slug_generator or UniqueSlugGenerator()

    @property
    def enabled(self) -> bool:
        return self._config.category.enabled

    @property
    def _permissions(self):
        return self._config.category.permissions

    def _ensure_enabled(self) -> None:
        if not self.enabled:
            raise FeatureDisabledError(CategoryMessage.DISABLED, field="category")

    @operation_result("get all categories")
    async def get_all(
        self,
        page: Any = 1,
        limit: Any = None,
        user_id: Any = None,
        sort: Union[str, Sequence[str], None] = None,
    ) -> OperationResult[List[Record]]:
        self._ensure_enabled()
        await self._authorize_read(self._permissions.get_all, user_id)

        sort = restrict_sort(sort, CATEGORY_SORT_FIELDS)
        categories, page_data = await self._list({}, page, limit, sort)
        return OperationResult.success(categories, CategoryMessage.SUCCESS, page_data=page_data)

    @operation_result("get one category")
    async def get_one(
        self,
        identity: Any,
        user_id: Any = None,
        with_documents: bool = False,
    ) -> OperationResult[Record]:
        """Fetch a category with its children, and its published documents on request."""
        self._ensure_enabled()
        required = self._permissions.get_all_and_docs if with_documents else self._permissions.get_one
        await self._authorize_read(required, user_id)

        category = await self._get_record(identity, CategoryMessage.CATEGORY_NOT_FOUND, "category")
        category["children"] = await self._store.find_related("parent", category["id"])
        if with_documents:
            category["documents"] = await self._document_store.find(
                {"categories": category["id"], "state": DocumentState.PUBLISHED.value},
                sort=["-created_at"],
            )
        return OperationResult.success(category, CategoryMessage.SUCCESS)

    @operation_result("create category")
    async def create(self, payload: Mapping[str, Any], author_id: Any = None) -> OperationResult[Record]:
        self._ensure_enabled()
        actor = await self._authorize_create(
            self._permissions.create, author_id, CategoryMessage.AUTHOR_NOT_FOUND
        )

        data = validate_category(payload)
        if data["parent"] is not None:
            data["parent"] = await self._check_parent(data["parent"])
        if actor is not None:
            data["author_id"] = actor.id
        data["slug"] = await self._slugs.generate(data["name"], self._store)

        category = await self._store.insert(data)
        logger.info(f"Created {self._config.name} category {category['id']}")
        return OperationResult.success(category, CategoryMessage.SUCCESS_CREATE, status=StatusCode.CREATED)

    @operation_result("edit category")
    async def edit(
        self,
        identity: Any,
        payload: Mapping[str, Any],
        editor_id: Any = None,
    ) -> OperationResult[Record]:
        self._ensure_enabled()
        category = await self._get_record(identity, CategoryMessage.CATEGORY_NOT_FOUND, "category")
        await self._authorize_owned(self._permissions.edit, category, editor_id)

        changes = validate_category(payload, partial=True)
        if changes.get("parent") is not None:
            changes["parent"] = await self._check_parent(changes["parent"], category)
        if "name" in changes and changes["name"] != category.get("name"):
            changes["slug"] = await self._slugs.generate(
                changes["name"], self._store, exclude_id=category["id"]
            )

        updated = await self._store.update(category["id"], changes)
        if updated is None:
            raise EntityNotFoundError(CategoryMessage.CATEGORY_NOT_FOUND, field="category")
        return OperationResult.success(updated, CategoryMessage.SUCCESS_EDIT)

    @operation_result("delete category")
    async def delete(self, identity: Any, user_id: Any = None) -> OperationResult[Record]:
        """Delete a childless category and detach it from every document."""
        self._ensure_enabled()
        category = await self._get_record(identity, CategoryMessage.CATEGORY_NOT_FOUND, "category")
        await self._authorize_owned(self._permissions.delete, category, user_id)

        if await self._store.count({"parent": category["id"]}):
            raise ValidationConflictError(CategoryMessage.HAS_CHILDREN, field="category")

        documents = await self._document_store.find_related("categories", category["id"])
        if not await self._store.delete(category["id"]):
            raise EntityNotFoundError(CategoryMessage.CATEGORY_NOT_FOUND, field="category")

        for document in documents:
            remaining = [c for c in document.get("categories") or [] if c != category["id"]]
            await self._document_store.update(document["id"], {"categories": remaining})

        logger.info(
            f"Deleted {self._config.name} category {category['id']}, detached from {len(documents)} documents"
        )
        return OperationResult.success(category, CategoryMessage.SUCCESS_DELETE)

    async def _check_parent(self, parent_identity: Any, category: Optional[Record] = None) -> str:
        """Resolve a parent reference, keeping the tree one level deep."""
        parent = await self._identity.resolve(parent_identity, self._store)
        if parent is None:
            raise EntityNotFoundError(CategoryMessage.PARENT_NOT_FOUND, field="parent")

        if category is not None:
            if parent["id"] == category["id"]:
                raise ValidationConflictError(CategoryMessage.PARENT_IS_SELF, field="parent")
            if await self._store.count({"parent": category["id"]}):
                raise ValidationConflictError(CategoryMessage.PARENT_TOO_DEEP, field="parent")

        if parent.get("parent"):
            raise ValidationConflictError(CategoryMessage.PARENT_TOO_DEEP, field="parent")
        return parent["id"]
