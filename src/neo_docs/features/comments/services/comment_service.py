"""Comment tree controller.

Comments reference their document and, for replies, a parent comment.
``children`` is never stored: it is read back through the store's
reverse lookup on ``parent`` whenever a comment is returned.
"""

import logging
from typing import Any, List, Mapping, Optional, Sequence, Union

from ....config.constants import CommentState, Role, StatusCode
from ....config.messages import CommentMessage
from ....config.settings import DocumentSettings
from ....core.error_handling import operation_result
from ....core.exceptions import (
    EntityNotFoundError,
    FeatureDisabledError,
    PermissionDeniedError,
    ValidationConflictError,
)
from ....core.results import OperationResult
from ...access.services import EntityAccessController
from ...permissions.entities import DocumentConfig, role_satisfies
from ...storage.entities import Record, RecordStore
from ...storage.services import IdentityResolver
from ...storage.utils import restrict_sort
from ...users.entities import User, UserDirectory
from ..utils.validation import (
    COMMENT_SORT_FIELDS,
    clean_filter,
    validate_content,
    validate_state,
)

logger = logging.getLogger(__name__)


class CommentService(EntityAccessController):
    """Comment CRUD with moderation states and one-level delete cascade."""

    messages = CommentMessage

    def __init__(
        self,
        config: DocumentConfig,
        store: RecordStore,
        document_store: RecordStore,
        users: UserDirectory,
        identity_resolver: Optional[IdentityResolver] = None,
        settings: Optional[DocumentSettings] = None,
    ):
        super().__init__(config, store, users, identity_resolver, settings)
        self._document_store = document_store

    @property
    def enabled(self) -> bool:
        return self._config.comments.enabled

    def _ensure_enabled(self) -> None:
        if not self.enabled:
            raise FeatureDisabledError(CommentMessage.DISABLED, field="comments")

    async def _with_children(self, comment: Record) -> Record:
        comment["children"] = await self._store.find_related("parent", comment["id"])
        return comment

    @operation_result("get comment")
    async def get_comment(self, comment_id: Any) -> OperationResult[Record]:
        self._ensure_enabled()

        comment = await self._store.find_by_id(comment_id)
        if comment is None:
            raise EntityNotFoundError(CommentMessage.COMMENT_NOT_FOUND, field="comment")

        return OperationResult.success(await self._with_children(comment), CommentMessage.SUCCESS)

    @operation_result("get document comments")
    async def get_document_comments(
        self,
        identity: Any,
        page: Any = 1,
        limit: Any = None,
    ) -> OperationResult[List[Record]]:
        """List the accepted comments of one document, oldest first."""
        self._ensure_enabled()

        document = await self._identity.resolve(identity, self._document_store)
        if document is None:
            raise EntityNotFoundError(CommentMessage.DOCUMENT_NOT_FOUND, field="document")

        filter = {"document": document["id"], "state": CommentState.ACCEPTED.value}
        comments, page_data = await self._list(filter, page, limit, ["created_at"])
        comments = [await self._with_children(comment) for comment in comments]
        return OperationResult.success(comments, CommentMessage.SUCCESS, page_data=page_data)

    @operation_result("get comments")
    async def get_comments(
        self,
        page: Any = 1,
        limit: Any = None,
        filter: Optional[Mapping[str, Any]] = None,
        sort: Union[str, Sequence[str], None] = "-created_at",
    ) -> OperationResult[List[Record]]:
        """Unrestricted listing for moderation surfaces."""
        self._ensure_enabled()

        filter = clean_filter(filter)
        sort = restrict_sort(sort, COMMENT_SORT_FIELDS)
        comments, page_data = await self._list(filter, page, limit, sort)
        return OperationResult.success(comments, CommentMessage.SUCCESS, page_data=page_data)

    @operation_result("create comment")
    async def new_comment(self, payload: Mapping[str, Any], user_id: Any = None) -> OperationResult[Record]:
        self._ensure_enabled()
        permissions = self._config.comments.permissions

        if permissions.can_write == Role.GUEST:
            actor = await self._require_actor(user_id) if user_id else None
        else:
            actor = await self._require_actor(user_id)
            if not role_satisfies(actor.role, permissions.can_write):
                raise PermissionDeniedError(CommentMessage.NO_PERMISSION, field="user")

        content = validate_content(payload)

        document = await self._identity.resolve(payload.get("document"), self._document_store)
        if document is None:
            raise EntityNotFoundError(CommentMessage.DOCUMENT_NOT_FOUND, field="document")

        parent_id = None
        if payload.get("parent"):
            parent = await self._store.find_by_id(payload["parent"])
            if parent is None:
                raise EntityNotFoundError(CommentMessage.PARENT_NOT_FOUND, field="parent")
            if parent.get("document") != document["id"]:
                raise ValidationConflictError(CommentMessage.PARENT_MISMATCH, field="parent")
            parent_id = parent["id"]

        state = CommentState.WAITING if permissions.need_to_verify else CommentState.ACCEPTED
        comment = await self._store.insert({
            **content,
            "document": document["id"],
            "user": actor.id if actor else None,
            "parent": parent_id,
            "state": state.value,
        })

        logger.info(f"Created comment {comment['id']} on {self._config.name} document {document['id']}")
        return OperationResult.success(comment, CommentMessage.SUCCESS_CREATE, status=StatusCode.CREATED)

    @operation_result("edit comment")
    async def edit_comment(
        self,
        comment_id: Any,
        payload: Mapping[str, Any],
        editor_id: Any = None,
    ) -> OperationResult[Record]:
        """Edit title, body or state.

        Any known editor may edit. Edits by editors below the verify bar
        always send the comment back to WAITING.
        """
        self._ensure_enabled()
        editor = await self._require_actor(editor_id)

        comment = await self._store.find_by_id(comment_id)
        if comment is None:
            raise EntityNotFoundError(CommentMessage.COMMENT_NOT_FOUND, field="comment_id")

        is_verifier = self._can_verify(editor, comment)
        changes = validate_content(payload, partial=True)
        if "state" in payload:
            changes["state"] = validate_state(payload["state"])
        if not is_verifier:
            changes["state"] = CommentState.WAITING.value

        updated = await self._store.update(comment["id"], changes)
        if updated is None:
            raise EntityNotFoundError(CommentMessage.COMMENT_NOT_FOUND, field="comment_id")

        return OperationResult.success(updated, CommentMessage.SUCCESS_EDIT)

    @operation_result("delete comment")
    async def delete_comment(self, comment_id: Any, editor_id: Any = None) -> OperationResult[Record]:
        """Delete a comment and mark its direct replies PARENT_DELETED."""
        self._ensure_enabled()
        editor = await self._require_actor(editor_id)

        comment = await self._store.find_by_id(comment_id)
        if comment is None:
            raise EntityNotFoundError(CommentMessage.COMMENT_NOT_FOUND, field="comment_id")

        can_manage = role_satisfies(editor.role, self._config.comments.permissions.can_manage)
        if not can_manage and not self._is_owner(editor, comment, "user"):
            raise PermissionDeniedError(CommentMessage.NO_PERMISSION, field="editor")

        children = await self._store.find_related("parent", comment["id"])
        if not await self._store.delete(comment["id"]):
            raise EntityNotFoundError(CommentMessage.COMMENT_NOT_FOUND, field="comment_id")

        # One level only: grandchildren keep their state
        cascaded = []
        for child in children:
            updated = await self._store.update(child["id"], {"state": CommentState.PARENT_DELETED.value})
            if updated is not None:
                cascaded.append(updated)

        comment["children"] = cascaded
        logger.info(f"Deleted comment {comment['id']}, {len(cascaded)} replies marked parent_deleted")
        return OperationResult.success(comment, CommentMessage.SUCCESS_DELETE)

    def _can_verify(self, editor: User, comment: Record) -> bool:
        policy = self._config.comments.permissions.can_verify
        if not role_satisfies(editor.role, policy.role):
            return False
        return policy.public or self._is_owner(editor, comment, "user")
