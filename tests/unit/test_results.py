"""Tests for operation results and exception mapping."""

import pytest

from neo_docs.config.constants import ErrorCode, ResultType, StatusCode
from neo_docs.config.messages import DocumentMessage, GeneralMessage
from neo_docs.core.error_handling import operation_result
from neo_docs.core.exceptions import (
    DuplicateRecordError,
    EntityNotFoundError,
    FeatureDisabledError,
    PermissionDeniedError,
    SchemaValidationError,
    StorageError,
    ValidationConflictError,
    get_error_code,
    get_http_status_code,
)
from neo_docs.core.results import OperationResult
from neo_docs.features.pagination import paginate


class TestOperationResult:
    """Test the result wire shape."""

    def test_success_shape(self):
        page_data = paginate(1, 10, 1).page_data
        result = OperationResult.success([{"id": "1"}], DocumentMessage.SUCCESS, page_data=page_data)

        assert result.ok
        assert result.to_dict() == {
            "type": "success",
            "status": 200,
            "data": [{"id": "1"}],
            "message": "Document found successfully",
            "page_data": page_data.to_dict(),
        }

    def test_error_shape(self):
        result = OperationResult.error(
            field="user",
            message=DocumentMessage.NO_PERMISSION,
            status=StatusCode.FORBIDDEN,
            code=ErrorCode.PERMISSION_DENIED,
        )

        assert not result.ok
        assert result.type == ResultType.ERROR
        assert result.to_dict() == {
            "type": "error",
            "status": 403,
            "field": "user",
            "message": DocumentMessage.NO_PERMISSION.value,
            "code": "permission_denied",
        }

    def test_result_is_immutable(self):
        result = OperationResult.success({"id": "1"})
        with pytest.raises(Exception):
            result.status = 500


class TestExceptionMapping:
    """Test status and error code lookup."""

    @pytest.mark.parametrize("exception,status,code", [
        (EntityNotFoundError("missing", field="document"), 404, ErrorCode.NOT_FOUND),
        (PermissionDeniedError("no", field="user"), 403, ErrorCode.PERMISSION_DENIED),
        (ValidationConflictError("bad", field="new_author"), 409, ErrorCode.VALIDATION_CONFLICT),
        (SchemaValidationError("bad", field="title"), 409, ErrorCode.VALIDATION_CONFLICT),
        (FeatureDisabledError("off", field="comments"), 404, ErrorCode.FEATURE_DISABLED),
        (DuplicateRecordError("slug", "a"), 409, ErrorCode.VALIDATION_CONFLICT),
        (StorageError("down"), 500, ErrorCode.STORAGE_FAILURE),
        (RuntimeError("boom"), 500, ErrorCode.STORAGE_FAILURE),
    ])
    def test_mapping(self, exception, status, code):
        assert get_http_status_code(exception) == status
        assert get_error_code(exception) == code

    def test_enum_messages_are_stored_by_value(self):
        error = EntityNotFoundError(DocumentMessage.DOCUMENT_NOT_FOUND, field="document")
        assert error.message == DocumentMessage.DOCUMENT_NOT_FOUND.value


class TestOperationResultDecorator:
    """Test translation of raised exceptions into results."""

    @pytest.mark.asyncio
    async def test_returns_success_unchanged(self):
        @operation_result("test op")
        async def op():
            return OperationResult.success({"id": "1"})

        result = await op()
        assert result.ok
        assert result.data == {"id": "1"}

    @pytest.mark.asyncio
    async def test_operation_error_becomes_error_result(self):
        @operation_result("test op")
        async def op():
            raise PermissionDeniedError(DocumentMessage.NO_PERMISSION, field="user")

        result = await op()
        assert result.status == 403
        assert result.field == "user"
        assert result.code == ErrorCode.PERMISSION_DENIED

    @pytest.mark.asyncio
    async def test_duplicate_becomes_conflict(self):
        @operation_result("test op")
        async def op():
            raise DuplicateRecordError("slug", "hello")

        result = await op()
        assert result.status == 409
        assert result.field == "slug"
        assert result.message == GeneralMessage.DUPLICATE_VALUE.value

    @pytest.mark.asyncio
    async def test_unexpected_error_becomes_storage_failure(self):
        @operation_result("test op")
        async def op():
            raise ConnectionError("database went away")

        result = await op()
        assert result.status == 500
        assert result.field == "server"
        assert result.code == ErrorCode.STORAGE_FAILURE
        assert result.message == GeneralMessage.INTERNAL_ERROR.value
