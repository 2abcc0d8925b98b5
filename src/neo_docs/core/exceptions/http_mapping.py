"""Status code and error code mapping for exceptions."""

from typing import Dict, Type

from ...config.constants import ErrorCode, StatusCode
from .base import DuplicateRecordError, StorageError
from .domain import (
    EntityNotFoundError,
    FeatureDisabledError,
    PermissionDeniedError,
    ValidationConflictError,
)


HTTP_STATUS_MAP: Dict[Type[Exception], StatusCode] = {
    # 403 Forbidden
    PermissionDeniedError: StatusCode.FORBIDDEN,

    # 404 Not Found
    EntityNotFoundError: StatusCode.NOT_FOUND,
    FeatureDisabledError: StatusCode.NOT_FOUND,

    # 409 Conflict
    ValidationConflictError: StatusCode.CONFLICT,
    DuplicateRecordError: StatusCode.CONFLICT,

    # 500 Internal Server Error
    StorageError: StatusCode.INTERNAL_ERROR,
}


ERROR_CODE_MAP: Dict[Type[Exception], ErrorCode] = {
    PermissionDeniedError: ErrorCode.PERMISSION_DENIED,
    EntityNotFoundError: ErrorCode.NOT_FOUND,
    FeatureDisabledError: ErrorCode.FEATURE_DISABLED,
    ValidationConflictError: ErrorCode.VALIDATION_CONFLICT,
    DuplicateRecordError: ErrorCode.VALIDATION_CONFLICT,
    StorageError: ErrorCode.STORAGE_FAILURE,
}


def _lookup(mapping: Dict[Type[Exception], object], exception: Exception):
    # Most specific class wins
    for klass in type(exception).__mro__:
        if klass in mapping:
            return mapping[klass]
    return None


def get_http_status_code(exception: Exception) -> StatusCode:
    """Get the status code for an exception, 500 when unmapped."""
    return _lookup(HTTP_STATUS_MAP, exception) or StatusCode.INTERNAL_ERROR


def get_error_code(exception: Exception) -> ErrorCode:
    """Get the result error code for an exception, STORAGE_FAILURE when unmapped."""
    return _lookup(ERROR_CODE_MAP, exception) or ErrorCode.STORAGE_FAILURE
