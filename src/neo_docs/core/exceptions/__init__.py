"""Exception hierarchy for neo-docs."""

from .base import (
    NeoDocsError,
    ConfigurationError,
    StorageError,
    DuplicateRecordError,
)
from .domain import (
    OperationError,
    EntityNotFoundError,
    PermissionDeniedError,
    ValidationConflictError,
    SchemaValidationError,
    FeatureDisabledError,
)
from .http_mapping import (
    HTTP_STATUS_MAP,
    ERROR_CODE_MAP,
    get_http_status_code,
    get_error_code,
)

__all__ = [
    "NeoDocsError",
    "ConfigurationError",
    "StorageError",
    "DuplicateRecordError",
    "OperationError",
    "EntityNotFoundError",
    "PermissionDeniedError",
    "ValidationConflictError",
    "SchemaValidationError",
    "FeatureDisabledError",
    "HTTP_STATUS_MAP",
    "ERROR_CODE_MAP",
    "get_http_status_code",
    "get_error_code",
]
