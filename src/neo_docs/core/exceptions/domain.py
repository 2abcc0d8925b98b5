"""Operation errors.

These signal expected outcomes (missing records, denied access, invalid
payloads, disabled features). Services raise them internally and the
operation_result decorator turns them into error results.
"""

from typing import Any, Dict, Optional

from .base import NeoDocsError


class OperationError(NeoDocsError):
    """Expected failure of a public operation, qualified by a field."""

    def __init__(
        self,
        message: str,
        field: str,
        details: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        # Message enums are stored by value
        message = getattr(message, "value", message)
        super().__init__(message, details=details, **kwargs)
        self.field = field


class EntityNotFoundError(OperationError):
    """A user, author, document, comment or category is absent."""
    pass


class PermissionDeniedError(OperationError):
    """A role or ownership check failed."""
    pass


class ValidationConflictError(OperationError):
    """A payload conflicts with the schema or with the kind's rules."""
    pass


class SchemaValidationError(ValidationConflictError):
    """A payload field does not match the declared schema."""
    pass


class FeatureDisabledError(OperationError):
    """Comments or categories are not enabled for this document kind."""
    pass
