"""Base exceptions for neo-docs.

All exceptions inherit from NeoDocsError and carry an error code and
details. Status codes and result error codes are mapped in http_mapping.
"""

from typing import Any, Dict, Optional


class NeoDocsError(Exception):
    """Base exception for all neo-docs errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(NeoDocsError):
    """Raised when a document kind declaration can not be normalized."""
    pass


class StorageError(NeoDocsError):
    """Raised by a storage collaborator on an unexpected fault."""
    pass


class DuplicateRecordError(StorageError):
    """Raised when a write violates a unique field."""

    def __init__(self, field: str, value: Any, **kwargs):
        super().__init__(
            f"Duplicate value for '{field}'",
            details={"field": field, "value": value},
            **kwargs
        )
        self.field = field
