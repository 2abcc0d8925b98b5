"""Neo-Docs - Declarative document kinds with role-based access control.

A document kind is declared once (schema, permissions, optional comments
and categories) and served by permission-gated services over a pluggable
record store, with pagination, slug addressing and comment trees.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import (
    Role,
    ROLE_RANKS,
    DocumentState,
    CommentState,
    ResultType,
    StatusCode,
    ErrorCode,
    DocumentSettings,
    get_settings,
)

from .core.exceptions import (
    NeoDocsError,
    ConfigurationError,
    StorageError,
    DuplicateRecordError,
    OperationError,
    EntityNotFoundError,
    PermissionDeniedError,
    ValidationConflictError,
    SchemaValidationError,
    FeatureDisabledError,
    get_http_status_code,
    get_error_code,
)
from .core.results import OperationResult

from .database import DatabaseManager

from .features.pagination import PageData, paginate
from .features.permissions import (
    DocumentConfig,
    DocumentOptions,
    OwnedPermission,
    PermissionResolver,
    normalize,
    role_satisfies,
)
from .features.storage import (
    RecordStore,
    MemoryRecordStore,
    AsyncPGRecordStore,
    IdentityResolver,
)
from .features.users import (
    User,
    UserDirectory,
    MemoryUserDirectory,
    AsyncPGUserDirectory,
    CachedUserDirectory,
    create_cached_directory,
)
from .features.slugs import UniqueSlugGenerator
from .features.documents import DocumentService
from .features.comments import CommentService
from .features.categories import CategoryService

from .factory import DocumentKind, create_postgres_document_kind

__all__ = [
    "__version__",
    # Configuration
    "Role",
    "ROLE_RANKS",
    "DocumentState",
    "CommentState",
    "ResultType",
    "StatusCode",
    "ErrorCode",
    "DocumentSettings",
    "get_settings",
    # Exceptions
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
    "get_http_status_code",
    "get_error_code",
    "OperationResult",
    # Infrastructure
    "DatabaseManager",
    "PageData",
    "paginate",
    "DocumentConfig",
    "DocumentOptions",
    "OwnedPermission",
    "PermissionResolver",
    "normalize",
    "role_satisfies",
    "RecordStore",
    "MemoryRecordStore",
    "AsyncPGRecordStore",
    "IdentityResolver",
    "User",
    "UserDirectory",
    "MemoryUserDirectory",
    "AsyncPGUserDirectory",
    "CachedUserDirectory",
    "create_cached_directory",
    "UniqueSlugGenerator",
    # Services
    "DocumentService",
    "CommentService",
    "CategoryService",
    "DocumentKind",
    "create_postgres_document_kind",
]
