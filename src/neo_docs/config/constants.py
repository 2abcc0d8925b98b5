"""Fixed enums and constants shared across neo-docs features."""

from enum import Enum, IntEnum


class Role(str, Enum):
    """Actor roles, declared from the least to the most privileged."""
    GUEST = "guest"
    REGISTERED = "registered"
    AUTHOR = "author"
    MODERATOR = "moderator"
    ADMIN = "admin"


# Rank used by every permission comparison
ROLE_RANKS = {
    Role.GUEST: 0,
    Role.REGISTERED: 10,
    Role.AUTHOR: 20,
    Role.MODERATOR: 30,
    Role.ADMIN: 40,
}

# Role applied to write actions that were not configured
DEFAULT_WRITE_ROLE = Role.REGISTERED

# Role applied to read actions that were not configured
DEFAULT_READ_ROLE = Role.GUEST

# Role required to manage other users' comments when not configured
DEFAULT_COMMENT_MANAGE_ROLE = Role.MODERATOR


class DocumentState(str, Enum):
    """Lifecycle state of a document record."""
    PUBLISHED = "published"
    DRAFT = "draft"


class CommentState(str, Enum):
    """Moderation state of a comment."""
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    WAITING = "waiting"
    PARENT_DELETED = "parent_deleted"


class ResultType(str, Enum):
    """Tag of an operation result."""
    SUCCESS = "success"
    ERROR = "error"


class StatusCode(IntEnum):
    """HTTP-style status codes carried by operation results."""
    SUCCESS = 200
    CREATED = 201
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    INTERNAL_ERROR = 500


class ErrorCode(str, Enum):
    """Error taxonomy carried by failed operation results."""
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    VALIDATION_CONFLICT = "validation_conflict"
    FEATURE_DISABLED = "feature_disabled"
    STORAGE_FAILURE = "storage_failure"


# Fields the storage layer owns on every record
RECORD_MANAGED_FIELDS = frozenset({"id", "created_at", "updated_at"})

# Sort applied to listings when the caller gives none
DEFAULT_SORT = ("-created_at",)

# Cache key patterns
USER_CACHE_KEY = "{prefix}:id:{user_id}"
