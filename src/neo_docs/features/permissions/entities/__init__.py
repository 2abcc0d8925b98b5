from .roles import coerce_role, role_satisfies
from .permissions import (
    CategoryPermissions,
    CommentPermissions,
    DocumentPermissions,
    OwnedPermission,
)
from .options import (
    AdvancePermissionOptions,
    CategoryAdvancePermissionOptions,
    CategoryOptions,
    CategoryPermissionOptions,
    CommentOptions,
    DocumentOptions,
    FieldSpecOptions,
    OwnedPermissionOptions,
    PermissionOptions,
)
from .document_config import (
    FIELD_TYPES,
    CategoryConfig,
    CommentConfig,
    DocumentConfig,
    FieldSpec,
)

__all__ = [
    "coerce_role",
    "role_satisfies",
    "CategoryPermissions",
    "CommentPermissions",
    "DocumentPermissions",
    "OwnedPermission",
    "AdvancePermissionOptions",
    "CategoryAdvancePermissionOptions",
    "CategoryOptions",
    "CategoryPermissionOptions",
    "CommentOptions",
    "DocumentOptions",
    "FieldSpecOptions",
    "OwnedPermissionOptions",
    "PermissionOptions",
    "FIELD_TYPES",
    "CategoryConfig",
    "CommentConfig",
    "DocumentConfig",
    "FieldSpec",
]
