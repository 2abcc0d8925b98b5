from .permission_resolver import PermissionResolver, normalize

__all__ = ["PermissionResolver", "normalize"]
