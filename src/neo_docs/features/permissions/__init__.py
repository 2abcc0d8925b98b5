"""Permissions feature: role hierarchy, declarations and their normalization."""

from .entities import *  # noqa: F401,F403
from .entities import __all__ as _entity_names
from .services import PermissionResolver, normalize

__all__ = list(_entity_names) + ["PermissionResolver", "normalize"]
