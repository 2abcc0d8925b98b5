"""Normalized, immutable configuration of a document kind."""

from dataclasses import dataclass
from typing import Any, FrozenSet, Mapping, Optional, Tuple

from ....config.constants import Role
from .permissions import CategoryPermissions, CommentPermissions, DocumentPermissions


FIELD_TYPES = frozenset({"string", "integer", "number", "boolean", "list", "dict", "datetime", "any"})


@dataclass(frozen=True)
class FieldSpec:
    """Declared type and constraints of one payload field."""

    type: str = "any"
    required: bool = False
    default: Any = None
    unique: bool = False


@dataclass(frozen=True)
class CommentConfig:
    enabled: bool
    permissions: CommentPermissions


@dataclass(frozen=True)
class CategoryConfig:
    enabled: bool
    permissions: CategoryPermissions


@dataclass(frozen=True)
class DocumentConfig:
    """Fully populated document kind configuration.

    Built once by the PermissionResolver and shared read-only by every
    service of the kind.
    """

    name: str
    fields: Mapping[str, FieldSpec]
    permissions: DocumentPermissions
    comments: CommentConfig
    category: CategoryConfig
    slug_base: Optional[str] = None
    indexes: Tuple[Mapping[str, int], ...] = ()
    search_on: Tuple[str, ...] = ()
    sort_fields: Tuple[str, ...] = ()

    @property
    def has_slug(self) -> bool:
        return self.slug_base is not None

    @property
    def has_author(self) -> bool:
        """Records carry an author unless guests may create them."""
        return self.permissions.create != Role.GUEST

    @property
    def system_fields(self) -> FrozenSet[str]:
        """Server-known fields a payload may carry besides the declared ones."""
        system_fields = {"state"}
        if self.has_author:
            system_fields.add("author_id")
        if self.category.enabled:
            system_fields.add("categories")
        return frozenset(system_fields)

    @property
    def unique_fields(self) -> Tuple[str, ...]:
        declared = tuple(name for name, spec in self.fields.items() if spec.unique)
        return (("slug",) if self.has_slug else ()) + declared
