"""Turns a raw document kind declaration into a fully populated DocumentConfig.

Each advance permission is resolved with the same precedence: the explicit
advance entry, then the read/write shorthand, then the hard-coded default.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from ....config.constants import (
    DEFAULT_COMMENT_MANAGE_ROLE,
    DEFAULT_READ_ROLE,
    DEFAULT_WRITE_ROLE,
    Role,
)
from ....core.exceptions import ConfigurationError
from ..entities.document_config import (
    FIELD_TYPES,
    CategoryConfig,
    CommentConfig,
    DocumentConfig,
    FieldSpec,
)
from ..entities.options import (
    CategoryOptions,
    CommentOptions,
    DocumentOptions,
    FieldSpecOptions,
    OwnedPermissionOptions,
    PermissionOptions,
)
from ..entities.permissions import (
    CategoryPermissions,
    CommentPermissions,
    DocumentPermissions,
    OwnedPermission,
)

logger = logging.getLogger(__name__)

RESERVED_FIELDS = frozenset({"id", "created_at", "updated_at", "slug", "state", "author_id", "categories"})

RawConfig = Union[DocumentConfig, DocumentOptions, Dict[str, Any]]


def _owned(
    explicit: Optional[OwnedPermissionOptions],
    role: Role,
    public: bool,
) -> OwnedPermission:
    if explicit is not None:
        return OwnedPermission(role=explicit.role, public=explicit.public)
    return OwnedPermission(role=role, public=public)


class PermissionResolver:
    """Builds DocumentConfig values from declarations."""

    def __init__(
        self,
        default_read_role: Role = DEFAULT_READ_ROLE,
        default_write_role: Role = DEFAULT_WRITE_ROLE,
        default_manage_role: Role = DEFAULT_COMMENT_MANAGE_ROLE,
    ):
        self._default_read_role = default_read_role
        self._default_write_role = default_write_role
        self._default_manage_role = default_manage_role

    def normalize(self, raw: RawConfig) -> DocumentConfig:
        """Resolve a declaration. An already normalized config is returned as is."""
        if isinstance(raw, DocumentConfig):
            return raw

        if not isinstance(raw, DocumentOptions):
            try:
                raw = DocumentOptions.model_validate(raw)
            except ValidationError as e:
                raise ConfigurationError(
                    f"Invalid document kind declaration: {e}",
                    details={"errors": e.errors(include_url=False)},
                ) from e

        reserved = RESERVED_FIELDS.intersection(raw.database_schema)
        if reserved:
            raise ConfigurationError(
                f"Fields {sorted(reserved)} are managed by neo-docs and can not be declared"
            )

        fields = {name: self._field_spec(name, spec) for name, spec in raw.database_schema.items()}
        if raw.slug_base is not None and raw.slug_base not in fields:
            raise ConfigurationError(
                f"slug_base '{raw.slug_base}' is not a declared field of '{raw.name}'"
            )

        config = DocumentConfig(
            name=raw.name,
            fields=MappingProxyType(fields),
            permissions=self.resolve_document_permissions(raw.permissions),
            comments=self.resolve_comment_config(raw.comments),
            category=self.resolve_category_config(raw.category),
            slug_base=raw.slug_base,
            indexes=tuple(MappingProxyType(dict(index)) for index in raw.indexes),
            search_on=tuple(raw.search_on),
            sort_fields=tuple(raw.sort_fields),
        )
        logger.debug(f"Normalized document kind '{config.name}': {config.permissions}")
        return config

    def resolve_document_permissions(self, options: Optional[PermissionOptions]) -> DocumentPermissions:
        options = options or PermissionOptions()
        advance = options.advance
        read = options.read or self._default_read_role
        write = options.write or self._default_write_role

        return DocumentPermissions(
            get_all=(advance and advance.get_all) or read,
            get_one=(advance and advance.get_one) or read,
            create=(advance and advance.create) or write,
            edit=_owned(advance and advance.edit, write, public=True),
            delete=_owned(advance and advance.delete, write, public=False),
            get_drafts=_owned(advance and advance.get_drafts, write, public=True),
        )

    def resolve_comment_config(self, options: Optional[CommentOptions]) -> CommentConfig:
        """Verifying defaults to the manage role so writers can not accept their own comments."""
        options = options or CommentOptions()
        manage = options.can_manage or self._default_manage_role

        permissions = CommentPermissions(
            can_write=options.can_write or self._default_write_role,
            need_to_verify=bool(options.need_to_verify),
            can_verify=_owned(options.can_verify, manage, public=True),
            can_manage=manage,
        )
        return CommentConfig(enabled=options.enabled, permissions=permissions)

    def resolve_category_config(self, options: Optional[CategoryOptions]) -> CategoryConfig:
        options = options or CategoryOptions()
        raw_permissions = options.permissions
        advance = raw_permissions.advance if raw_permissions else None
        read = (raw_permissions and raw_permissions.read) or self._default_read_role
        write = (raw_permissions and raw_permissions.write) or self._default_write_role

        permissions = CategoryPermissions(
            get_all=(advance and advance.get_all) or read,
            get_all_and_docs=(advance and advance.get_all_and_docs) or read,
            get_one=(advance and advance.get_one) or read,
            create=(advance and advance.create) or write,
            use=_owned(advance and advance.use, write, public=True),
            edit=_owned(advance and advance.edit, write, public=True),
            delete=_owned(advance and advance.delete, write, public=False),
        )
        return CategoryConfig(enabled=options.enabled, permissions=permissions)

    @staticmethod
    def _field_spec(name: str, options: FieldSpecOptions) -> FieldSpec:
        if options.type not in FIELD_TYPES:
            raise ConfigurationError(
                f"Field '{name}' has unsupported type '{options.type}'",
                details={"supported": sorted(FIELD_TYPES)},
            )
        return FieldSpec(
            type=options.type,
            required=options.required,
            default=options.default,
            unique=options.unique,
        )


_default_resolver = PermissionResolver()


def normalize(raw: RawConfig) -> DocumentConfig:
    """Normalize a declaration with the default role fallbacks."""
    return _default_resolver.normalize(raw)
