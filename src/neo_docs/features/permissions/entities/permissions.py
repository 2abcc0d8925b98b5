"""Normalized permission sets for documents, comments and categories.

Every field is populated once the owning DocumentConfig is built.
"""

from dataclasses import dataclass

from ....config.constants import Role


@dataclass(frozen=True)
class OwnedPermission:
    """Owner-aware action requirement.

    ``public`` lets any actor meeting ``role`` act on any record; otherwise
    the actor must also be the record's author.
    """

    role: Role
    public: bool

    @property
    def is_open(self) -> bool:
        """No actor needs to be resolved at all."""
        return self.role == Role.GUEST and self.public


@dataclass(frozen=True)
class DocumentPermissions:
    get_all: Role
    get_one: Role
    create: Role
    edit: OwnedPermission
    delete: OwnedPermission
    get_drafts: OwnedPermission


@dataclass(frozen=True)
class CommentPermissions:
    can_write: Role
    need_to_verify: bool
    can_verify: OwnedPermission
    can_manage: Role


@dataclass(frozen=True)
class CategoryPermissions:
    get_all: Role
    get_all_and_docs: Role
    get_one: Role
    create: Role
    use: OwnedPermission
    edit: OwnedPermission
    delete: OwnedPermission
