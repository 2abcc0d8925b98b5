"""Tests for declaration normalization."""

import pytest

from neo_docs.config.constants import Role
from neo_docs.core.exceptions import ConfigurationError
from neo_docs.features.permissions import (
    DocumentConfig,
    OwnedPermission,
    PermissionResolver,
    normalize,
)


class TestDocumentPermissionDefaults:
    """Test defaults of a bare declaration."""

    def test_bare_declaration(self):
        config = normalize({"name": "notes"})
        permissions = config.permissions

        assert permissions.get_all == Role.GUEST
        assert permissions.get_one == Role.GUEST
        assert permissions.create == Role.REGISTERED
        assert permissions.edit == OwnedPermission(Role.REGISTERED, public=True)
        assert permissions.delete == OwnedPermission(Role.REGISTERED, public=False)
        assert permissions.get_drafts == OwnedPermission(Role.REGISTERED, public=True)
        assert config.comments.enabled is False
        assert config.category.enabled is False
        assert config.has_slug is False
        assert config.has_author is True

    def test_shorthand_fills_advance(self):
        config = normalize({
            "name": "notes",
            "permissions": {"read": "registered", "write": "moderator"},
        })
        permissions = config.permissions

        assert permissions.get_all == Role.REGISTERED
        assert permissions.get_one == Role.REGISTERED
        assert permissions.create == Role.MODERATOR
        assert permissions.edit.role == Role.MODERATOR
        assert permissions.delete.public is False

    def test_explicit_advance_wins(self):
        config = normalize({
            "name": "notes",
            "permissions": {
                "write": "author",
                "advance": {
                    "getAll": "admin",
                    "delete": {"role": "moderator", "public": True},
                },
            },
        })
        permissions = config.permissions

        assert permissions.get_all == Role.ADMIN
        assert permissions.get_one == Role.GUEST
        assert permissions.create == Role.AUTHOR
        assert permissions.delete == OwnedPermission(Role.MODERATOR, public=True)

    def test_guest_create_means_no_author(self):
        config = normalize({"name": "guestbook", "permissions": {"write": "guest"}})

        assert config.has_author is False
        assert "author_id" not in config.system_fields


class TestCommentAndCategoryDefaults:
    """Test defaults of the optional blocks."""

    def test_comment_defaults(self):
        config = normalize({"name": "posts", "comments": {"enabled": True}})
        permissions = config.comments.permissions

        assert config.comments.enabled is True
        assert permissions.can_write == Role.REGISTERED
        assert permissions.need_to_verify is False
        assert permissions.can_verify == OwnedPermission(Role.MODERATOR, public=True)
        assert permissions.can_manage == Role.MODERATOR

    def test_comment_verify_follows_manage_role(self):
        config = normalize({
            "name": "posts",
            "permissions": {"write": "author"},
            "comments": {"enabled": True, "needToVerify": True, "canManage": "admin"},
        })

        assert config.comments.permissions.need_to_verify is True
        assert config.comments.permissions.can_verify.role == Role.ADMIN

    def test_custom_manage_role_sets_verify_default(self):
        resolver = PermissionResolver(default_manage_role=Role.ADMIN)
        config = resolver.normalize({"name": "posts", "comments": {"enabled": True}})

        assert config.comments.permissions.can_verify.role == Role.ADMIN
        assert config.comments.permissions.can_manage == Role.ADMIN

    def test_category_defaults(self):
        config = normalize({"name": "posts", "category": {"enabled": True}})
        permissions = config.category.permissions

        assert permissions.get_all == Role.GUEST
        assert permissions.get_all_and_docs == Role.GUEST
        assert permissions.create == Role.REGISTERED
        assert permissions.use == OwnedPermission(Role.REGISTERED, public=True)
        assert permissions.delete == OwnedPermission(Role.REGISTERED, public=False)
        assert "categories" in config.system_fields


class TestNormalize:
    """Test normalization rules."""

    def test_normalize_is_idempotent(self, article_options):
        config = normalize(article_options)

        assert isinstance(config, DocumentConfig)
        assert normalize(config) is config

    def test_schema_shorthand(self, article_options):
        config = normalize(article_options)

        assert config.fields["body"].type == "string"
        assert config.fields["title"].required is True
        assert config.fields["views"].default == 0
        assert config.unique_fields == ("slug",)

    def test_config_collections_are_read_only(self):
        config = normalize({
            "name": "notes",
            "database_schema": {"title": "string"},
            "indexes": [{"title": 1}],
        })

        with pytest.raises(TypeError):
            config.fields["extra"] = config.fields["title"]
        with pytest.raises(TypeError):
            config.indexes[0]["title"] = -1

    def test_custom_default_roles(self):
        resolver = PermissionResolver(default_write_role=Role.AUTHOR)
        config = resolver.normalize({"name": "notes"})

        assert config.permissions.create == Role.AUTHOR

    @pytest.mark.parametrize("declaration", [
        {"name": ""},
        {"name": "bad name!"},
        {"name": "notes", "unknownKey": True},
        {"name": "notes", "permissions": {"read": "superhero"}},
        {"name": "notes", "database_schema": {"title": "text"}},
        {"name": "notes", "database_schema": {"slug": "string"}},
        {"name": "notes", "slug_base": "title"},
    ])
    def test_invalid_declarations(self, declaration):
        with pytest.raises(ConfigurationError):
            normalize(declaration)
