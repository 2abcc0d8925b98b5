"""Tests for the role hierarchy."""

import pytest

from neo_docs.config.constants import Role
from neo_docs.features.permissions.entities.roles import coerce_role, role_satisfies


class TestRoleSatisfies:
    """Test role comparison against a required role."""

    @pytest.mark.parametrize("actor,required,expected", [
        (Role.ADMIN, Role.MODERATOR, True),
        (Role.MODERATOR, Role.MODERATOR, True),
        (Role.AUTHOR, Role.MODERATOR, False),
        (Role.REGISTERED, Role.GUEST, True),
        (Role.GUEST, Role.REGISTERED, False),
    ])
    def test_rank_comparison(self, actor, required, expected):
        assert role_satisfies(actor, required) is expected

    def test_string_roles_are_coerced(self):
        assert role_satisfies("admin", "registered") is True
        assert role_satisfies("REGISTERED", Role.AUTHOR) is False

    def test_missing_actor_role_only_meets_guest(self):
        assert role_satisfies(None, Role.GUEST) is True
        assert role_satisfies(None, Role.REGISTERED) is False

    def test_unknown_actor_role_ranks_as_guest(self):
        assert role_satisfies("superhero", Role.GUEST) is True
        assert role_satisfies("superhero", Role.REGISTERED) is False

    def test_unknown_required_role_raises(self):
        with pytest.raises(ValueError):
            role_satisfies(Role.ADMIN, "superhero")


def test_coerce_role():
    """Test stored role values convert to Role members."""
    assert coerce_role("Moderator") == Role.MODERATOR
    assert coerce_role(Role.AUTHOR) == Role.AUTHOR
    assert coerce_role(None) is None
    assert coerce_role("nobody") is None
