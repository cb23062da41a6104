# tests/core/test_gate.py

"""
권한 게이트 단위 테스트.
"""

import pytest

from restobar.core.exceptions import AuthorizationDenied
from restobar.core.gate import Ability, Actor, PermissionGate, permission_name
from restobar.domains.loc.resources import areas
from restobar.domains.usr.models import Role, User
from restobar.domains.usr.resources import ADMIN_ROLE, roles, users

gate = PermissionGate()


def test_permission_names():
    assert permission_name("areas", Ability.VIEW_ANY) == "areas:view"
    assert permission_name("areas", Ability.VIEW) == "areas:view"
    assert permission_name("dishes", Ability.DELETE) == "dishes:delete"


def test_actor_without_permission_is_denied():
    actor = Actor(id=1, email="mozo@restobar.com", permissions=frozenset({"areas:view"}))
    assert gate.can(actor, Ability.VIEW_ANY, areas)
    assert gate.can(actor, Ability.VIEW, areas)
    assert not gate.can(actor, Ability.CREATE, areas)

    with pytest.raises(AuthorizationDenied) as excinfo:
        gate.authorize(actor, Ability.DELETE, areas, locale="en")
    assert excinfo.value.status_code == 403
    assert excinfo.value.body() == {"message": "This action is unauthorized."}


def test_user_cannot_delete_self():
    actor = Actor(id=7, email="admin@restobar.com", permissions=frozenset({"users:delete", "users:update"}))
    assert not gate.can(actor, Ability.DELETE, users, User(id=7, name="a", email="a@restobar.com", password_hash="x"))
    assert gate.can(actor, Ability.DELETE, users, User(id=8, name="b", email="b@restobar.com", password_hash="x"))
    assert gate.can(actor, Ability.UPDATE, users, User(id=7, name="a", email="a@restobar.com", password_hash="x"))


def test_admin_role_cannot_be_deleted():
    actor = Actor(id=1, email="admin@restobar.com", permissions=frozenset({"roles:delete"}))
    assert not gate.can(actor, Ability.DELETE, roles, Role(id=1, name=ADMIN_ROLE))
    assert gate.can(actor, Ability.DELETE, roles, Role(id=2, name="cajero"))


def test_policy_never_grants_missing_permission():
    actor = Actor(id=1, email="admin@restobar.com", permissions=frozenset())
    assert not gate.can(actor, Ability.DELETE, roles, Role(id=2, name="cajero"))
