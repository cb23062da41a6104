# restobar/domains/usr/resources.py

"""
'usr' 도메인의 리소스 정의입니다.

인스턴스 정책:
- 사용자는 자기 자신의 계정을 삭제할 수 없습니다.
- 'administrador' 역할은 삭제할 수 없고, 이름을 바꿀 수도 없습니다.
"""

from typing import Any, Mapping

from sqlalchemy.orm import selectinload

from restobar.core.gate import Ability, Actor
from restobar.core.pipeline import FilterByName, FilterPipeline
from restobar.core.resource import ResourceDescriptor
from . import crud as usr_crud
from . import models as usr_models
from . import schemas as usr_schemas

ADMIN_ROLE = "administrador"
STAFF_ROLE = "personal"


def user_policy(actor: Actor, ability: Ability, target: usr_models.User) -> bool:
    if ability is Ability.DELETE:
        return target.id != actor.id
    return True


def role_policy(actor: Actor, ability: Ability, target: usr_models.Role) -> bool:
    if ability is Ability.DELETE:
        return target.name != ADMIN_ROLE
    return True


def role_change_policy(actor: Actor, target: usr_models.Role, data: Mapping[str, Any]) -> bool:
    if target.name != ADMIN_ROLE:
        return True
    return data.get("name", ADMIN_ROLE) == ADMIN_ROLE


users = ResourceDescriptor(
    model=usr_models.User,
    key="users",
    path="users",
    permission_prefix="users",
    labels={"es": ("Usuario", "Usuarios"), "en": ("User", "Users")},
    create_schema=usr_schemas.UserCreate,
    update_schema=usr_schemas.UserUpdate,
    read_schema=usr_schemas.UserRead,
    unique_fields=("email",),
    load_options=(selectinload(usr_models.User.roles),),
    crud=usr_crud.user,
    policy=user_policy,
    tags=("usr: users",),
)

roles = ResourceDescriptor(
    model=usr_models.Role,
    key="roles",
    path="roles",
    permission_prefix="roles",
    labels={"es": ("Rol", "Roles"), "en": ("Role", "Roles")},
    create_schema=usr_schemas.RoleWrite,
    update_schema=usr_schemas.RoleWrite,
    read_schema=usr_schemas.RoleRead,
    filters=FilterPipeline([FilterByName]),
    load_options=(selectinload(usr_models.Role.permissions),),
    crud=usr_crud.role,
    policy=role_policy,
    change_policy=role_change_policy,
    tags=("usr: roles",),
)

RESOURCES = (users, roles)
