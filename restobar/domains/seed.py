# restobar/domains/seed.py

"""
초기 데이터 생성(seed) 로직입니다. 여러 번 실행해도 같은 결과가 되도록(멱등) 작성되었습니다.

1. 권한: 모든 리소스 x (view, create, update, delete)
2. 역할: 'administrador'(전체 권한), 'personal'(조회 권한만)
3. 관리자 계정
4. 기준 데이터: 기본 창고, 고객 유형, 직원 유형, 카테고리, 기본 공급업체
"""

import logging
from typing import Dict, Iterable, List, Optional, Type

from sqlmodel import SQLModel, func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from restobar.core.security import get_password_hash
from restobar.domains.crm.models import ClientType
from restobar.domains.hr.models import EmployeeType
from restobar.domains.inv.models import Category, Warehouse
from restobar.domains.resources import all_permission_names
from restobar.domains.usr import crud as usr_crud
from restobar.domains.usr.models import Permission, Role, User
from restobar.domains.usr.resources import ADMIN_ROLE, STAFF_ROLE
from restobar.domains.ven.models import Supplier

logger = logging.getLogger(__name__)

REFERENCE_DATA: Dict[Type[SQLModel], List[dict]] = {
    Warehouse: [{"name": "almacén principal", "description": "Almacén por defecto"}],
    ClientType: [{"name": "persona natural"}, {"name": "empresa"}],
    EmployeeType: [{"name": "mozo"}, {"name": "cocinero"}, {"name": "cajero"}, {"name": "administrador"}],
    Category: [
        {"name": "bebidas"},
        {"name": "entradas"},
        {"name": "platos de fondo"},
        {"name": "postres"},
    ],
    Supplier: [{"name": "proveedor general", "ruc": "20000000001", "address": None, "phone": None}],
}


async def seed_permissions(db: AsyncSession) -> List[Permission]:
    permissions = await usr_crud.permission.ensure(db, all_permission_names())
    await db.commit()
    return permissions


async def seed_role(db: AsyncSession, name: str, permission_names: Iterable[str]) -> Role:
    """역할을 생성하거나 찾고, 권한 목록을 주어진 이름으로 맞춥니다."""
    permissions = await usr_crud.permission.ensure(db, permission_names)
    role = await usr_crud.role.get_by_name(db, name=name)
    if role is None:
        role = Role(name=name)
        db.add(role)
    role.permissions = permissions
    await db.commit()
    return await usr_crud.role.get(db, role.id)


async def seed_roles(db: AsyncSession) -> Dict[str, Role]:
    names = all_permission_names()
    return {
        ADMIN_ROLE: await seed_role(db, ADMIN_ROLE, names),
        STAFF_ROLE: await seed_role(db, STAFF_ROLE, [name for name in names if name.endswith(":view")]),
    }


async def seed_user(
    db: AsyncSession,
    *,
    email: str,
    password: str,
    name: str,
    roles: Iterable[Role] = (),
    password_reset_required: bool = False,
) -> User:
    """
    이메일로 사용자를 찾고, 없으면 생성합니다. 이미 있으면 역할만 보강합니다.
    """
    user = await usr_crud.user.get_by_email(db, email=email)
    if user is None:
        user = User(
            name=name,
            email=email.strip().lower(),
            password_hash=get_password_hash(password),
            password_reset_required=password_reset_required,
        )
        db.add(user)
        user.roles = list(roles)
        logger.info("Seeded user %s", user.email)
    else:
        current = {role.id for role in user.roles}
        user.roles = list(user.roles) + [role for role in roles if role.id not in current]
    await db.commit()
    return await usr_crud.user.get(db, user.id)


async def seed_reference_data(db: AsyncSession) -> int:
    """기준 데이터를 이름 기준으로 없는 것만 추가합니다. 추가한 행 수를 반환합니다."""
    created = 0
    for model, rows in REFERENCE_DATA.items():
        for row in rows:
            statement = select(model.id).where(func.lower(model.name) == row["name"].lower())
            if (await db.exec(statement)).first() is None:
                db.add(model(**row))
                created += 1
    await db.commit()
    return created


async def seed_all(db: AsyncSession, *, admin_email: str, admin_password: str, admin_name: Optional[str] = None) -> User:
    await seed_permissions(db)
    roles = await seed_roles(db)
    admin = await seed_user(
        db,
        email=admin_email,
        password=admin_password,
        name=admin_name or "administrador",
        roles=[roles[ADMIN_ROLE]],
    )
    created = await seed_reference_data(db)
    logger.info("Seed complete: %d reference rows added", created)
    return admin
