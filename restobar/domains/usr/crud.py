# restobar/domains/usr/crud.py

"""
'usr' 도메인의 CRUD 작업을 담당하는 모듈입니다.

- 사용자: 비밀번호 해싱, 역할 할당, 이메일 기반 인증, 유효 권한 조회.
- 역할: 권한 할당.
- 권한: 전체 목록 조회 및 이름 기반 생성(seed).
"""

from typing import Any, Dict, Iterable, List, Optional

from sqlmodel import func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from restobar.core.crud_base import CRUDBase
from restobar.core.security import get_password_hash, verify_password
from . import models as usr_models


# =============================================================================
# 1. permissions 테이블 CRUD
# =============================================================================
class CRUDPermission(CRUDBase[usr_models.Permission]):
    def __init__(self):
        super().__init__(model=usr_models.Permission)

    async def get_all(self, db: AsyncSession) -> List[usr_models.Permission]:
        result = await db.exec(select(self.model).order_by(self.model.name))
        return list(result.all())

    async def get_by_ids(self, db: AsyncSession, ids: Iterable[int]) -> List[usr_models.Permission]:
        ids = list(ids)
        if not ids:
            return []
        result = await db.exec(select(self.model).where(self.model.id.in_(ids)))
        return list(result.all())

    async def ensure(self, db: AsyncSession, names: Iterable[str]) -> List[usr_models.Permission]:
        """
        이름 목록에 해당하는 권한을 반환하며, 없는 권한은 생성합니다. 커밋은 호출자가 합니다.
        """
        names = list(dict.fromkeys(names))
        result = await db.exec(select(self.model).where(self.model.name.in_(names)))
        existing = {permission.name: permission for permission in result.all()}
        for name in names:
            if name not in existing:
                existing[name] = usr_models.Permission(name=name)
                db.add(existing[name])
        await db.flush()
        return [existing[name] for name in names]


permission = CRUDPermission()


# =============================================================================
# 2. roles 테이블 CRUD
# =============================================================================
class CRUDRole(CRUDBase[usr_models.Role]):
    def __init__(self):
        super().__init__(model=usr_models.Role)

    async def get_by_name(self, db: AsyncSession, *, name: str) -> Optional[usr_models.Role]:
        statement = select(self.model).where(func.lower(self.model.name) == name.lower())
        result = await db.exec(statement)
        return result.first()

    async def get_by_ids(self, db: AsyncSession, ids: Iterable[int]) -> List[usr_models.Role]:
        ids = list(ids)
        if not ids:
            return []
        result = await db.exec(select(self.model).where(self.model.id.in_(ids)))
        return list(result.all())

    async def create(self, db: AsyncSession, *, data: Dict[str, Any]) -> usr_models.Role:
        db_obj = usr_models.Role(**self.columns(data))
        db_obj.permissions = await permission.get_by_ids(db, data.get("permissions") or [])
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def update(self, db: AsyncSession, *, db_obj: usr_models.Role, data: Dict[str, Any]) -> usr_models.Role:
        if "permissions" in data:
            db_obj.permissions = await permission.get_by_ids(db, data["permissions"] or [])
        return await super().update(db, db_obj=db_obj, data=data)


role = CRUDRole()


# =============================================================================
# 3. users 테이블 CRUD
# =============================================================================
class CRUDUser(CRUDBase[usr_models.User]):
    def __init__(self):
        super().__init__(model=usr_models.User)

    async def get_by_email(self, db: AsyncSession, *, email: str) -> Optional[usr_models.User]:
        """이메일로 사용자를 조회합니다 (대소문자 무시)."""
        statement = select(self.model).where(func.lower(self.model.email) == email.strip().lower())
        result = await db.exec(statement)
        return result.first()

    async def create(self, db: AsyncSession, *, data: Dict[str, Any]) -> usr_models.User:
        """새로운 사용자를 생성하며 비밀번호를 해싱하고 역할을 할당합니다."""
        user_data = self.columns(data)
        db_obj = usr_models.User(**user_data, password_hash=get_password_hash(data["password"]))
        db_obj.roles = await role.get_by_ids(db, data.get("roles") or [])
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def update(self, db: AsyncSession, *, db_obj: usr_models.User, data: Dict[str, Any]) -> usr_models.User:
        """
        사용자 정보를 수정합니다. 비밀번호가 주어진 경우에만 새로 해싱합니다.
        """
        if data.get("password"):
            db_obj.password_hash = get_password_hash(data["password"])
        if "roles" in data:
            db_obj.roles = await role.get_by_ids(db, data["roles"] or [])
        return await super().update(db, db_obj=db_obj, data=data)

    async def authenticate(self, db: AsyncSession, *, email: str, password: str) -> Optional[usr_models.User]:
        """이메일과 비밀번호를 사용하여 사용자를 인증합니다."""
        user = await self.get_by_email(db, email=email)
        if not user:
            return None
        if not verify_password(password, user.password_hash):
            return None
        return user

    async def permission_names(self, db: AsyncSession, *, user_id: int) -> List[str]:
        """사용자에게 부여된 모든 역할의 권한 이름 합집합을 반환합니다."""
        statement = (
            select(usr_models.Permission.name)
            .join(usr_models.RolePermissionLink, usr_models.RolePermissionLink.permission_id == usr_models.Permission.id)
            .join(usr_models.UserRoleLink, usr_models.UserRoleLink.role_id == usr_models.RolePermissionLink.role_id)
            .where(usr_models.UserRoleLink.user_id == user_id)
            .distinct()
        )
        result = await db.exec(statement)
        return sorted(result.all())

    async def change_password(self, db: AsyncSession, *, db_obj: usr_models.User, password: str) -> usr_models.User:
        db_obj.password_hash = get_password_hash(password)
        db_obj.password_reset_required = False
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj


user = CRUDUser()
