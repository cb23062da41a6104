# restobar/domains/usr/models.py

"""
'usr' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

사용자(users), 역할(roles), 권한(permissions)과 두 개의 연결 테이블
(user_roles, role_permissions)을 포함합니다.
사용자의 유효 권한은 부여된 모든 역할이 가진 권한의 합집합입니다.
"""

from typing import Optional, List
from datetime import datetime, UTC

from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP
from sqlmodel import Field, Relationship, SQLModel

from restobar.domains.shared.models import TimestampMixin, ci_unique_index


# =============================================================================
# 1. 연결 테이블 (다대다)
# =============================================================================
class RolePermissionLink(SQLModel, table=True):
    """
    Role과 Permission의 다대다 관계를 위한 연결(link) 테이블 모델입니다.
    """
    __tablename__ = "role_permissions"

    role_id: Optional[int] = Field(
        default=None, foreign_key="roles.id", primary_key=True, ondelete="CASCADE", description="역할 ID (FK, 복합 PK)"
    )
    permission_id: Optional[int] = Field(
        default=None, foreign_key="permissions.id", primary_key=True, ondelete="CASCADE", description="권한 ID (FK, 복합 PK)"
    )


class UserRoleLink(SQLModel, table=True):
    """
    User와 Role의 다대다 관계를 위한 연결(link) 테이블 모델입니다.
    """
    __tablename__ = "user_roles"

    user_id: Optional[int] = Field(
        default=None, foreign_key="users.id", primary_key=True, ondelete="CASCADE", description="사용자 ID (FK, 복합 PK)"
    )
    role_id: Optional[int] = Field(
        default=None, foreign_key="roles.id", primary_key=True, ondelete="CASCADE", description="역할 ID (FK, 복합 PK)"
    )


# =============================================================================
# 2. permissions 테이블 모델
# =============================================================================
class Permission(SQLModel, table=True):
    """
    "<리소스>:<동작>" 형식의 권한입니다 (예: "areas:view").
    """
    __tablename__ = "permissions"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, sa_column_kwargs={"unique": True}, description="권한 이름")
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_type=TIMESTAMP(timezone=True),
        sa_column_kwargs={"server_default": func.now()},
    )

    roles: List["Role"] = Relationship(
        back_populates="permissions", link_model=RolePermissionLink, sa_relationship_kwargs={"passive_deletes": True}
    )


# =============================================================================
# 3. roles 테이블 모델
# =============================================================================
class RoleBase(TimestampMixin):
    """
    roles 테이블의 기본 속성입니다. 역할에는 활성 상태(state)가 없습니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, description="역할명 (소문자로 저장)")


class Role(RoleBase, table=True):
    __tablename__ = "roles"

    permissions: List["Permission"] = Relationship(
        back_populates="roles",
        link_model=RolePermissionLink,
        sa_relationship_kwargs={"lazy": "selectin", "order_by": "Permission.name"},
    )
    users: List["User"] = Relationship(
        back_populates="roles", link_model=UserRoleLink, sa_relationship_kwargs={"passive_deletes": True}
    )


# =============================================================================
# 4. users 테이블 모델
# =============================================================================
class UserBase(TimestampMixin):
    """
    users 테이블의 기본 속성입니다. 사용자는 name이 아니라 email로 고유합니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True, description="사용자 고유 ID")
    name: str = Field(max_length=100, description="사용자 이름")
    email: str = Field(max_length=150, description="로그인 이메일 (소문자로 저장)")
    password_hash: str = Field(max_length=255, description="해싱된 비밀번호")
    state: bool = Field(default=True, description="계정 활성 여부")
    password_reset_required: bool = Field(default=False, description="다음 로그인 시 비밀번호 변경 필요 여부")


class User(UserBase, table=True):
    __tablename__ = "users"

    roles: List["Role"] = Relationship(
        back_populates="users",
        link_model=UserRoleLink,
        sa_relationship_kwargs={"lazy": "selectin", "order_by": "Role.name"},
    )


ci_unique_index(Role)
ci_unique_index(User, "email")
