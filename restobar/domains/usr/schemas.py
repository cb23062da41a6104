# restobar/domains/usr/schemas.py

"""
'usr' 도메인 (사용자, 역할, 권한, 인증)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Any, List, Optional
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from restobar.core.validation import RequestSchema
from . import models as usr_models


def _names(value: Any) -> Any:
    """ORM 관계 컬렉션을 이름 목록으로 변환합니다."""
    if isinstance(value, (list, tuple)):
        return [getattr(item, "name", item) for item in value]
    return value


# =============================================================================
# 1. 권한 (Permission) 스키마
# =============================================================================
class PermissionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


# =============================================================================
# 2. 역할 (Role) 스키마
# =============================================================================
class RoleWrite(RequestSchema):
    references = {"permissions": usr_models.Permission}

    name: str = Field(..., min_length=1, max_length=100)
    permissions: List[int] = Field(default_factory=list, description="권한 ID 목록")


class RoleRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    permissions: List[str] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("permissions", mode="before")
    @classmethod
    def permission_names(cls, value: Any) -> Any:
        return _names(value)


# =============================================================================
# 3. 사용자 (User) 스키마
# =============================================================================
class UserCreate(RequestSchema):
    """사용자 생성을 위한 스키마. 이메일은 소문자로 정규화됩니다."""
    lowercase_fields = ("email",)
    references = {"roles": usr_models.Role}

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr = Field(..., max_length=150)
    password: str = Field(..., min_length=8, max_length=128)
    roles: List[int] = Field(default_factory=list, description="역할 ID 목록")
    state: bool = True
    password_reset_required: bool = False


class UserUpdate(UserCreate):
    """사용자 정보 수정을 위한 스키마. 비밀번호를 생략하면 기존 비밀번호를 유지합니다."""
    password: Optional[str] = Field(None, min_length=8, max_length=128)


class UserRead(BaseModel):
    """
    사용자 정보 조회를 위한 기본 스키마.
    비밀번호 해시값 등 민감한 정보는 제외됩니다.
    """
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    state: bool
    password_reset_required: bool
    roles: List[str] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("roles", mode="before")
    @classmethod
    def role_names(cls, value: Any) -> Any:
        return _names(value)


class UserMe(UserRead):
    """현재 사용자 정보. 유효 권한 목록과 비밀번호 변경 필요 여부를 포함합니다."""
    permissions: List[str] = []
    must_reset: bool = False


class PasswordChange(BaseModel):
    current_password: str = Field(..., min_length=1)
    password: str = Field(..., min_length=8, max_length=128)


# =============================================================================
# 4. 인증 토큰 (Token) 스키마
# =============================================================================
class Token(BaseModel):
    """JWT 토큰 응답 스키마"""
    access_token: str
    token_type: str
