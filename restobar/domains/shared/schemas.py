# restobar/domains/shared/schemas.py

"""
카탈로그 엔티티의 공통 요청/응답 스키마입니다.

- 요청 스키마는 `RequestSchema`를 상속하여 name 소문자 정규화와 참조 검사 선언을 공유합니다.
- 응답 스키마는 ORM 객체에서 직접 생성되며(from_attributes), 외래 키는 API 이름(idCategory 등)으로 직렬화됩니다.
"""

from typing import Optional
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from restobar.core.validation import RequestSchema


# =============================================================================
# 1. 요청 스키마
# =============================================================================
class CatalogWrite(RequestSchema):
    name: str = Field(..., min_length=1, max_length=100)
    state: bool = True


class DescribedWrite(CatalogWrite):
    description: Optional[str] = Field(None, max_length=255)


# =============================================================================
# 2. 응답 스키마
# =============================================================================
class CatalogRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    state: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DescribedRead(CatalogRead):
    description: Optional[str] = None
