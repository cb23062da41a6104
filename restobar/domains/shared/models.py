# restobar/domains/shared/models.py

"""
카탈로그 엔티티(구역, 층, 카테고리, 요리 등)가 공유하는 SQLModel 기반 클래스를 정의합니다.

모든 카탈로그 엔티티는 id(자동 증가), name(엔티티 유형 내에서 대소문자 무시 고유, 소문자로 저장),
state(활성 여부)를 가집니다. 고유성의 최종 보증은 `lower(name)` 함수 기반 고유 인덱스입니다.
"""

from typing import Optional
from datetime import datetime, UTC

from sqlalchemy import Index, func
from sqlalchemy.types import TIMESTAMP
from sqlmodel import Field, SQLModel


class TimestampMixin(SQLModel):
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_type=TIMESTAMP(timezone=True),
        sa_column_kwargs={"server_default": func.now()},
        description="레코드 생성 일시"
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_type=TIMESTAMP(timezone=True),
        sa_column_kwargs={"server_default": func.now(), "onupdate": func.now()},
        description="레코드 마지막 업데이트 일시"
    )


class CatalogBase(TimestampMixin):
    """
    카탈로그 엔티티의 공통 속성입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, description="명칭 (소문자로 저장)")
    state: bool = Field(default=True, description="활성 여부")


class DescribedBase(CatalogBase):
    description: Optional[str] = Field(default=None, max_length=255, description="설명")


def ci_unique_index(model: type, column: str = "name") -> Index:
    """
    `lower(column)`에 대한 고유 인덱스를 모델의 테이블에 추가합니다.
    """
    return Index(
        f"uq_{model.__tablename__}_{column}_lower",
        func.lower(getattr(model, column)),
        unique=True,
    )
