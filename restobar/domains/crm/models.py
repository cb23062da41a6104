# restobar/domains/crm/models.py

"""
'crm' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

고객은 신분증/사업자 번호(document)로도 고유합니다.
"""

from typing import Optional

from sqlmodel import Field

from restobar.domains.shared.models import CatalogBase, ci_unique_index


# =============================================================================
# 1. client_types 테이블 모델
# =============================================================================
class ClientType(CatalogBase, table=True):
    """고객 유형 (예: 일반, 법인)."""
    __tablename__ = "client_types"


# =============================================================================
# 2. customers 테이블 모델
# =============================================================================
class CustomerBase(CatalogBase):
    document: str = Field(max_length=15, sa_column_kwargs={"unique": True}, description="DNI/RUC 번호")
    phone: Optional[str] = Field(default=None, max_length=20, description="전화번호")
    email: Optional[str] = Field(default=None, max_length=150, description="이메일")
    client_type_id: int = Field(foreign_key="client_types.id", description="고객 유형 ID (FK)")


class Customer(CustomerBase, table=True):
    __tablename__ = "customers"


ci_unique_index(ClientType)
ci_unique_index(Customer)
