# restobar/domains/ven/models.py

"""
'ven' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Optional

from sqlmodel import Field

from restobar.domains.shared.models import CatalogBase, ci_unique_index


# =============================================================================
# 1. suppliers 테이블 모델
# =============================================================================
class SupplierBase(CatalogBase):
    address: Optional[str] = Field(default=None, max_length=255, description="주소")
    ruc: str = Field(max_length=11, sa_column_kwargs={"unique": True}, description="사업자 등록 번호 (RUC, 11자리)")
    phone: Optional[str] = Field(default=None, max_length=20, description="전화번호")


class Supplier(SupplierBase, table=True):
    __tablename__ = "suppliers"


ci_unique_index(Supplier)
