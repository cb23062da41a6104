# restobar/domains/hr/models.py

"""
'hr' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Optional
from decimal import Decimal

from sqlmodel import Field

from restobar.domains.shared.models import CatalogBase, ci_unique_index


# =============================================================================
# 1. employee_types 테이블 모델
# =============================================================================
class EmployeeType(CatalogBase, table=True):
    """직원 유형 (예: 웨이터, 요리사, 계산원)."""
    __tablename__ = "employee_types"


# =============================================================================
# 2. employees 테이블 모델
# =============================================================================
class EmployeeBase(CatalogBase):
    document: str = Field(max_length=15, sa_column_kwargs={"unique": True}, description="DNI 번호")
    phone: Optional[str] = Field(default=None, max_length=20, description="전화번호")
    salary: Decimal = Field(default=Decimal("0"), max_digits=10, decimal_places=2, description="월 급여")
    employee_type_id: int = Field(foreign_key="employee_types.id", description="직원 유형 ID (FK)")


class Employee(EmployeeBase, table=True):
    __tablename__ = "employees"


ci_unique_index(EmployeeType)
ci_unique_index(Employee)
