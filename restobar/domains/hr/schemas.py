# restobar/domains/hr/schemas.py

"""
'hr' 도메인 (직원 유형, 직원)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional
from decimal import Decimal

from pydantic import Field

from restobar.domains.crm.schemas import DOCUMENT_PATTERN
from restobar.domains.inv.schemas import MAX_PRICE
from restobar.domains.shared.schemas import CatalogRead, CatalogWrite
from restobar.domains.ven.schemas import PHONE_PATTERN
from . import models as hr_models


class EmployeeTypeWrite(CatalogWrite):
    pass


EmployeeTypeRead = CatalogRead


class EmployeeWrite(CatalogWrite):
    references = {"employee_type_id": hr_models.EmployeeType}

    document: str = Field(..., pattern=DOCUMENT_PATTERN)
    phone: Optional[str] = Field(None, pattern=PHONE_PATTERN)
    salary: Decimal = Field(Decimal("0"), ge=0, le=MAX_PRICE, decimal_places=2)
    employee_type_id: int = Field(..., alias="idEmployeeType")


class EmployeeRead(CatalogRead):
    document: str
    phone: Optional[str] = None
    salary: Decimal
    employee_type_id: int = Field(..., serialization_alias="idEmployeeType")
