# restobar/domains/ven/schemas.py

"""
'ven' 도메인 (공급업체)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional

from pydantic import Field

from restobar.domains.shared.schemas import CatalogRead, CatalogWrite

RUC_PATTERN = r"^\d{11}$"
PHONE_PATTERN = r"^\+?[\d\s-]{6,20}$"


class SupplierWrite(CatalogWrite):
    address: Optional[str] = Field(None, max_length=255)
    ruc: str = Field(..., pattern=RUC_PATTERN)
    phone: Optional[str] = Field(None, pattern=PHONE_PATTERN)


class SupplierRead(CatalogRead):
    address: Optional[str] = None
    ruc: str
    phone: Optional[str] = None
