# restobar/domains/crm/schemas.py

"""
'crm' 도메인 (고객 유형, 고객)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional

from pydantic import EmailStr, Field

from restobar.domains.shared.schemas import CatalogRead, CatalogWrite
from restobar.domains.ven.schemas import PHONE_PATTERN
from . import models as crm_models

# DNI(8자리) 또는 RUC(11자리)
DOCUMENT_PATTERN = r"^(\d{8}|\d{11})$"


class ClientTypeWrite(CatalogWrite):
    pass


ClientTypeRead = CatalogRead


class CustomerWrite(CatalogWrite):
    references = {"client_type_id": crm_models.ClientType}

    document: str = Field(..., pattern=DOCUMENT_PATTERN)
    phone: Optional[str] = Field(None, pattern=PHONE_PATTERN)
    email: Optional[EmailStr] = Field(None, max_length=150)
    client_type_id: int = Field(..., alias="idClientType")


class CustomerRead(CatalogRead):
    document: str
    phone: Optional[str] = None
    email: Optional[str] = None
    client_type_id: int = Field(..., serialization_alias="idClientType")
