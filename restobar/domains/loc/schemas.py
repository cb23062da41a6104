# restobar/domains/loc/schemas.py

"""
'loc' 도메인 (층, 구역, 테이블)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from pydantic import Field

from restobar.domains.shared.schemas import CatalogRead, CatalogWrite, DescribedRead, DescribedWrite
from . import models as loc_models


# =============================================================================
# 1. 층 (Floor) / 구역 (Area)
# =============================================================================
class FloorWrite(DescribedWrite):
    pass


class FloorRead(DescribedRead):
    pass


class AreaWrite(CatalogWrite):
    pass


class AreaRead(CatalogRead):
    pass


# =============================================================================
# 2. 테이블 (Table)
# =============================================================================
class TableWrite(CatalogWrite):
    references = {"area_id": loc_models.Area, "floor_id": loc_models.Floor}

    capacity: int = Field(4, ge=1, le=100)
    area_id: int = Field(..., alias="idArea")
    floor_id: int = Field(..., alias="idFloor")


class TableRead(CatalogRead):
    capacity: int
    area_id: int = Field(..., serialization_alias="idArea")
    floor_id: int = Field(..., serialization_alias="idFloor")
