# restobar/domains/menu/schemas.py

"""
'menu' 도메인 (요리)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from decimal import Decimal

from pydantic import Field

from restobar.domains.inv import models as inv_models
from restobar.domains.inv.schemas import MAX_PRICE, MAX_QUANTITY
from restobar.domains.shared.schemas import CatalogRead, CatalogWrite


class DishWrite(CatalogWrite):
    """
    - name: 필수, 최대 100자, 소문자로 정규화
    - price: 0 이상 999999.99 이하
    - quantity: 0 이상 1000000 이하의 정수
    - idCategory: 존재하는 카테고리
    """
    references = {"category_id": inv_models.Category}

    price: Decimal = Field(..., ge=0, le=MAX_PRICE, decimal_places=2)
    quantity: int = Field(..., ge=0, le=MAX_QUANTITY)
    category_id: int = Field(..., alias="idCategory")


class DishRead(CatalogRead):
    price: Decimal
    quantity: int
    category_id: int = Field(..., serialization_alias="idCategory")
