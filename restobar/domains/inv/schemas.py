# restobar/domains/inv/schemas.py

"""
'inv' 도메인 (재고)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional
from decimal import Decimal

from pydantic import Field

from restobar.domains.shared.schemas import CatalogRead, CatalogWrite, DescribedRead, DescribedWrite
from restobar.domains.ven import models as ven_models
from . import models as inv_models

MAX_PRICE = Decimal("999999.99")
MAX_QUANTITY = 1000000


# =============================================================================
# 1. 창고 / 카테고리 / 프레젠테이션
# =============================================================================
class WarehouseWrite(DescribedWrite):
    pass


class CategoryWrite(DescribedWrite):
    pass


class PresentationWrite(DescribedWrite):
    pass


# 세 엔티티 모두 name/state/description만 노출합니다.
WarehouseRead = CategoryRead = PresentationRead = DescribedRead


# =============================================================================
# 2. 상품 (Product)
# =============================================================================
class ProductWrite(CatalogWrite):
    references = {
        "category_id": inv_models.Category,
        "warehouse_id": inv_models.Warehouse,
        "presentation_id": inv_models.Presentation,
    }

    price: Decimal = Field(..., ge=0, le=MAX_PRICE, decimal_places=2)
    quantity: int = Field(0, ge=0, le=MAX_QUANTITY)
    category_id: int = Field(..., alias="idCategory")
    warehouse_id: int = Field(..., alias="idWarehouse")
    presentation_id: Optional[int] = Field(None, alias="idPresentation")


class ProductRead(CatalogRead):
    price: Decimal
    quantity: int
    category_id: int = Field(..., serialization_alias="idCategory")
    warehouse_id: int = Field(..., serialization_alias="idWarehouse")
    presentation_id: Optional[int] = Field(None, serialization_alias="idPresentation")


# =============================================================================
# 3. 자재 (Input)
# =============================================================================
class InputWrite(CatalogWrite):
    references = {"warehouse_id": inv_models.Warehouse, "supplier_id": ven_models.Supplier}

    price: Decimal = Field(..., ge=0, le=MAX_PRICE, decimal_places=2)
    quantity: int = Field(0, ge=0, le=MAX_QUANTITY)
    unit: str = Field("unidad", min_length=1, max_length=30)
    warehouse_id: int = Field(..., alias="idWarehouse")
    supplier_id: Optional[int] = Field(None, alias="idSupplier")


class InputRead(CatalogRead):
    price: Decimal
    quantity: int
    unit: str
    warehouse_id: int = Field(..., serialization_alias="idWarehouse")
    supplier_id: Optional[int] = Field(None, serialization_alias="idSupplier")
