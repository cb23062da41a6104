# restobar/domains/inv/models.py

"""
'inv' 도메인 (재고)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

창고(warehouses), 카테고리(categories), 프레젠테이션(presentations),
판매 상품(products), 자재/입력재(inputs)를 포함합니다.
가격은 소수 둘째 자리까지의 고정 소수점(Numeric(10, 2))으로 저장합니다.
"""

from typing import Optional
from decimal import Decimal

from sqlmodel import Field

from restobar.domains.shared.models import CatalogBase, DescribedBase, ci_unique_index


# =============================================================================
# 1. 기준 정보 (창고, 카테고리, 프레젠테이션)
# =============================================================================
class Warehouse(DescribedBase, table=True):
    __tablename__ = "warehouses"


class Category(DescribedBase, table=True):
    """
    상품과 요리가 함께 사용하는 카테고리입니다.
    """
    __tablename__ = "categories"


class Presentation(DescribedBase, table=True):
    """판매 단위 (예: 병, 캔, 박스)."""
    __tablename__ = "presentations"


# =============================================================================
# 2. products 테이블 모델
# =============================================================================
class ProductBase(CatalogBase):
    price: Decimal = Field(default=Decimal("0"), max_digits=10, decimal_places=2, description="판매 가격")
    quantity: int = Field(default=0, description="재고 수량")
    category_id: int = Field(foreign_key="categories.id", description="카테고리 ID (FK)")
    warehouse_id: int = Field(foreign_key="warehouses.id", description="보관 창고 ID (FK)")
    presentation_id: Optional[int] = Field(default=None, foreign_key="presentations.id", description="프레젠테이션 ID (FK)")


class Product(ProductBase, table=True):
    __tablename__ = "products"


# =============================================================================
# 3. inputs 테이블 모델
# =============================================================================
class InputBase(CatalogBase):
    """
    요리에 사용되는 자재(식재료 등)입니다.
    """
    price: Decimal = Field(default=Decimal("0"), max_digits=10, decimal_places=2, description="구매 단가")
    quantity: int = Field(default=0, description="재고 수량")
    unit: str = Field(default="unidad", max_length=30, description="측정 단위")
    warehouse_id: int = Field(foreign_key="warehouses.id", description="보관 창고 ID (FK)")
    supplier_id: Optional[int] = Field(default=None, foreign_key="suppliers.id", description="공급업체 ID (FK)")


class Input(InputBase, table=True):
    __tablename__ = "inputs"


ci_unique_index(Warehouse)
ci_unique_index(Category)
ci_unique_index(Presentation)
ci_unique_index(Product)
ci_unique_index(Input)
