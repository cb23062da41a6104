# restobar/domains/menu/models.py

"""
'menu' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from decimal import Decimal

from sqlmodel import Field

from restobar.domains.shared.models import CatalogBase, ci_unique_index


# =============================================================================
# 1. dishes 테이블 모델
# =============================================================================
class DishBase(CatalogBase):
    price: Decimal = Field(default=Decimal("0"), max_digits=10, decimal_places=2, description="판매 가격")
    quantity: int = Field(default=0, description="준비 가능 수량")
    category_id: int = Field(foreign_key="categories.id", description="카테고리 ID (FK, inv.categories)")


class Dish(DishBase, table=True):
    __tablename__ = "dishes"


ci_unique_index(Dish)
