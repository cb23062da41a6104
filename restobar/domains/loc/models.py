# restobar/domains/loc/models.py

"""
'loc' 도메인 (매장 공간)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

층(floors), 구역(areas), 테이블(dining_tables)을 포함합니다.
테이블은 하나의 구역과 하나의 층에 속합니다.
"""

from sqlmodel import Field

from restobar.domains.shared.models import CatalogBase, DescribedBase, ci_unique_index


# =============================================================================
# 1. floors 테이블 모델
# =============================================================================
class Floor(DescribedBase, table=True):
    __tablename__ = "floors"


# =============================================================================
# 2. areas 테이블 모델
# =============================================================================
class Area(CatalogBase, table=True):
    """
    매장 내 구역 (예: 살롱, 테라스).
    """
    __tablename__ = "areas"


# =============================================================================
# 3. dining_tables 테이블 모델
# =============================================================================
class DiningTableBase(CatalogBase):
    capacity: int = Field(default=4, description="좌석 수")
    area_id: int = Field(foreign_key="areas.id", description="소속 구역 ID (FK)")
    floor_id: int = Field(foreign_key="floors.id", description="소속 층 ID (FK)")


class DiningTable(DiningTableBase, table=True):
    __tablename__ = "dining_tables"


ci_unique_index(Floor)
ci_unique_index(Area)
ci_unique_index(DiningTable)
