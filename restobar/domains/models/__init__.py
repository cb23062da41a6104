# restobar/domains/models/__init__.py

"""
이 파일은 모든 도메인의 SQLModel 모델들을 한 곳에서 중앙 관리하여,
다른 모듈에서 쉽게 임포트할 수 있도록 하는 역할을 합니다.
SQLModel.metadata가 모든 테이블을 인식하도록 보장합니다 (create_all, Alembic autogenerate).
"""

# usr (User, Role, Permission, 연결 테이블)
from restobar.domains.usr.models import User, Role, Permission, UserRoleLink, RolePermissionLink

# loc (Floor, Area, DiningTable)
from restobar.domains.loc.models import Floor, Area, DiningTable

# ven (Supplier) - inv.inputs가 참조하므로 inv보다 먼저 등록합니다.
from restobar.domains.ven.models import Supplier

# inv (Warehouse, Category, Presentation, Product, Input)
from restobar.domains.inv.models import Warehouse, Category, Presentation, Product, Input

# menu (Dish)
from restobar.domains.menu.models import Dish

# crm (ClientType, Customer)
from restobar.domains.crm.models import ClientType, Customer

# hr (EmployeeType, Employee)
from restobar.domains.hr.models import EmployeeType, Employee


ALL_MODELS = (
    User, Role, Permission, UserRoleLink, RolePermissionLink,
    Floor, Area, DiningTable,
    Supplier,
    Warehouse, Category, Presentation, Product, Input,
    Dish,
    ClientType, Customer,
    EmployeeType, Employee,
)

__all__ = [model.__name__ for model in ALL_MODELS] + ["ALL_MODELS"]
