# restobar/domains/menu/resources.py

"""
'menu' 도메인의 리소스 정의입니다.
"""

from restobar.core.resource import ResourceDescriptor
from . import models as menu_models
from . import schemas as menu_schemas

dishes = ResourceDescriptor(
    model=menu_models.Dish,
    key="dishes",
    path="dishes",
    permission_prefix="dishes",
    labels={"es": ("Plato", "Platos"), "en": ("Dish", "Dishes")},
    create_schema=menu_schemas.DishWrite,
    update_schema=menu_schemas.DishWrite,
    read_schema=menu_schemas.DishRead,
    tags=("menu: dishes",),
)

RESOURCES = (dishes,)
