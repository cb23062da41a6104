# restobar/domains/inv/resources.py

"""
'inv' 도메인의 리소스 정의입니다.
"""

from restobar.core.resource import ResourceDescriptor
from . import models as inv_models
from . import schemas as inv_schemas

warehouses = ResourceDescriptor(
    model=inv_models.Warehouse,
    key="warehouses",
    path="warehouses",
    permission_prefix="warehouses",
    labels={"es": ("Almacén", "Almacenes"), "en": ("Warehouse", "Warehouses")},
    create_schema=inv_schemas.WarehouseWrite,
    update_schema=inv_schemas.WarehouseWrite,
    read_schema=inv_schemas.WarehouseRead,
    tags=("inv: warehouses",),
)

categories = ResourceDescriptor(
    model=inv_models.Category,
    key="categories",
    path="categories",
    permission_prefix="categories",
    labels={"es": ("Categoría", "Categorías"), "en": ("Category", "Categories")},
    create_schema=inv_schemas.CategoryWrite,
    update_schema=inv_schemas.CategoryWrite,
    read_schema=inv_schemas.CategoryRead,
    tags=("inv: categories",),
)

presentations = ResourceDescriptor(
    model=inv_models.Presentation,
    key="presentations",
    path="presentations",
    permission_prefix="presentations",
    labels={"es": ("Presentación", "Presentaciones"), "en": ("Presentation", "Presentations")},
    create_schema=inv_schemas.PresentationWrite,
    update_schema=inv_schemas.PresentationWrite,
    read_schema=inv_schemas.PresentationRead,
    tags=("inv: presentations",),
)

products = ResourceDescriptor(
    model=inv_models.Product,
    key="products",
    path="products",
    permission_prefix="products",
    labels={"es": ("Producto", "Productos"), "en": ("Product", "Products")},
    create_schema=inv_schemas.ProductWrite,
    update_schema=inv_schemas.ProductWrite,
    read_schema=inv_schemas.ProductRead,
    tags=("inv: products",),
)

inputs = ResourceDescriptor(
    model=inv_models.Input,
    key="inputs",
    path="inputs",
    permission_prefix="inputs",
    labels={"es": ("Insumo", "Insumos"), "en": ("Input", "Inputs")},
    create_schema=inv_schemas.InputWrite,
    update_schema=inv_schemas.InputWrite,
    read_schema=inv_schemas.InputRead,
    tags=("inv: inputs",),
)

RESOURCES = (warehouses, categories, presentations, products, inputs)
