# restobar/domains/ven/resources.py

"""
'ven' 도메인의 리소스 정의입니다.
"""

from restobar.core.resource import ResourceDescriptor
from . import models as ven_models
from . import schemas as ven_schemas

suppliers = ResourceDescriptor(
    model=ven_models.Supplier,
    key="suppliers",
    path="suppliers",
    permission_prefix="suppliers",
    labels={"es": ("Proveedor", "Proveedores"), "en": ("Supplier", "Suppliers")},
    create_schema=ven_schemas.SupplierWrite,
    update_schema=ven_schemas.SupplierWrite,
    read_schema=ven_schemas.SupplierRead,
    unique_fields=("name", "ruc"),
    tags=("ven: suppliers",),
)

RESOURCES = (suppliers,)
