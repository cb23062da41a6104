# restobar/domains/loc/resources.py

"""
'loc' 도메인의 리소스 정의입니다.
"""

from restobar.core.resource import ResourceDescriptor
from . import models as loc_models
from . import schemas as loc_schemas

floors = ResourceDescriptor(
    model=loc_models.Floor,
    key="floors",
    path="floors",
    permission_prefix="floors",
    labels={"es": ("Piso", "Pisos"), "en": ("Floor", "Floors")},
    create_schema=loc_schemas.FloorWrite,
    update_schema=loc_schemas.FloorWrite,
    read_schema=loc_schemas.FloorRead,
    tags=("loc: floors",),
)

areas = ResourceDescriptor(
    model=loc_models.Area,
    key="areas",
    path="areas",
    permission_prefix="areas",
    labels={"es": ("Área", "Áreas"), "en": ("Area", "Areas")},
    create_schema=loc_schemas.AreaWrite,
    update_schema=loc_schemas.AreaWrite,
    read_schema=loc_schemas.AreaRead,
    tags=("loc: areas",),
)

tables = ResourceDescriptor(
    model=loc_models.DiningTable,
    key="tables",
    path="tables",
    permission_prefix="tables",
    labels={"es": ("Mesa", "Mesas"), "en": ("Table", "Tables")},
    create_schema=loc_schemas.TableWrite,
    update_schema=loc_schemas.TableWrite,
    read_schema=loc_schemas.TableRead,
    tags=("loc: tables",),
)

RESOURCES = (floors, areas, tables)
