# restobar/domains/crm/resources.py

"""
'crm' 도메인의 리소스 정의입니다.
"""

from restobar.core.resource import ResourceDescriptor
from . import models as crm_models
from . import schemas as crm_schemas

client_types = ResourceDescriptor(
    model=crm_models.ClientType,
    key="client_types",
    path="client_types",
    permission_prefix="client_types",
    labels={"es": ("Tipo de cliente", "Tipos de cliente"), "en": ("Client type", "Client types")},
    create_schema=crm_schemas.ClientTypeWrite,
    update_schema=crm_schemas.ClientTypeWrite,
    read_schema=crm_schemas.ClientTypeRead,
    tags=("crm: client types",),
)

customers = ResourceDescriptor(
    model=crm_models.Customer,
    key="customers",
    path="customers",
    permission_prefix="customers",
    labels={"es": ("Cliente", "Clientes"), "en": ("Customer", "Customers")},
    create_schema=crm_schemas.CustomerWrite,
    update_schema=crm_schemas.CustomerWrite,
    read_schema=crm_schemas.CustomerRead,
    unique_fields=("name", "document"),
    tags=("crm: customers",),
)

RESOURCES = (client_types, customers)
