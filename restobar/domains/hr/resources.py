# restobar/domains/hr/resources.py

"""
'hr' 도메인의 리소스 정의입니다.
"""

from restobar.core.resource import ResourceDescriptor
from . import models as hr_models
from . import schemas as hr_schemas

employee_types = ResourceDescriptor(
    model=hr_models.EmployeeType,
    key="employee_types",
    path="employee_types",
    permission_prefix="employee_types",
    labels={"es": ("Tipo de empleado", "Tipos de empleado"), "en": ("Employee type", "Employee types")},
    create_schema=hr_schemas.EmployeeTypeWrite,
    update_schema=hr_schemas.EmployeeTypeWrite,
    read_schema=hr_schemas.EmployeeTypeRead,
    tags=("hr: employee types",),
)

employees = ResourceDescriptor(
    model=hr_models.Employee,
    key="employees",
    path="employees",
    permission_prefix="employees",
    labels={"es": ("Empleado", "Empleados"), "en": ("Employee", "Employees")},
    create_schema=hr_schemas.EmployeeWrite,
    update_schema=hr_schemas.EmployeeWrite,
    read_schema=hr_schemas.EmployeeRead,
    unique_fields=("name", "document"),
    tags=("hr: employees",),
)

RESOURCES = (employee_types, employees)
