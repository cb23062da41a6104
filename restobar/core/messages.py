# restobar/core/messages.py

"""
사용자에게 노출되는 메시지의 다국어 카탈로그입니다.

로케일은 전역 상태가 아니라 요청 컨텍스트(`RequestContext.locale`)로 명시적으로 전달됩니다.
기본 로케일은 스페인어(es)이며 영어(en)를 함께 지원합니다.
"""

from typing import Any, Dict, Mapping, Optional

from restobar.core.config import settings


class _SafeFormat(dict):
    """누락된 플레이스홀더는 그대로 남겨 둡니다."""

    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


MESSAGES: Dict[str, Dict[str, str]] = {
    "es": {
        "listed": "Listado de {label_plural}.",
        "created": "{label} registrado correctamente.",
        "found": "{label} encontrado.",
        "updated": "{label} actualizado correctamente.",
        "deleted": "{label} eliminado de manera correcta.",
        "not_found": "{label} no encontrado.",
        "unauthorized": "Esta acción no está autorizada.",
        "unique": "Este {attribute} ya está registrado.",
        "store_failure": "No se pudo completar la operación. Intente nuevamente.",
        "password_changed": "Contraseña actualizada correctamente.",
        "invalid_password": "La contraseña actual es incorrecta.",
    },
    "en": {
        "listed": "{label_plural} list.",
        "created": "{label} created successfully.",
        "found": "{label} found.",
        "updated": "{label} updated successfully.",
        "deleted": "{label} deleted successfully.",
        "not_found": "{label} not found.",
        "unauthorized": "This action is unauthorized.",
        "unique": "This {attribute} is already registered.",
        "store_failure": "The operation could not be completed. Please try again.",
        "password_changed": "Password updated successfully.",
        "invalid_password": "The current password is incorrect.",
    },
}

# pydantic 오류 타입 -> 필드 오류 메시지
FIELD_ERRORS: Dict[str, Dict[str, str]] = {
    "es": {
        "missing": "El campo {attribute} es obligatorio.",
        "string_type": "El campo {attribute} debe ser una cadena de texto.",
        "string_too_long": "El campo {attribute} no puede tener más de {max_length} caracteres.",
        "string_too_short": "El campo {attribute} debe tener al menos {min_length} caracteres.",
        "string_pattern_mismatch": "El formato del campo {attribute} no es válido.",
        "int_type": "El campo {attribute} debe ser un número entero.",
        "int_parsing": "El campo {attribute} debe ser un número entero.",
        "int_from_float": "El campo {attribute} debe ser un número entero.",
        "float_type": "El campo {attribute} debe ser numérico.",
        "float_parsing": "El campo {attribute} debe ser numérico.",
        "decimal_type": "El campo {attribute} debe ser numérico.",
        "decimal_parsing": "El campo {attribute} debe ser numérico.",
        "decimal_max_places": "El campo {attribute} admite como máximo {decimal_places} decimales.",
        "decimal_max_digits": "El campo {attribute} admite como máximo {max_digits} dígitos.",
        "decimal_whole_digits": "El campo {attribute} admite como máximo {whole_digits} dígitos enteros.",
        "greater_than_equal": "El campo {attribute} no puede ser menor que {ge}.",
        "greater_than": "El campo {attribute} debe ser mayor que {gt}.",
        "less_than_equal": "El campo {attribute} no puede exceder {le}.",
        "less_than": "El campo {attribute} debe ser menor que {lt}.",
        "bool_type": "El campo {attribute} debe ser verdadero o falso.",
        "bool_parsing": "El campo {attribute} debe ser verdadero o falso.",
        "list_type": "El campo {attribute} debe ser una lista.",
        "dict_type": "El cuerpo de la solicitud debe ser un objeto JSON.",
        "json_invalid": "El cuerpo de la solicitud no es un JSON válido.",
        "exists": "El valor seleccionado para {attribute} no existe.",
        "invalid": "El campo {attribute} no es válido.",
    },
    "en": {
        "missing": "The {attribute} field is required.",
        "string_type": "The {attribute} field must be a string.",
        "string_too_long": "The {attribute} field must not be greater than {max_length} characters.",
        "string_too_short": "The {attribute} field must be at least {min_length} characters.",
        "string_pattern_mismatch": "The {attribute} field format is invalid.",
        "int_type": "The {attribute} field must be an integer.",
        "int_parsing": "The {attribute} field must be an integer.",
        "int_from_float": "The {attribute} field must be an integer.",
        "float_type": "The {attribute} field must be a number.",
        "float_parsing": "The {attribute} field must be a number.",
        "decimal_type": "The {attribute} field must be a number.",
        "decimal_parsing": "The {attribute} field must be a number.",
        "decimal_max_places": "The {attribute} field must have at most {decimal_places} decimal places.",
        "decimal_max_digits": "The {attribute} field must have at most {max_digits} digits.",
        "decimal_whole_digits": "The {attribute} field must have at most {whole_digits} integer digits.",
        "greater_than_equal": "The {attribute} field must be at least {ge}.",
        "greater_than": "The {attribute} field must be greater than {gt}.",
        "less_than_equal": "The {attribute} field must not be greater than {le}.",
        "less_than": "The {attribute} field must be less than {lt}.",
        "bool_type": "The {attribute} field must be true or false.",
        "bool_parsing": "The {attribute} field must be true or false.",
        "list_type": "The {attribute} field must be a list.",
        "dict_type": "The request body must be a JSON object.",
        "json_invalid": "The request body is not valid JSON.",
        "exists": "The selected {attribute} is invalid.",
        "invalid": "The {attribute} field is invalid.",
    },
}

# 필드(API 이름) -> 사람이 읽는 속성명
ATTRIBUTES: Dict[str, Dict[str, str]] = {
    "es": {
        "name": "nombre",
        "state": "estado",
        "description": "descripción",
        "price": "precio",
        "quantity": "cantidad",
        "capacity": "capacidad",
        "unit": "unidad de medida",
        "idCategory": "categoría",
        "idArea": "área",
        "idFloor": "piso",
        "idWarehouse": "almacén",
        "idPresentation": "presentación",
        "idSupplier": "proveedor",
        "idClientType": "tipo de cliente",
        "idEmployeeType": "tipo de empleado",
        "address": "dirección",
        "ruc": "RUC",
        "phone": "teléfono",
        "email": "correo electrónico",
        "document": "documento",
        "salary": "salario",
        "password": "contraseña",
        "current_password": "contraseña actual",
        "roles": "roles",
        "permissions": "permisos",
        "search": "búsqueda",
        "per_page": "por página",
        "page": "página",
    },
    "en": {
        "idCategory": "category",
        "idArea": "area",
        "idFloor": "floor",
        "idWarehouse": "warehouse",
        "idPresentation": "presentation",
        "idSupplier": "supplier",
        "idClientType": "client type",
        "idEmployeeType": "employee type",
        "ruc": "RUC",
        "current_password": "current password",
        "per_page": "per page",
    },
}


def resolve_locale(accept_language: Optional[str]) -> str:
    """
    Accept-Language 헤더에서 지원하는 첫 번째 로케일을 고릅니다.
    q 값은 무시하고 헤더에 나열된 순서를 따릅니다.
    """
    if accept_language:
        for part in accept_language.split(","):
            tag = part.split(";")[0].strip().lower()
            primary = tag.split("-")[0]
            if primary in settings.SUPPORTED_LOCALES and primary in MESSAGES:
                return primary
    return settings.DEFAULT_LOCALE


def _catalog(table: Mapping[str, Dict[str, str]], locale: str) -> Dict[str, str]:
    return table.get(locale) or table[settings.DEFAULT_LOCALE]


def attribute_label(locale: str, field: str) -> str:
    return ATTRIBUTES.get(locale, {}).get(field, field.replace("_", " "))


def message(locale: str, key: str, **params: Any) -> str:
    template = _catalog(MESSAGES, locale).get(key, key)
    return template.format_map(_SafeFormat(params))


def field_error(locale: str, error_type: str, field: str, **ctx: Any) -> str:
    """필드 하나에 대한 검증 오류 메시지를 만듭니다."""
    catalog = _catalog(FIELD_ERRORS, locale)
    template = catalog.get(error_type, catalog["invalid"])
    return template.format_map(_SafeFormat(attribute=attribute_label(locale, field), **ctx))
