# restobar/core/validation.py

"""
요청 스키마 기반 검증 모듈입니다.

- 검증 전 정규화 훅: `lowercase_fields`에 지정된 필드를 공백 제거 후 소문자로 변환합니다.
  정규화된 값이 검증되고 그대로 저장됩니다.
- 선언적 제약: 필수/선택, 타입, 숫자 범위, 최대 길이는 pydantic Field로 선언합니다.
- 참조 무결성: `references`에 선언된 외래 키가 실제 행을 가리키는지 저장소에서 확인합니다.
  이 검사는 항상 저장소 변경 이전에 수행됩니다.
- 첫 오류에서 멈추지 않고 위반된 모든 필드를 모아서 한 번에 반환합니다.
"""

from typing import Any, ClassVar, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator
from sqlmodel import SQLModel, func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from restobar.core import messages
from restobar.core.exceptions import FieldErrors, ValidationFailed


class RequestSchema(BaseModel):
    """
    모든 생성/수정 요청 스키마의 기반 클래스입니다.
    API 필드명(alias)과 모델 속성명을 모두 입력으로 허용합니다.
    """
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, extra="ignore")

    lowercase_fields: ClassVar[Tuple[str, ...]] = ("name",)
    # 모델 속성명 -> 참조 대상 모델
    references: ClassVar[Dict[str, Type[SQLModel]]] = {}

    @model_validator(mode="before")
    @classmethod
    def normalize(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = dict(data)
            for key in cls.lowercase_fields:
                value = data.get(key)
                if isinstance(value, str):
                    data[key] = value.strip().lower()
        return data

    @classmethod
    def api_name(cls, attribute: str) -> str:
        info = cls.model_fields.get(attribute)
        if info is not None and info.alias:
            return info.alias
        return attribute


def _coerce_ids(value: Any) -> Optional[List[int]]:
    """참조 값(단일 id 또는 id 목록)을 정수 목록으로 변환합니다. 변환할 수 없으면 None."""
    values = value if isinstance(value, list) else [value]
    ids: List[int] = []
    for item in values:
        if isinstance(item, bool):
            return None
        if isinstance(item, int):
            ids.append(item)
        elif isinstance(item, str) and item.strip().isdigit():
            ids.append(int(item.strip()))
        else:
            return None
    return ids


async def count_existing(db: AsyncSession, model: Type[SQLModel], ids: List[int]) -> int:
    statement = select(func.count()).select_from(model).where(model.id.in_(ids))
    result = await db.exec(statement)
    return result.one()


async def check_references(
    schema: Type[RequestSchema],
    values: Dict[str, Any],
    db: AsyncSession,
    locale: str,
    errors: FieldErrors,
) -> None:
    """
    선언된 참조 필드마다 존재 여부를 확인합니다.
    이미 타입 오류가 난 필드와 값이 비어 있는 필드는 건너뜁니다.
    """
    for attribute, model in schema.references.items():
        key = schema.api_name(attribute)
        if key in errors:
            continue
        raw = values.get(key, values.get(attribute))
        if raw is None or raw == []:
            continue
        ids = _coerce_ids(raw)
        if ids is None:
            continue
        if await count_existing(db, model, ids) != len(set(ids)):
            errors.setdefault(key, []).append(messages.field_error(locale, "exists", key))


def collect_errors(exc: ValidationError, locale: str) -> FieldErrors:
    errors: FieldErrors = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        field = str(loc[0]) if loc else "request"
        error_type, ctx = error["type"], error.get("ctx") or {}
        # 공백만 있는 필수 문자열은 누락과 같은 메시지를 씁니다.
        if error_type == "string_too_short" and ctx.get("min_length") == 1:
            error_type = "missing"
        errors.setdefault(field, []).append(messages.field_error(locale, error_type, field, **ctx))
    return errors


async def validate(
    schema: Type[RequestSchema],
    raw: Any,
    db: AsyncSession,
    locale: str,
    *,
    partial: bool = False,
) -> Dict[str, Any]:
    """
    원시 입력을 검증하고 정규화된 모델 속성 딕셔너리를 반환합니다.
    partial이면 요청에 포함된 필드만 반환하므로, 생략된 필드는 기본값으로 덮어쓰지 않습니다.
    하나라도 위반이 있으면 모든 필드 오류를 담은 ValidationFailed를 발생시킵니다.
    """
    if not isinstance(raw, dict):
        raise ValidationFailed({"body": [messages.field_error(locale, "dict_type", "body")]})

    errors: FieldErrors = {}
    instance: Optional[RequestSchema] = None
    try:
        instance = schema.model_validate(raw)
    except ValidationError as exc:
        errors = collect_errors(exc, locale)

    if instance is not None:
        values = instance.model_dump(by_alias=True)
    else:
        values = schema.normalize(raw)
    await check_references(schema, values, db, locale, errors)

    if errors or instance is None:
        raise ValidationFailed(errors)
    return instance.model_dump(exclude_unset=partial)
