# restobar/core/responses.py

"""
엔티티를 외부 표현으로 변환하고 공통 응답 봉투(envelope)를 만드는 모듈입니다.

성공 응답은 항상 `{"state": true, "message": ..., "<key>": 엔티티|페이지}` 형태입니다.
"""

from typing import Any, Dict, Type

from pydantic import BaseModel

from restobar.core.pagination import Page


def shape_entity(read_schema: Type[BaseModel], entity: Any) -> Dict[str, Any]:
    return read_schema.model_validate(entity).model_dump(mode="json", by_alias=True)


def shape_page(read_schema: Type[BaseModel], page: Page) -> Dict[str, Any]:
    """페이지 메타데이터를 유지한 채 각 항목을 개별적으로 변환합니다."""
    return {
        "data": [shape_entity(read_schema, item) for item in page.items],
        "total": page.total,
        "per_page": page.per_page,
        "current_page": page.current_page,
        "last_page": page.last_page,
    }


def envelope(message: str, key: str | None = None, payload: Any = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"state": True, "message": message}
    if key is not None:
        body[key] = payload
    return body
