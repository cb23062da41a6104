# restobar/core/pagination.py

"""
목록 조회 파라미터 파싱과 페이지 결과 타입을 정의하는 모듈입니다.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Generic, List, Mapping, TypeVar

from pydantic import Field, ValidationError

from restobar.core.config import settings
from restobar.core.exceptions import ValidationFailed
from restobar.core.pipeline import FilterSpec
from restobar.core.validation import collect_errors

T = TypeVar("T")


class ListParams(FilterSpec):
    """
    `search`, `state`, `per_page`, `page` 쿼리 파라미터입니다.
    per_page가 없으면 설정의 기본 페이지 크기(15)를 사용합니다.
    """
    per_page: int = Field(default_factory=lambda: settings.DEFAULT_PER_PAGE, ge=1, le=settings.MAX_PER_PAGE)
    page: int = Field(1, ge=1)

    def filters(self) -> FilterSpec:
        return FilterSpec(search=self.search, state=self.state)


def parse_list_params(query: Mapping[str, Any], locale: str) -> ListParams:
    """쿼리 문자열을 ListParams로 변환합니다. 빈 값은 생략된 것으로 봅니다."""
    data = {key: value for key, value in query.items() if not (isinstance(value, str) and not value.strip())}
    try:
        return ListParams.model_validate(data)
    except ValidationError as exc:
        raise ValidationFailed(collect_errors(exc, locale)) from exc


@dataclass
class Page(Generic[T]):
    items: List[T] = field(default_factory=list)
    total: int = 0
    per_page: int = 15
    current_page: int = 1

    @property
    def last_page(self) -> int:
        return max(1, math.ceil(self.total / self.per_page))
