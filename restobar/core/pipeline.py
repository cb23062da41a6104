# restobar/core/pipeline.py

"""
목록 조회용 필터 파이프라인 모듈입니다.

각 단계는 SQLAlchemy Select 문을 받아 조건이 추가된 Select 문을 반환합니다.
트리거 값이 없거나 빈 문자열이면 입력 문장을 그대로(동일 객체) 반환합니다.
파이프라인은 선언된 순서대로 단계를 접어(fold) 적용할 뿐, 조회나 페이지 분할은 하지 않습니다.
"""

from functools import reduce
from typing import Any, Optional, Sequence, Type

from pydantic import BaseModel, ConfigDict, field_validator
from sqlalchemy import Select, func


class FilterSpec(BaseModel):
    """목록 조회 필터 조건. 빈 문자열은 '조건 없음'으로 취급합니다."""
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    search: Optional[str] = None
    state: Optional[bool] = None

    @field_validator("search", "state", mode="before")
    @classmethod
    def blank_as_absent(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class FilterStage:
    """
    필터 단계의 기반 클래스입니다.
    - trigger: FilterSpec에서 값을 읽어올 필드명
    - column: 모델에서 조건을 걸 컬럼명. 모델에 없으면 파이프라인이 단계를 건너뜁니다.
    """
    trigger: str = ""
    column: str = ""

    def __init__(self, value: Any = None):
        self.value = value

    def is_active(self) -> bool:
        return self.value is not None and self.value != ""

    def apply(self, statement: Select, model: Type[Any]) -> Select:
        if not self.is_active():
            return statement
        return statement.where(self.condition(getattr(model, self.column)))

    def condition(self, column: Any) -> Any:
        raise NotImplementedError


class FilterByName(FilterStage):
    """이름에 검색어가 포함된 행만 남깁니다 (대소문자 무시, LIKE 와일드카드 이스케이프)."""
    trigger = "search"
    column = "name"

    def condition(self, column: Any) -> Any:
        return func.lower(column).contains(str(self.value).lower(), autoescape=True)


class FilterByState(FilterStage):
    """활성 상태(state)가 정확히 일치하는 행만 남깁니다."""
    trigger = "state"
    column = "state"

    def condition(self, column: Any) -> Any:
        return column == bool(self.value)


class FilterPipeline:
    def __init__(self, stages: Sequence[Type[FilterStage]]):
        self.stages = tuple(stages)

    def build(self, spec: FilterSpec, model: Type[Any]) -> list:
        return [
            stage(getattr(spec, stage.trigger, None))
            for stage in self.stages
            if hasattr(model, stage.column)
        ]

    def apply(self, statement: Select, model: Type[Any], spec: FilterSpec) -> Select:
        return reduce(lambda current, stage: stage.apply(current, model), self.build(spec, model), statement)


def default_pipeline() -> FilterPipeline:
    return FilterPipeline([FilterByName, FilterByState])
