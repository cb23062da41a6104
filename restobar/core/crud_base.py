# restobar/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.
리소스 컨트롤러가 사용하는 저장소 경계(store boundary)이며 모든 메서드는 비동기입니다.

- query(): 필터 파이프라인에 넘길 기본 Select 문
- paginate(): 필터가 적용된 Select 문을 id 오름차순으로 잘라 Page로 반환
- exists_ci(): 대소문자를 무시한 고유성 사전 검사 (수정 시 자기 자신 제외)
- create()/update()/delete(): 변경 후 즉시 커밋
"""

from datetime import datetime, UTC
from typing import Any, Dict, Generic, Optional, Sequence, Type, TypeVar

from sqlalchemy import Select
from sqlmodel import SQLModel, func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from restobar.core.pagination import Page

ModelType = TypeVar("ModelType", bound=SQLModel)


class CRUDBase(Generic[ModelType]):
    """
    모든 리소스의 기본 저장소 연산을 정의합니다.
    관계 컬렉션 갱신이나 비밀번호 해싱처럼 추가 처리가 필요한 도메인은 이 클래스를 상속합니다.
    """
    def __init__(self, model: Type[ModelType]):
        self.model = model

    def query(self) -> Select:
        return select(self.model)

    async def get(self, db: AsyncSession, id: Any, *, options: Sequence[Any] = ()) -> Optional[ModelType]:
        """
        ID를 기준으로 단일 레코드를 조회합니다.
        세션에 이미 로드된 객체가 있어도 관계 컬렉션을 다시 읽어 옵니다.
        """
        statement = (
            select(self.model)
            .where(self.model.id == id)
            .options(*options)
            .execution_options(populate_existing=True)
        )
        result = await db.exec(statement)
        return result.first()

    async def count(self, db: AsyncSession, statement: Optional[Select] = None) -> int:
        source = (statement if statement is not None else self.query()).order_by(None).subquery()
        result = await db.exec(select(func.count()).select_from(source))
        return result.one()

    async def paginate(
        self,
        db: AsyncSession,
        statement: Select,
        *,
        page: int = 1,
        per_page: int = 15,
        options: Sequence[Any] = (),
    ) -> Page[ModelType]:
        total = await self.count(db, statement)
        statement = (
            statement.options(*options)
            .order_by(self.model.id)
            .offset((page - 1) * per_page)
            .limit(per_page)
        )
        result = await db.exec(statement)
        return Page(items=list(result.all()), total=total, per_page=per_page, current_page=page)

    async def exists_ci(
        self, db: AsyncSession, *, field: str, value: Any, exclude_id: Optional[int] = None
    ) -> bool:
        """`lower(field) == lower(value)`인 행이 있는지 확인합니다."""
        column = getattr(self.model, field)
        statement = select(self.model.id).where(func.lower(column) == str(value).lower())
        if exclude_id is not None:
            statement = statement.where(self.model.id != exclude_id)
        result = await db.exec(statement.limit(1))
        return result.first() is not None

    async def create(self, db: AsyncSession, *, data: Dict[str, Any]) -> ModelType:
        """
        새로운 레코드를 생성합니다.
        """
        db_obj = self.model(**self.columns(data))
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def update(self, db: AsyncSession, *, db_obj: ModelType, data: Dict[str, Any]) -> ModelType:
        """
        기존 레코드를 제자리에서 수정합니다. id는 변경되지 않습니다.
        """
        for key, value in self.columns(data).items():
            if key != "id":
                setattr(db_obj, key, value)
        if hasattr(db_obj, "updated_at"):
            db_obj.updated_at = datetime.now(UTC)

        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def delete(self, db: AsyncSession, *, db_obj: ModelType) -> None:
        await db.delete(db_obj)
        await db.commit()

    def columns(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """모델 컬럼에 해당하는 값만 남깁니다."""
        names = set(self.model.__table__.columns.keys())
        return {key: value for key, value in data.items() if key in names}
