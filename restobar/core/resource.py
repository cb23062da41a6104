# restobar/core/resource.py

"""
모든 CRUD 리소스가 공유하는 범용 컨트롤러 모듈입니다.

리소스별 차이는 `ResourceDescriptor`(모델, 스키마, 권한 접두사, 고유 필드, 필터 단계,
저장소 객체, 인스턴스 정책)로만 표현하고, 처리 순서는 `ResourceController`가 고정합니다.

    인가 -> 검증/정규화 -> 고유성 사전 검사 -> 저장소 변경 -> 응답 변환 -> 봉투

각 단계의 실패는 즉시 이후 단계를 중단시키며 재시도하지 않습니다.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Tuple, Type

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from restobar.core import messages
from restobar.core.config import settings
from restobar.core.crud_base import CRUDBase
from restobar.core.exceptions import AuthorizationDenied, NotFound, StoreFailure, UniquenessConflict, ValidationFailed
from restobar.core.gate import Ability, Actor, InstancePolicy, PermissionGate, RequestContext, gate as default_gate
from restobar.core.pagination import parse_list_params
from restobar.core.pipeline import FilterPipeline, default_pipeline
from restobar.core.responses import envelope, shape_entity, shape_page
from restobar.core.validation import RequestSchema, validate

logger = logging.getLogger(__name__)

# 수정 정책: (actor, target, 검증된 변경 내용) -> 허용 여부
ChangePolicy = Callable[[Actor, Any, Mapping[str, Any]], bool]


@dataclass
class ResourceDescriptor:
    """
    하나의 엔티티 유형을 CRUD 리소스로 노출하기 위한 선언입니다.

    - key: 응답 봉투에서 엔티티/페이지를 담는 키
    - path: URL 경로 조각 (예: "areas")
    - labels: 로케일별 (단수, 복수) 표시명
    - unique_fields: 대소문자 무시 고유성 검사 대상 모델 속성
    - change_policy: 검증 후 변경 내용까지 보고 수정 허용 여부를 판단하는 정책
    """
    model: Type[SQLModel]
    key: str
    path: str
    permission_prefix: str
    labels: Dict[str, Tuple[str, str]]
    create_schema: Type[RequestSchema]
    update_schema: Type[RequestSchema]
    read_schema: Type[BaseModel]
    unique_fields: Tuple[str, ...] = ("name",)
    filters: FilterPipeline = field(default_factory=default_pipeline)
    load_options: Tuple[Any, ...] = ()
    crud: Optional[CRUDBase] = None
    policy: Optional[InstancePolicy] = None
    change_policy: Optional[ChangePolicy] = None
    tags: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.crud is None:
            self.crud = CRUDBase(self.model)

    def label_params(self, locale: str) -> Dict[str, str]:
        singular, plural = self.labels.get(locale) or self.labels[settings.DEFAULT_LOCALE]
        return {"label": singular, "label_plural": plural}


def parse_body(body: Any, locale: str) -> Any:
    """원시 요청 본문(bytes)을 JSON으로 해석합니다. 빈 본문은 빈 객체로 봅니다."""
    if not isinstance(body, (bytes, bytearray, str)):
        return body
    if not body.strip():
        return {}
    try:
        return json.loads(body)
    except ValueError as exc:
        raise ValidationFailed({"body": [messages.field_error(locale, "json_invalid", "body")]}) from exc


class ResourceController:
    def __init__(self, descriptor: ResourceDescriptor, gate: PermissionGate = default_gate):
        self.descriptor = descriptor
        self.gate = gate

    # -------------------------------------------------------------------------
    # 공통 단계
    # -------------------------------------------------------------------------
    def message(self, ctx: RequestContext, key: str) -> str:
        return messages.message(ctx.locale, key, **self.descriptor.label_params(ctx.locale))

    def authorize(self, ctx: RequestContext, ability: Ability, target: Any = None) -> None:
        self.gate.authorize(ctx.actor, ability, self.descriptor, target, locale=ctx.locale)

    async def resolve(self, db: AsyncSession, ctx: RequestContext, entity_id: int) -> Any:
        entity = await self.descriptor.crud.get(db, entity_id, options=self.descriptor.load_options)
        if entity is None:
            raise NotFound(self.message(ctx, "not_found"))
        return entity

    async def authorize_target(
        self, db: AsyncSession, ctx: RequestContext, ability: Ability, entity_id: int
    ) -> Any:
        """
        권한 보유 여부를 먼저 확인한 뒤 대상을 조회하고, 마지막으로 인스턴스 정책을 적용합니다.
        권한이 없는 주체는 대상의 존재 여부와 관계없이 항상 거부 응답을 받습니다.
        """
        self.authorize(ctx, ability)
        entity = await self.resolve(db, ctx, entity_id)
        self.authorize(ctx, ability, entity)
        return entity

    def authorize_change(self, ctx: RequestContext, entity: Any, data: Mapping[str, Any]) -> None:
        """검증된 변경 내용을 기준으로 수정 정책을 적용합니다."""
        d = self.descriptor
        if d.change_policy is not None and not d.change_policy(ctx.actor, entity, data):
            raise AuthorizationDenied(ctx.locale, ability=Ability.UPDATE.value, resource=d.permission_prefix)

    async def find_conflict(
        self, db: AsyncSession, data: Mapping[str, Any], exclude_id: Optional[int] = None
    ) -> Optional[str]:
        """충돌하는 고유 필드의 API 이름을 반환합니다. 없으면 None."""
        d = self.descriptor
        for attribute in d.unique_fields:
            value = data.get(attribute)
            if value is None:
                continue
            if await d.crud.exists_ci(db, field=attribute, value=value, exclude_id=exclude_id):
                return d.create_schema.api_name(attribute)
        return None

    async def ensure_unique(
        self, db: AsyncSession, ctx: RequestContext, data: Mapping[str, Any], exclude_id: Optional[int] = None
    ) -> None:
        conflict = await self.find_conflict(db, data, exclude_id)
        if conflict is not None:
            logger.info("Uniqueness conflict on %s.%s", self.descriptor.path, conflict)
            raise UniquenessConflict(conflict, ctx.locale)

    async def write(
        self,
        db: AsyncSession,
        ctx: RequestContext,
        operation: Callable[[], Awaitable[Any]],
        data: Mapping[str, Any],
        exclude_id: Optional[int] = None,
    ) -> Any:
        """
        저장소 변경을 실행합니다.
        고유 인덱스 위반은 동시 요청과의 경합으로 보고 다시 확인하여 UniquenessConflict로,
        그 밖의 저장소 오류는 롤백 후 StoreFailure로 변환합니다.
        """
        try:
            return await operation()
        except IntegrityError as exc:
            await db.rollback()
            conflict = await self.find_conflict(db, data, exclude_id)
            if conflict is not None:
                logger.info("Uniqueness conflict detected by store on %s.%s", self.descriptor.path, conflict)
                raise UniquenessConflict(conflict, ctx.locale) from exc
            raise StoreFailure(ctx.locale) from exc
        except SQLAlchemyError as exc:
            await db.rollback()
            raise StoreFailure(ctx.locale) from exc

    # -------------------------------------------------------------------------
    # 연산
    # -------------------------------------------------------------------------
    async def index(self, db: AsyncSession, ctx: RequestContext, query: Mapping[str, Any]) -> Dict[str, Any]:
        d = self.descriptor
        self.authorize(ctx, Ability.VIEW_ANY)
        params = parse_list_params(query, ctx.locale)
        statement = d.filters.apply(d.crud.query(), d.model, params.filters())
        page = await d.crud.paginate(
            db, statement, page=params.page, per_page=params.per_page, options=d.load_options
        )
        return envelope(self.message(ctx, "listed"), d.key, shape_page(d.read_schema, page))

    async def store(self, db: AsyncSession, ctx: RequestContext, body: Any) -> Dict[str, Any]:
        d = self.descriptor
        self.authorize(ctx, Ability.CREATE)
        data = await validate(d.create_schema, parse_body(body, ctx.locale), db, ctx.locale)
        await self.ensure_unique(db, ctx, data)
        entity = await self.write(db, ctx, lambda: d.crud.create(db, data=data), data)
        entity = await self.resolve(db, ctx, entity.id)
        logger.info("Created %s id=%s by user=%s", d.path, entity.id, ctx.actor.id)
        return envelope(self.message(ctx, "created"), d.key, shape_entity(d.read_schema, entity))

    async def show(self, db: AsyncSession, ctx: RequestContext, entity_id: int) -> Dict[str, Any]:
        d = self.descriptor
        entity = await self.authorize_target(db, ctx, Ability.VIEW, entity_id)
        return envelope(self.message(ctx, "found"), d.key, shape_entity(d.read_schema, entity))

    async def update(self, db: AsyncSession, ctx: RequestContext, entity_id: int, body: Any) -> Dict[str, Any]:
        d = self.descriptor
        entity = await self.authorize_target(db, ctx, Ability.UPDATE, entity_id)
        data = await validate(d.update_schema, parse_body(body, ctx.locale), db, ctx.locale, partial=True)
        self.authorize_change(ctx, entity, data)
        await self.ensure_unique(db, ctx, data, exclude_id=entity_id)
        await self.write(db, ctx, lambda: d.crud.update(db, db_obj=entity, data=data), data, exclude_id=entity_id)
        entity = await self.resolve(db, ctx, entity_id)
        logger.info("Updated %s id=%s by user=%s", d.path, entity_id, ctx.actor.id)
        return envelope(self.message(ctx, "updated"), d.key, shape_entity(d.read_schema, entity))

    async def destroy(self, db: AsyncSession, ctx: RequestContext, entity_id: int) -> Dict[str, Any]:
        d = self.descriptor
        entity = await self.authorize_target(db, ctx, Ability.DELETE, entity_id)
        await self.write(db, ctx, lambda: d.crud.delete(db, db_obj=entity), {})
        logger.info("Deleted %s id=%s by user=%s", d.path, entity_id, ctx.actor.id)
        return envelope(self.message(ctx, "deleted"))
