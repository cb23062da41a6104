# restobar/core/routing.py

"""
ResourceDescriptor 하나로 표준 CRUD 라우트 다섯 개를 가진 APIRouter를 만드는 모듈입니다.

    GET    /<path>              목록 (search, state, per_page, page)
    POST   /<path>              생성
    GET    /<path>/{entity_id}  단건 조회
    PUT    /<path>/{entity_id}  수정
    DELETE /<path>/{entity_id}  삭제

요청 본문은 인가 이후에 해석되도록 원시 바이트로 컨트롤러에 전달합니다.
"""

from typing import Any, Dict, Optional, Type

from fastapi import APIRouter, Depends, Request, status
from sqlmodel.ext.asyncio.session import AsyncSession

from restobar.core import dependencies as deps
from restobar.core.gate import RequestContext
from restobar.core.resource import ResourceController, ResourceDescriptor
from restobar.core.validation import RequestSchema


def body_openapi(schema: Type[RequestSchema]) -> Dict[str, Any]:
    """Swagger UI에 요청 본문 스키마를 표시하기 위한 openapi_extra 값입니다."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema.model_json_schema(by_alias=True)}},
        }
    }


def build_resource_router(
    descriptor: ResourceDescriptor, controller: Optional[ResourceController] = None
) -> APIRouter:
    controller = controller or ResourceController(descriptor)
    # OpenAPI 문서는 영어 표시명을 사용합니다.
    singular, plural = descriptor.labels.get("en") or next(iter(descriptor.labels.values()))

    router = APIRouter(
        prefix=f"/{descriptor.path}",
        tags=list(descriptor.tags) or [plural],
        responses={403: {"description": "Forbidden"}, 404: {"description": "Not found"}},
    )

    @router.get("", summary=f"List {plural.lower()}")
    async def index(
        request: Request,
        db: AsyncSession = Depends(deps.get_db_session),
        ctx: RequestContext = Depends(deps.get_request_context),
    ):
        return await controller.index(db, ctx, dict(request.query_params))

    @router.post(
        "",
        status_code=status.HTTP_201_CREATED,
        summary=f"Create {singular.lower()}",
        openapi_extra=body_openapi(descriptor.create_schema),
    )
    async def store(
        request: Request,
        db: AsyncSession = Depends(deps.get_db_session),
        ctx: RequestContext = Depends(deps.get_request_context),
    ):
        return await controller.store(db, ctx, await request.body())

    @router.get("/{entity_id}", summary=f"Show {singular.lower()}")
    async def show(
        entity_id: int,
        db: AsyncSession = Depends(deps.get_db_session),
        ctx: RequestContext = Depends(deps.get_request_context),
    ):
        return await controller.show(db, ctx, entity_id)

    @router.put(
        "/{entity_id}",
        summary=f"Update {singular.lower()}",
        openapi_extra=body_openapi(descriptor.update_schema),
    )
    async def update(
        entity_id: int,
        request: Request,
        db: AsyncSession = Depends(deps.get_db_session),
        ctx: RequestContext = Depends(deps.get_request_context),
    ):
        return await controller.update(db, ctx, entity_id, await request.body())

    @router.delete("/{entity_id}", summary=f"Delete {singular.lower()}")
    async def destroy(
        entity_id: int,
        db: AsyncSession = Depends(deps.get_db_session),
        ctx: RequestContext = Depends(deps.get_request_context),
    ):
        return await controller.destroy(db, ctx, entity_id)

    return router
