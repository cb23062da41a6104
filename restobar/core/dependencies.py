# restobar/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 데이터베이스 세션 (get_db_session).
- 요청 컨텍스트 (get_request_context): 현재 사용자의 권한 목록과 응답 로케일.
"""

from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlmodel.ext.asyncio.session import AsyncSession

from restobar.core import messages
from restobar.core.database import get_session as get_main_app_session
from restobar.core.gate import Actor, RequestContext
from restobar.core.security import get_current_active_user
from restobar.domains.usr import crud as usr_crud
from restobar.domains.usr.models import User


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    restobar.core.database.get_session을 래핑하여 사용합니다.
    """
    async for session in get_main_app_session():
        yield session


def get_locale(request: Request) -> str:
    return messages.resolve_locale(request.headers.get("accept-language"))


async def get_request_context(
    locale: str = Depends(get_locale),
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db_session),
) -> RequestContext:
    """
    인증된 사용자를 게이트가 판단에 쓰는 Actor로 변환합니다.
    권한 목록은 사용자에게 부여된 모든 역할의 권한 합집합입니다.
    """
    permissions = await usr_crud.user.permission_names(db, user_id=current_user.id)
    actor = Actor(id=current_user.id, email=current_user.email, permissions=frozenset(permissions))
    return RequestContext(actor=actor, locale=locale)
