# restobar/domains/usr/routers.py

"""
'usr' 도메인 (사용자, 역할, 권한, 인증)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
"""

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlmodel.ext.asyncio.session import AsyncSession

from restobar.core import dependencies as deps
from restobar.core import messages
from restobar.core.config import settings
from restobar.core.exceptions import ValidationFailed
from restobar.core.gate import Ability, RequestContext, gate
from restobar.core.responses import envelope, shape_entity
from restobar.core.routing import build_resource_router
from restobar.core.security import create_access_token, get_current_active_user, verify_password
from . import crud as usr_crud
from . import models as usr_models
from . import resources as usr_resources
from . import schemas as usr_schemas

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# 1. 인증 (Authentication) 엔드포인트
# =============================================================================
@router.post("/auth/token", response_model=usr_schemas.Token, tags=["usr: auth"], summary="Access Token 획득")
async def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    OAuth2 password 폼으로 로그인합니다. `username`에는 이메일을 입력합니다.
    """
    user = await usr_crud.user.authenticate(db, email=form_data.username, password=form_data.password)
    if not user:
        logger.info("Failed login for %s", form_data.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if not user.state:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Inactive user")

    access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = create_access_token(data={"sub": str(user.id)}, expires_delta=access_token_expires)
    return {"access_token": access_token, "token_type": "bearer"}


@router.get("/auth/me", response_model=usr_schemas.UserMe, tags=["usr: auth"], summary="현재 사용자 정보 조회")
async def read_users_me(
    current_user: usr_models.User = Depends(get_current_active_user),
    db: AsyncSession = Depends(deps.get_db_session),
):
    permissions = await usr_crud.user.permission_names(db, user_id=current_user.id)
    me = usr_schemas.UserMe.model_validate(current_user)
    return me.model_copy(update={"permissions": permissions, "must_reset": current_user.password_reset_required})


@router.put("/auth/password", tags=["usr: auth"], summary="비밀번호 변경")
async def change_password(
    request: Request,
    payload: usr_schemas.PasswordChange,
    current_user: usr_models.User = Depends(get_current_active_user),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    현재 비밀번호를 확인한 뒤 새 비밀번호로 변경하고, 비밀번호 변경 필요 표시를 해제합니다.
    """
    locale = deps.get_locale(request)
    if not verify_password(payload.current_password, current_user.password_hash):
        raise ValidationFailed({"current_password": [messages.message(locale, "invalid_password")]})
    db_user = await usr_crud.user.get(db, current_user.id)
    await usr_crud.user.change_password(db, db_obj=db_user, password=payload.password)
    return envelope(messages.message(locale, "password_changed"))


# =============================================================================
# 2. 권한 (Permission) 목록
# =============================================================================
@router.get("/permissions", tags=["usr: roles"], summary="전체 권한 목록 조회")
async def read_permissions(
    db: AsyncSession = Depends(deps.get_db_session),
    ctx: RequestContext = Depends(deps.get_request_context),
):
    """
    역할 관리 화면에서 사용할 전체 권한 목록입니다. 역할 조회 권한(roles:view)이 필요합니다.
    """
    gate.authorize(ctx.actor, Ability.VIEW_ANY, usr_resources.roles, locale=ctx.locale)
    permissions = await usr_crud.permission.get_all(db)
    label = "Permisos" if ctx.locale == "es" else "Permissions"
    return envelope(
        messages.message(ctx.locale, "listed", label_plural=label),
        "permissions",
        [shape_entity(usr_schemas.PermissionRead, item) for item in permissions],
    )


# =============================================================================
# 3. 사용자 / 역할 CRUD
# =============================================================================
for descriptor in usr_resources.RESOURCES:
    router.include_router(build_resource_router(descriptor))
