# restobar/main.py

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from restobar import API_PREFIX
from restobar.core.config import settings
from restobar.core.database import create_db_and_tables, engine, get_session
from restobar.core.exceptions import register_exception_handlers
from restobar.core.logging_config import configure_logging

# 각 도메인의 라우터들을 임포트합니다.
from restobar.domains.usr.routers import router as usr_router
from restobar.domains.loc.routers import router as loc_router
from restobar.domains.inv.routers import router as inv_router
from restobar.domains.menu.routers import router as menu_router
from restobar.domains.ven.routers import router as ven_router
from restobar.domains.crm.routers import router as crm_router
from restobar.domains.hr.routers import router as hr_router

logger = logging.getLogger(__name__)


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    로깅을 설정하고, 개발 환경에서는 테이블을 생성합니다 (운영은 Alembic 사용).
    종료 시 데이터베이스 연결 풀을 정리합니다.
    """
    configure_logging()
    logger.info("Starting %s %s (%s)", settings.APP_NAME, settings.APP_VERSION, settings.APP_ENV)
    if settings.APP_ENV == "development":
        await create_db_and_tables()

    yield  # 애플리케이션 실행

    await engine.dispose()
    logger.info("Database connection pool disposed.")


# -- FastAPI 애플리케이션 인스턴스 생성 --
app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# -- CORS (Cross-Origin Resource Sharing) 미들웨어 설정 --
# 운영 환경에서는 CORS_ORIGINS를 실제 프론트엔드 도메인으로 제한해야 합니다.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -- 오류 응답 형식 통일 (403/404/422/500) --
register_exception_handlers(app)

# -- 도메인 라우터 포함 --
app.include_router(usr_router, prefix=f"{API_PREFIX}/usr")
app.include_router(loc_router, prefix=f"{API_PREFIX}/loc")
app.include_router(inv_router, prefix=f"{API_PREFIX}/inv")
app.include_router(menu_router, prefix=f"{API_PREFIX}/menu")
app.include_router(ven_router, prefix=f"{API_PREFIX}/ven")
app.include_router(crm_router, prefix=f"{API_PREFIX}/crm")
app.include_router(hr_router, prefix=f"{API_PREFIX}/hr")


# -- 루트 엔드포인트 --
@app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
async def read_root():
    return {"message": f"Welcome to {settings.APP_NAME}. Visit /docs for interactive API documentation."}


# -- 헬스 체크 엔드포인트 --
@app.get("/health-check", summary="Health Check", response_description="Status of the application and database connection.")
async def health_check(session: AsyncSession = Depends(get_session)):
    """
    데이터베이스에 가벼운 쿼리(select 1)를 실행하여 서비스의 정상 작동 여부를 확인합니다.
    """
    try:
        result = await session.exec(select(1))
        if result.first():
            return {"status": "ok", "database_connection": "successful"}
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Database health check failed: No result from test query"
        )
    except SQLAlchemyError as e:
        logger.exception("Health check failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Database connection error during health check: {e}"
        )


# -- Uvicorn 서버 직접 실행 (개발용) --
# if __name__ == "__main__":
#     import uvicorn
#     uvicorn.run("restobar.main:app", host="0.0.0.0", port=8000, reload=True, log_level="info")
