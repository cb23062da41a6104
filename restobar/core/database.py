# restobar/core/database.py

"""
애플리케이션의 데이터베이스 연결 및 세션 관리를 담당하는 모듈입니다.

- SQLModel의 비동기 엔진을 설정합니다.
- 요청 단위 비동기 세션 생성을 위한 의존성 함수를 제공합니다.
- 개발 환경에서 테이블을 생성하는 함수를 포함합니다 (운영은 Alembic 사용).
"""

import logging
from typing import Any, AsyncGenerator, Dict
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from restobar.core.config import settings

logger = logging.getLogger(__name__)


def engine_options(url: str, echo: bool = False) -> Dict[str, Any]:
    """
    드라이버별 엔진 옵션을 반환합니다.
    SQLite는 커넥션 풀 크기 옵션을 받지 않으므로 분리합니다.
    """
    if url.startswith("sqlite"):
        options: Dict[str, Any] = {"echo": echo}
        if ":memory:" in url or url.rstrip("/").endswith("sqlite+aiosqlite:"):
            options["poolclass"] = StaticPool  # 메모리 DB는 단일 커넥션을 공유해야 합니다.
        return options
    return {
        "echo": echo,
        "pool_recycle": 3600,  # 1시간마다 연결 재활용
        "pool_size": 10,
        "max_overflow": 20,
        "pool_pre_ping": True,
    }


# SQLModel 엔진을 생성합니다.
engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL.get_secret_value(),
    **engine_options(settings.DATABASE_URL.get_secret_value(), echo=settings.DEBUG_MODE),
)

# 비동기 세션을 생성하는 '세션 공장'
AsyncSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

metadata = SQLModel.metadata


def import_models() -> None:
    """
    모든 도메인 모델을 임포트하여 SQLModel.metadata에 등록합니다.
    순환 임포트를 피하기 위해 모듈 로딩 시점이 아닌 호출 시점에 임포트합니다.
    """
    from restobar.domains.models import ALL_MODELS  # noqa: F401


async def create_db_and_tables(bind: AsyncEngine | None = None) -> None:
    """
    데이터베이스 테이블을 생성합니다. 기존 테이블은 삭제하지 않습니다.
    개발 환경 전용이며, 운영 환경에서는 Alembic 마이그레이션을 사용합니다.
    """
    import_models()
    async with (bind or engine).begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables created (or already present).")


# =============================================================================
# 비동기 데이터베이스 세션 의존성 주입
# =============================================================================
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    요청마다 새로운 세션을 생성하고, 요청 처리 후 세션을 자동으로 닫습니다.
    """
    async with AsyncSessionLocal() as session:
        yield session


@asynccontextmanager
async def get_async_session_context() -> AsyncGenerator[AsyncSession, None]:
    """
    CLI 스크립트 등 요청 밖에서 사용할 독립적인 비동기 DB 세션을 제공합니다.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
