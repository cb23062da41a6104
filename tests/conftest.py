# tests/conftest.py

import os
from typing import AsyncGenerator, Awaitable, Callable, Dict, Iterable
from contextlib import asynccontextmanager

# --- 테스트 환경 변수 ---
# restobar.core.config.Settings는 임포트 시점에 생성되므로 앱 임포트보다 먼저 설정해야 합니다.
os.environ["SECRET_KEY"] = "test-secret-key-for-restobar"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["APP_ENV"] = "testing"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

from restobar.main import app as main_app  # noqa: E402
from restobar.core import dependencies as deps  # noqa: E402
from restobar.core.database import get_session, import_models  # noqa: E402
from restobar.domains import seed  # noqa: E402
from restobar.domains.usr import models as usr_models  # noqa: E402
from restobar.domains.usr.resources import ADMIN_ROLE, STAFF_ROLE  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite://"
TOKEN_URL = "/api/v1/usr/auth/token"


# --- 데이터베이스 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    테스트 함수마다 새 인메모리 SQLite 데이터베이스를 만들고 모든 테이블을 생성합니다.
    StaticPool로 하나의 커넥션을 공유해야 테이블이 유지됩니다.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    import_models()
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSession(test_engine, expire_on_commit=False) as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def seeded_roles(db_session: AsyncSession) -> Dict[str, usr_models.Role]:
    """전체 권한과 기본 역할('administrador', 'personal')을 생성합니다."""
    await seed.seed_permissions(db_session)
    return await seed.seed_roles(db_session)


# --- 사용자 픽스처 ---
@pytest_asyncio.fixture(scope="function")
def user_factory(
    db_session: AsyncSession, seeded_roles: Dict[str, usr_models.Role]
) -> Callable[..., Awaitable[usr_models.User]]:
    """
    역할 이름 목록을 받아 테스트 사용자를 생성하는 팩토리 함수를 반환합니다.
    """
    async def _create_user(
        email: str,
        password: str,
        role_names: Iterable[str] = (),
        **kwargs,
    ) -> usr_models.User:
        name = kwargs.pop("name", email.split("@")[0])
        return await seed.seed_user(
            db_session,
            email=email,
            password=password,
            name=name,
            roles=[seeded_roles[role_name] for role_name in role_names],
            **kwargs,
        )
    return _create_user


@pytest_asyncio.fixture(scope="function")
async def test_admin_user(user_factory: Callable) -> usr_models.User:
    """'administrador' 역할(전체 권한) 사용자를 생성합니다."""
    return await user_factory("admin@restobar.com", "adminpass123", [ADMIN_ROLE], name="administrador")


@pytest_asyncio.fixture(scope="function")
async def test_staff_user(user_factory: Callable) -> usr_models.User:
    """'personal' 역할(조회 권한만) 사용자를 생성합니다."""
    return await user_factory("mozo@restobar.com", "staffpass123", [STAFF_ROLE], name="mozo")


@pytest_asyncio.fixture(scope="function")
async def test_guest_user(user_factory: Callable) -> usr_models.User:
    """역할이 없는(권한 없음) 사용자를 생성합니다."""
    return await user_factory("invitado@restobar.com", "guestpass123", name="invitado")


# --- 클라이언트 픽스처 ---
@pytest_asyncio.fixture(scope="function")
def authorized_client_factory(
    db_session: AsyncSession,
) -> Callable[[str, str], AsyncGenerator[AsyncClient, None]]:
    """
    실제 로그인 API로 토큰을 받아 Authorization 헤더가 설정된 AsyncClient를 만드는 팩토리입니다.
    모든 요청은 테스트의 db_session을 공유합니다.
    """
    @asynccontextmanager
    async def _create_client_context(email: str, password: str) -> AsyncGenerator[AsyncClient, None]:
        async def override_get_session():
            yield db_session

        original_overrides = main_app.dependency_overrides.copy()
        try:
            main_app.dependency_overrides.update({
                get_session: override_get_session,
                deps.get_db_session: override_get_session,
            })

            transport = ASGITransport(app=main_app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                res = await client.post(TOKEN_URL, data={"username": email, "password": password})
                if res.status_code != 200:
                    pytest.fail(f"Login failed for {email}: {res.text}")

                client.headers["Authorization"] = f"Bearer {res.json()['access_token']}"
                yield client
        finally:
            main_app.dependency_overrides.clear()
            main_app.dependency_overrides.update(original_overrides)

    return _create_client_context


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """인증되지 않은 클라이언트입니다."""
    async def override_get_session():
        yield db_session

    original_overrides = main_app.dependency_overrides.copy()
    main_app.dependency_overrides.update({
        get_session: override_get_session,
        deps.get_db_session: override_get_session,
    })
    try:
        async with AsyncClient(transport=ASGITransport(app=main_app), base_url="http://test") as ac:
            yield ac
    finally:
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)


@pytest_asyncio.fixture(scope="function")
async def admin_client(
    authorized_client_factory: Callable[..., AsyncGenerator[AsyncClient, None]],
    test_admin_user: usr_models.User,
) -> AsyncGenerator[AsyncClient, None]:
    """관리자로 인증된 클라이언트를 반환합니다."""
    async with authorized_client_factory(test_admin_user.email, "adminpass123") as ac:
        yield ac


@pytest_asyncio.fixture(scope="function")
async def staff_client(
    authorized_client_factory: Callable[..., AsyncGenerator[AsyncClient, None]],
    test_staff_user: usr_models.User,
) -> AsyncGenerator[AsyncClient, None]:
    """조회 권한만 가진 직원으로 인증된 클라이언트를 반환합니다."""
    async with authorized_client_factory(test_staff_user.email, "staffpass123") as ac:
        yield ac


@pytest_asyncio.fixture(scope="function")
async def guest_client(
    authorized_client_factory: Callable[..., AsyncGenerator[AsyncClient, None]],
    test_guest_user: usr_models.User,
) -> AsyncGenerator[AsyncClient, None]:
    """역할이 없는 사용자로 인증된 클라이언트를 반환합니다."""
    async with authorized_client_factory(test_guest_user.email, "guestpass123") as ac:
        yield ac
