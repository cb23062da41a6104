# tests/test_main.py

"""
애플리케이션 루트/헬스 체크 엔드포인트와 라우터 등록 상태를 확인합니다.
"""

import pytest
from httpx import AsyncClient

from restobar.main import app


@pytest.mark.asyncio
async def test_read_root(client: AsyncClient):
    response = await client.get("/")
    assert response.status_code == 200
    assert "Welcome to" in response.json()["message"]


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """테스트 DB 세션으로 select 1 이 성공해야 합니다."""
    response = await client.get("/health-check")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database_connection": "successful"}


def test_resource_routes_registered():
    paths = set(app.openapi()["paths"])
    for path in (
        "/api/v1/loc/areas",
        "/api/v1/loc/areas/{entity_id}",
        "/api/v1/loc/floors",
        "/api/v1/loc/tables",
        "/api/v1/inv/products",
        "/api/v1/inv/inputs",
        "/api/v1/menu/dishes",
        "/api/v1/ven/suppliers",
        "/api/v1/crm/customers",
        "/api/v1/hr/employees",
        "/api/v1/usr/users",
        "/api/v1/usr/roles",
        "/api/v1/usr/permissions",
        "/api/v1/usr/auth/token",
    ):
        assert path in paths, path


@pytest.mark.asyncio
async def test_protected_route_requires_token(client: AsyncClient):
    response = await client.get("/api/v1/loc/areas")
    assert response.status_code == 401
