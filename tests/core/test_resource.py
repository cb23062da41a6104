# tests/core/test_resource.py

"""
ResourceController 저장 단계 테스트.

사전 검사를 통과했더라도 고유 인덱스가 중복을 막아야 하며,
그 외 저장소 오류는 StoreFailure로 변환되어야 합니다.
"""

import pytest
from sqlmodel import func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from restobar.core.exceptions import StoreFailure, UniquenessConflict, ValidationFailed
from restobar.core.gate import Actor, RequestContext
from restobar.core.resource import ResourceController, parse_body
from restobar.domains.loc.models import Area
from restobar.domains.loc.resources import areas

CTX = RequestContext(actor=Actor(id=1, email="admin@restobar.com", permissions=frozenset()), locale="es")


@pytest.mark.asyncio
async def test_unique_index_rejects_concurrent_duplicate(db_session: AsyncSession):
    """다른 요청이 먼저 같은 이름을 저장한 경우를 흉내 냅니다."""
    controller = ResourceController(areas)
    await areas.crud.create(db_session, data={"name": "patio"})

    data = {"name": "patio", "state": True}
    with pytest.raises(UniquenessConflict) as excinfo:
        await controller.write(db_session, CTX, lambda: areas.crud.create(db_session, data=data), data)
    assert excinfo.value.errors == {"name": ["Este nombre ya está registrado."]}

    total = (await db_session.exec(select(func.count()).select_from(Area))).one()
    assert total == 1


@pytest.mark.asyncio
async def test_other_store_errors_become_store_failure(db_session: AsyncSession):
    controller = ResourceController(areas)
    data = {"name": None}
    with pytest.raises(StoreFailure) as excinfo:
        await controller.write(db_session, CTX, lambda: areas.crud.create(db_session, data=data), data)
    assert excinfo.value.status_code == 500


def test_parse_body():
    assert parse_body(b"", "es") == {}
    assert parse_body(b'{"name": "patio"}', "es") == {"name": "patio"}
    with pytest.raises(ValidationFailed):
        parse_body(b"{", "es")
