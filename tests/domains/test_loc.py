# tests/domains/test_loc.py

"""
'loc' 도메인 (층, 구역, 테이블) API 통합 테스트.

- 생성/목록/단건/수정/삭제 전체 흐름 (구역)
- 대소문자 무시 고유성 (생성 및 자기 자신 수정)
- 권한 없는 사용자의 변경 거부 및 데이터 보존
- 목록 페이지 분할 (기본 15개, id 오름차순)
- 테이블의 구역/층 참조 검사
"""

import pytest
from httpx import AsyncClient
from sqlmodel import func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from restobar.domains.loc import models as loc_models

AREAS_URL = "/api/v1/loc/areas"


@pytest.mark.asyncio
async def test_area_lifecycle(admin_client: AsyncClient, staff_client: AsyncClient):
    """
    'Patio' 생성 -> 'PATIO' 중복 거부 -> 직원의 삭제 거부 -> 여전히 조회 가능.
    """
    response = await admin_client.post(AREAS_URL, json={"name": "Patio"})
    assert response.status_code == 201
    body = response.json()
    assert body["state"] is True
    assert body["message"] == "Área registrado correctamente."
    assert body["areas"]["name"] == "patio"
    assert body["areas"]["state"] is True
    area_id = body["areas"]["id"]

    response = await admin_client.post(AREAS_URL, json={"name": "PATIO"})
    assert response.status_code == 422
    assert response.json() == {"errors": {"name": ["Este nombre ya está registrado."]}}

    response = await staff_client.delete(f"{AREAS_URL}/{area_id}")
    assert response.status_code == 403
    assert response.json() == {"message": "Esta acción no está autorizada."}

    response = await admin_client.get(f"{AREAS_URL}/{area_id}")
    assert response.status_code == 200
    assert response.json()["areas"]["name"] == "patio"


@pytest.mark.asyncio
async def test_area_update_and_delete(admin_client: AsyncClient):
    created = (await admin_client.post(AREAS_URL, json={"name": "Terraza"})).json()["areas"]

    # 자기 자신과 같은 이름으로 수정하는 것은 충돌이 아닙니다.
    response = await admin_client.put(f"{AREAS_URL}/{created['id']}", json={"name": "TERRAZA", "state": False})
    assert response.status_code == 200
    updated = response.json()["areas"]
    assert updated["id"] == created["id"]
    assert updated["name"] == "terraza"
    assert updated["state"] is False

    response = await admin_client.delete(f"{AREAS_URL}/{created['id']}")
    assert response.status_code == 200
    assert response.json() == {"state": True, "message": "Área eliminado de manera correcta."}

    response = await admin_client.get(f"{AREAS_URL}/{created['id']}")
    assert response.status_code == 404
    assert response.json() == {"message": "Área no encontrado."}


@pytest.mark.asyncio
async def test_update_without_state_keeps_it(admin_client: AsyncClient):
    created = (await admin_client.post(AREAS_URL, json={"name": "Patio", "state": False})).json()["areas"]
    assert created["state"] is False

    response = await admin_client.put(f"{AREAS_URL}/{created['id']}", json={"name": "Patio Norte"})
    assert response.status_code == 200
    updated = response.json()["areas"]
    assert updated["name"] == "patio norte"
    assert updated["state"] is False


@pytest.mark.asyncio
async def test_update_to_other_existing_name_conflicts(admin_client: AsyncClient):
    await admin_client.post(AREAS_URL, json={"name": "Salón"})
    other = (await admin_client.post(AREAS_URL, json={"name": "Barra"})).json()["areas"]

    response = await admin_client.put(f"{AREAS_URL}/{other['id']}", json={"name": "salón"})
    assert response.status_code == 422
    assert "name" in response.json()["errors"]


@pytest.mark.asyncio
async def test_denied_store_does_not_write(staff_client: AsyncClient, db_session: AsyncSession):
    response = await staff_client.post(AREAS_URL, json={"name": "Azotea"})
    assert response.status_code == 403

    total = (await db_session.exec(select(func.count()).select_from(loc_models.Area))).one()
    assert total == 0


@pytest.mark.asyncio
async def test_denied_before_validation(guest_client: AsyncClient):
    """권한이 없으면 본문이 잘못되어도 검증 오류가 아니라 거부 응답을 받습니다."""
    response = await guest_client.post(AREAS_URL, content=b"{not json")
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_denied_regardless_of_existence(guest_client: AsyncClient):
    response = await guest_client.get(f"{AREAS_URL}/999")
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_invalid_json_and_malformed_id(admin_client: AsyncClient):
    response = await admin_client.post(AREAS_URL, content=b"{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 422
    assert list(response.json()["errors"]) == ["body"]

    response = await admin_client.get(f"{AREAS_URL}/abc")
    assert response.status_code == 422
    assert "entity_id" in response.json()["errors"]


@pytest.mark.asyncio
async def test_list_pagination_and_filters(admin_client: AsyncClient, staff_client: AsyncClient):
    for index in range(20):
        response = await admin_client.post(AREAS_URL, json={"name": f"Zona {index:02d}", "state": index % 2 == 0})
        assert response.status_code == 201

    response = await staff_client.get(AREAS_URL)
    assert response.status_code == 200
    page = response.json()["areas"]
    assert page["total"] == 20
    assert page["per_page"] == 15
    assert page["current_page"] == 1
    assert page["last_page"] == 2
    assert len(page["data"]) == 15
    ids = [item["id"] for item in page["data"]]
    assert ids == sorted(ids)

    page = (await staff_client.get(AREAS_URL, params={"page": 2})).json()["areas"]
    assert [item["name"] for item in page["data"]] == [f"zona {index:02d}" for index in range(15, 20)]

    page = (await staff_client.get(AREAS_URL, params={"search": "ZONA 1", "state": "false"})).json()["areas"]
    assert [item["name"] for item in page["data"]] == [f"zona {index:02d}" for index in (11, 13, 15, 17, 19)]

    page = (await staff_client.get(AREAS_URL, params={"search": "", "per_page": 5})).json()["areas"]
    assert page["total"] == 20
    assert page["last_page"] == 4

    response = await staff_client.get(AREAS_URL, params={"per_page": 0})
    assert response.status_code == 422
    assert "per_page" in response.json()["errors"]


@pytest.mark.asyncio
async def test_locale_from_accept_language(admin_client: AsyncClient):
    response = await admin_client.post(AREAS_URL, json={"name": "Jardín"}, headers={"Accept-Language": "en-US"})
    assert response.status_code == 201
    assert response.json()["message"] == "Area created successfully."


@pytest.mark.asyncio
async def test_create_table_with_references(admin_client: AsyncClient):
    area = (await admin_client.post(AREAS_URL, json={"name": "Salón"})).json()["areas"]
    floor = (await admin_client.post("/api/v1/loc/floors", json={"name": "Primer piso"})).json()["floors"]

    response = await admin_client.post(
        "/api/v1/loc/tables",
        json={"name": "Mesa 1", "capacity": 6, "idArea": area["id"], "idFloor": floor["id"]},
    )
    assert response.status_code == 201
    table = response.json()["tables"]
    assert table["name"] == "mesa 1"
    assert table["capacity"] == 6
    assert table["idArea"] == area["id"]
    assert table["idFloor"] == floor["id"]


@pytest.mark.asyncio
async def test_create_table_unknown_references(admin_client: AsyncClient):
    response = await admin_client.post(
        "/api/v1/loc/tables",
        json={"name": "Mesa 2", "capacity": 0, "idArea": 999, "idFloor": 998},
    )
    assert response.status_code == 422
    errors = response.json()["errors"]
    assert set(errors) == {"capacity", "idArea", "idFloor"}
    assert errors["idArea"] == ["El valor seleccionado para área no existe."]
