# tests/domains/test_inv.py

"""
'inv' 도메인 (창고, 카테고리, 프레젠테이션, 상품, 자재) API 통합 테스트.
"""

from decimal import Decimal

import pytest
from httpx import AsyncClient

INV_URL = "/api/v1/inv"


async def create(client: AsyncClient, path: str, payload: dict) -> dict:
    response = await client.post(f"{INV_URL}/{path}", json=payload)
    assert response.status_code == 201, response.text
    return response.json()[path]


@pytest.mark.asyncio
async def test_catalog_entities_with_description(admin_client: AsyncClient):
    for path in ("warehouses", "categories", "presentations"):
        entity = await create(admin_client, path, {"name": f"Nuevo {path}", "description": "  Prueba  "})
        assert entity["name"] == f"nuevo {path}"
        assert entity["description"] == "Prueba"


@pytest.mark.asyncio
async def test_create_product(admin_client: AsyncClient):
    category = await create(admin_client, "categories", {"name": "Bebidas"})
    warehouse = await create(admin_client, "warehouses", {"name": "Almacén Central"})
    presentation = await create(admin_client, "presentations", {"name": "Botella"})

    product = await create(
        admin_client,
        "products",
        {
            "name": "Inca Kola 500ml",
            "price": "3.50",
            "quantity": 48,
            "idCategory": category["id"],
            "idWarehouse": warehouse["id"],
            "idPresentation": presentation["id"],
        },
    )
    assert product["name"] == "inca kola 500ml"
    assert Decimal(product["price"]) == Decimal("3.50")
    assert product["idCategory"] == category["id"]
    assert product["idWarehouse"] == warehouse["id"]
    assert product["idPresentation"] == presentation["id"]


@pytest.mark.asyncio
async def test_product_optional_presentation(admin_client: AsyncClient):
    category = await create(admin_client, "categories", {"name": "Snacks"})
    warehouse = await create(admin_client, "warehouses", {"name": "Barra"})

    product = await create(
        admin_client,
        "products",
        {"name": "Papas", "price": 2, "idCategory": category["id"], "idWarehouse": warehouse["id"]},
    )
    assert product["idPresentation"] is None
    assert product["quantity"] == 0


@pytest.mark.asyncio
async def test_product_unknown_references(admin_client: AsyncClient):
    response = await admin_client.post(
        f"{INV_URL}/products",
        json={"name": "Agua", "price": 1, "idCategory": 50, "idWarehouse": 51, "idPresentation": 52},
    )
    assert response.status_code == 422
    assert set(response.json()["errors"]) == {"idCategory", "idWarehouse", "idPresentation"}


@pytest.mark.asyncio
async def test_create_input_with_supplier(admin_client: AsyncClient):
    warehouse = await create(admin_client, "warehouses", {"name": "Cocina"})
    response = await admin_client.post(
        "/api/v1/ven/suppliers", json={"name": "Distribuidora Lima", "ruc": "20123456789"}
    )
    supplier = response.json()["suppliers"]

    item = await create(
        admin_client,
        "inputs",
        {
            "name": "Limón",
            "price": "0.30",
            "quantity": 200,
            "unit": "kg",
            "idWarehouse": warehouse["id"],
            "idSupplier": supplier["id"],
        },
    )
    assert item["name"] == "limón"
    assert item["unit"] == "kg"
    assert item["idSupplier"] == supplier["id"]


@pytest.mark.asyncio
async def test_category_name_unique_case_insensitive(admin_client: AsyncClient):
    await create(admin_client, "categories", {"name": "Postres"})
    response = await admin_client.post(f"{INV_URL}/categories", json={"name": " POSTRES "})
    assert response.status_code == 422
    assert list(response.json()["errors"]) == ["name"]
