# tests/core/test_validation.py

"""
요청 검증 모듈 단위 테스트: 정규화, 전체 오류 수집, 참조 무결성 검사.
"""

from decimal import Decimal

import pytest
from sqlmodel.ext.asyncio.session import AsyncSession

from restobar.core.exceptions import ValidationFailed
from restobar.core.validation import validate
from restobar.domains.inv.models import Category
from restobar.domains.loc.schemas import AreaWrite
from restobar.domains.menu.schemas import DishWrite


@pytest.mark.asyncio
async def test_name_is_trimmed_and_lowercased(db_session: AsyncSession):
    data = await validate(AreaWrite, {"name": "  Salón VIP  "}, db_session, "es")
    assert data == {"name": "salón vip", "state": True}


@pytest.mark.asyncio
async def test_blank_name_reports_required(db_session: AsyncSession):
    with pytest.raises(ValidationFailed) as excinfo:
        await validate(AreaWrite, {"name": "   "}, db_session, "es")
    assert excinfo.value.errors == {"name": ["El campo nombre es obligatorio."]}


@pytest.mark.asyncio
async def test_all_field_errors_are_collected(db_session: AsyncSession):
    """첫 번째 오류에서 멈추지 않고 위반된 모든 필드를 반환합니다."""
    with pytest.raises(ValidationFailed) as excinfo:
        await validate(
            DishWrite,
            {"name": "", "price": -1, "quantity": -5, "idCategory": 999},
            db_session,
            "en",
        )
    errors = excinfo.value.errors
    assert set(errors) == {"name", "price", "quantity", "idCategory"}
    assert errors["idCategory"] == ["The selected category is invalid."]


@pytest.mark.asyncio
async def test_existing_reference_passes(db_session: AsyncSession):
    category = Category(name="postres")
    db_session.add(category)
    await db_session.commit()
    await db_session.refresh(category)

    data = await validate(
        DishWrite,
        {"name": "Suspiro Limeño", "price": "12.50", "quantity": 3, "idCategory": category.id},
        db_session,
        "es",
    )
    assert data["name"] == "suspiro limeño"
    assert data["price"] == Decimal("12.50")
    assert data["category_id"] == category.id


@pytest.mark.asyncio
async def test_non_object_body_is_rejected(db_session: AsyncSession):
    with pytest.raises(ValidationFailed) as excinfo:
        await validate(AreaWrite, ["patio"], db_session, "es")
    assert list(excinfo.value.errors) == ["body"]


@pytest.mark.asyncio
async def test_too_long_name(db_session: AsyncSession):
    with pytest.raises(ValidationFailed) as excinfo:
        await validate(AreaWrite, {"name": "x" * 101}, db_session, "en")
    assert excinfo.value.errors["name"] == ["The name field must not be greater than 100 characters."]


@pytest.mark.asyncio
async def test_partial_returns_only_sent_fields(db_session: AsyncSession):
    """수정 요청에서 생략된 필드는 기본값으로 채워지지 않습니다."""
    data = await validate(AreaWrite, {"name": "Patio"}, db_session, "es", partial=True)
    assert data == {"name": "patio"}
