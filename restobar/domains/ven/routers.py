# restobar/domains/ven/routers.py

"""
'ven' 도메인 (공급업체 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
"""

from fastapi import APIRouter

from restobar.core.routing import build_resource_router
from . import resources as ven_resources

router = APIRouter()

for descriptor in ven_resources.RESOURCES:
    router.include_router(build_resource_router(descriptor))
