# restobar/domains/loc/routers.py

"""
'loc' 도메인 (층, 구역, 테이블)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
"""

from fastapi import APIRouter

from restobar.core.routing import build_resource_router
from . import resources as loc_resources

router = APIRouter()

for descriptor in loc_resources.RESOURCES:
    router.include_router(build_resource_router(descriptor))
