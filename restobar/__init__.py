# restobar/__init__.py

"""
RestoBar FastAPI 애플리케이션의 메인 패키지입니다.

레스토랑 백오피스(구역, 층, 테이블, 창고, 카테고리, 상품, 자재, 요리,
공급업체, 고객, 직원, 사용자/역할)를 관리하는 API를 제공합니다.

- `core`: 설정, 데이터베이스, 보안, 권한 게이트, 검증, 필터 파이프라인,
          공통 리소스 컨트롤러 등 모든 도메인이 공유하는 구성 요소.
- `domains`: 각 비즈니스 도메인(loc, inv, menu, ven, crm, hr, usr)의
             모델, 스키마, 리소스 정의 및 라우터.
"""

APP_NAME = "RestoBar API"
APP_VERSION = "0.1.0"
API_PREFIX = "/api/v1"  # API 라우트의 공통 접두사 (main.py에서 적용)

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Restaurant back-office API backend."
__license__ = "MIT"
__all__ = []
