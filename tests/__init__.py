# tests/__init__.py

"""
RestoBar API 테스트 스위트 패키지입니다.

- `core/`: 권한 게이트, 검증, 필터 파이프라인, 페이지네이션, 메시지, 리소스 컨트롤러 단위 테스트.
- `domains/`: 각 비즈니스 도메인(loc, inv, menu, ven, crm, hr, usr)의 API 통합 테스트와 seed 테스트.
- `conftest.py`: 테스트마다 새로 만드는 인메모리 SQLite DB, 역할별 로그인 클라이언트 픽스처.
"""

__title__ = "RestoBar API Tests"
__description__ = "Test suite for the RestoBar FastAPI application."
__version__ = "0.1.0"
__all__ = []
