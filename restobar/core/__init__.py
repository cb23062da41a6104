# restobar/core/__init__.py

"""
FastAPI 애플리케이션의 핵심 구성 요소 패키지입니다.

- `config.py`: 애플리케이션 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: 비동기 엔진 및 세션 관리 (SQLModel + AsyncSQLAlchemy).
- `crud_base.py`: 저장소 경계. 쿼리, 페이지네이션, 생성/수정/삭제.
- `security.py`: 비밀번호 해싱, JWT 발급/검증, 현재 사용자 획득.
- `gate.py`: 역할/권한 기반 권한 게이트.
- `validation.py`: 요청 스키마 기반 검증 및 정규화.
- `pipeline.py`: 목록 조회용 필터 파이프라인 (이름, 상태).
- `resource.py`: 모든 엔티티가 공유하는 리소스 컨트롤러.
- `routing.py`: 리소스 정의로부터 APIRouter를 생성하는 팩토리.
"""

__title__ = "RestoBar Core"
__version__ = "0.1.0"
__all__ = []
