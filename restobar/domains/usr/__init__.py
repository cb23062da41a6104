# restobar/domains/usr/__init__.py

"""
'usr' 도메인 패키지입니다.

시스템 사용자, 역할, 권한 및 인증(JWT 발급, 현재 사용자, 비밀번호 변경)을 다룹니다.

주요 서브모듈:
- `models.py`: users, roles, permissions 및 연결 테이블 SQLModel 정의.
- `schemas.py`: 요청/응답 스키마 (인증 토큰 포함).
- `crud.py`: 비밀번호 해싱, 역할/권한 할당, 인증, 유효 권한 조회.
- `resources.py`: 사용자/역할 리소스 정의와 인스턴스 정책.
- `routers.py`: 인증 엔드포인트와 사용자/역할/권한 API.
"""

__title__ = "RestoBar User Domain"
__description__ = "Manages users, roles and permissions, and handles authentication."
__version__ = "0.1.0"
__all__ = []
