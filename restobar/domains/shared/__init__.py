# restobar/domains/shared/__init__.py

"""
여러 도메인이 공통으로 사용하는 모델/스키마 기반 클래스 패키지입니다.

- `models.py`: id, name, state, 생성/수정 일시를 가진 카탈로그 엔티티 기반 클래스와
  대소문자 무시 고유 인덱스 헬퍼.
- `schemas.py`: 카탈로그 엔티티의 공통 요청/응답 스키마.
"""

__all__ = []
