# restobar/domains/__init__.py

"""
비즈니스 도메인 패키지입니다.

- `loc`: 층, 구역, 테이블
- `inv`: 창고, 카테고리, 프레젠테이션, 상품, 자재(입력재)
- `menu`: 요리
- `ven`: 공급업체
- `crm`: 고객 유형, 고객
- `hr`: 직원 유형, 직원
- `usr`: 사용자, 역할, 권한, 인증
- `shared`: 도메인 공통 모델/스키마 기반 클래스
"""

__all__ = []
