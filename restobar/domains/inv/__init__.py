# restobar/domains/inv/__init__.py

"""
'inv' 도메인 패키지입니다.

창고, 카테고리, 프레젠테이션 같은 기준 정보와 판매 상품, 자재(입력재)의 재고를 관리합니다.
카테고리는 'menu' 도메인의 요리에서도 참조합니다.
"""

__title__ = "RestoBar Inventory Domain"
__version__ = "0.1.0"
__all__ = []
