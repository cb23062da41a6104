# restobar/domains/loc/__init__.py

"""
'loc' 도메인 패키지입니다. 매장 공간(층, 구역, 테이블)을 관리합니다.
"""

__title__ = "RestoBar Location Domain"
__version__ = "0.1.0"
__all__ = []
