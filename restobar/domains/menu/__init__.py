# restobar/domains/menu/__init__.py

"""
'menu' 도메인 패키지입니다. 판매 요리(dishes)를 관리합니다.
"""

__title__ = "RestoBar Menu Domain"
__version__ = "0.1.0"
__all__ = []
