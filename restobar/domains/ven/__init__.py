# restobar/domains/ven/__init__.py

"""
'ven' 도메인 패키지입니다. 자재를 공급하는 공급업체(suppliers)를 관리합니다.
"""

__title__ = "RestoBar Vendor Domain"
__version__ = "0.1.0"
__all__ = []
