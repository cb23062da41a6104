# restobar/domains/crm/__init__.py

"""
'crm' 도메인 패키지입니다. 고객 유형(client_types)과 고객(customers)을 관리합니다.
"""

__title__ = "RestoBar Customer Domain"
__version__ = "0.1.0"
__all__ = []
