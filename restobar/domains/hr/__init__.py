# restobar/domains/hr/__init__.py

"""
'hr' 도메인 패키지입니다. 직원 유형(employee_types)과 직원(employees)을 관리합니다.
"""

__title__ = "RestoBar Staff Domain"
__version__ = "0.1.0"
__all__ = []
