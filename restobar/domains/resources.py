# restobar/domains/resources.py

"""
모든 도메인의 리소스 정의를 모아 둔 레지스트리입니다.

- RESOURCES_BY_DOMAIN: 도메인 코드별 리소스 묶음.
- seed는 ALL_RESOURCES의 권한 접두사로 권한 목록을 만듭니다.
"""

from restobar.core.gate import PERMISSION_ACTIONS
from restobar.domains.crm import resources as crm_resources
from restobar.domains.hr import resources as hr_resources
from restobar.domains.inv import resources as inv_resources
from restobar.domains.loc import resources as loc_resources
from restobar.domains.menu import resources as menu_resources
from restobar.domains.usr import resources as usr_resources
from restobar.domains.ven import resources as ven_resources

RESOURCES_BY_DOMAIN = {
    "loc": loc_resources.RESOURCES,
    "inv": inv_resources.RESOURCES,
    "menu": menu_resources.RESOURCES,
    "ven": ven_resources.RESOURCES,
    "crm": crm_resources.RESOURCES,
    "hr": hr_resources.RESOURCES,
    "usr": usr_resources.RESOURCES,
}

ALL_RESOURCES = tuple(descriptor for group in RESOURCES_BY_DOMAIN.values() for descriptor in group)


def all_permission_names() -> list:
    """모든 리소스 x 동작 조합의 권한 이름 목록 (예: "areas:view")."""
    prefixes = dict.fromkeys(descriptor.permission_prefix for descriptor in ALL_RESOURCES)
    return [f"{prefix}:{action}" for prefix in prefixes for action in PERMISSION_ACTIONS]
