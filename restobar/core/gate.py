# restobar/core/gate.py

"""
역할/권한 기반 권한 게이트 모듈입니다.

권한 이름은 "<리소스>:<동작>" 형식입니다 (예: "areas:view", "dishes:create").
엔티티 유형 x 연산 조합마다 정확히 하나의 권한이 대응합니다.
viewAny(목록)와 view(단건)는 모두 "view" 동작을 사용합니다.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, FrozenSet, Optional, Protocol, Tuple

from restobar.core.exceptions import AuthorizationDenied

logger = logging.getLogger(__name__)


class Ability(str, Enum):
    VIEW_ANY = "viewAny"
    VIEW = "view"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


ABILITY_ACTIONS = {
    Ability.VIEW_ANY: "view",
    Ability.VIEW: "view",
    Ability.CREATE: "create",
    Ability.UPDATE: "update",
    Ability.DELETE: "delete",
}

PERMISSION_ACTIONS: Tuple[str, ...] = ("view", "create", "update", "delete")


@dataclass(frozen=True)
class Actor:
    """권한 게이트가 판단에 사용하는 요청 주체입니다. 세션 정보는 담지 않습니다."""
    id: int
    email: str
    permissions: FrozenSet[str] = field(default_factory=frozenset)

    def has_permission(self, permission: str) -> bool:
        return permission in self.permissions


@dataclass(frozen=True)
class RequestContext:
    """
    컨트롤러에 명시적으로 전달되는 요청 단위 컨텍스트입니다.
    현재 주체와 응답 메시지 로케일을 담습니다.
    """
    actor: Actor
    locale: str


# 인스턴스 정책: (actor, ability, target) -> 허용 여부
InstancePolicy = Callable[[Actor, Ability, Any], bool]


class GatedResource(Protocol):
    permission_prefix: str
    policy: Optional[InstancePolicy]


def permission_name(prefix: str, ability: Ability) -> str:
    return f"{prefix}:{ABILITY_ACTIONS[ability]}"


class PermissionGate:
    """
    (actor, ability, target?) -> bool 판단을 내리는 게이트입니다.
    거부 시 AuthorizationDenied를 발생시켜 이후 단계(검증, 저장소 접근)를 중단시킵니다.
    """

    def allows(self, actor: Actor, ability: Ability, resource: GatedResource) -> bool:
        """대상 인스턴스와 무관한 권한 보유 여부입니다."""
        return actor.has_permission(permission_name(resource.permission_prefix, ability))

    def can(self, actor: Actor, ability: Ability, resource: GatedResource, target: Any = None) -> bool:
        if not self.allows(actor, ability, resource):
            return False
        if target is not None and resource.policy is not None:
            return resource.policy(actor, ability, target)
        return True

    def authorize(
        self,
        actor: Actor,
        ability: Ability,
        resource: GatedResource,
        target: Any = None,
        *,
        locale: str,
    ) -> None:
        if not self.can(actor, ability, resource, target):
            raise AuthorizationDenied(locale, ability=ability.value, resource=resource.permission_prefix)


gate = PermissionGate()
