"""Domain value objects."""

from gatekeeper.domain.value_objects.access_decision import AccessDecision, DecisionOutcome
from gatekeeper.domain.value_objects.permission_action import (
    PermissionAction,
    PermissionCategory,
)
from gatekeeper.domain.value_objects.principal import Principal
from gatekeeper.domain.value_objects.system_permission import SystemPermission

__all__ = [
    "AccessDecision",
    "DecisionOutcome",
    "PermissionAction",
    "PermissionCategory",
    "Principal",
    "SystemPermission",
]
