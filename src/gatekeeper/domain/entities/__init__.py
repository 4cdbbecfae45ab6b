"""Domain entities."""

from gatekeeper.domain.entities.permission_descriptor import PermissionDescriptor
from gatekeeper.domain.entities.user_permission_override import UserPermissionOverride

__all__ = [
    "PermissionDescriptor",
    "UserPermissionOverride",
]
