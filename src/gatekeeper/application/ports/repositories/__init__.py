"""Repository ports."""

from gatekeeper.application.ports.repositories.permission_repository import (
    PermissionRepository,
)
from gatekeeper.application.ports.repositories.user_permission_repository import (
    UserPermissionRepository,
)

__all__ = [
    "PermissionRepository",
    "UserPermissionRepository",
]
