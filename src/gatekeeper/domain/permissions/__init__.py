"""Compiled-in permission catalog and role presets."""

from gatekeeper.domain.permissions.role_presets import BOOTSTRAP_ROLE, ROLE_PRESETS
from gatekeeper.domain.permissions.system_permission_map import DEFAULT_PERMISSION_DESCRIPTORS

__all__ = [
    "BOOTSTRAP_ROLE",
    "DEFAULT_PERMISSION_DESCRIPTORS",
    "ROLE_PRESETS",
]
