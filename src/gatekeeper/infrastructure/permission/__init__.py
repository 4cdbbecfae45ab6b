"""Permission engine: catalog, role presets, overrides, resolution, checks."""

from gatekeeper.infrastructure.permission.catalog import (
    PermissionCatalog,
    build_fallback_descriptor,
)
from gatekeeper.infrastructure.permission.override_store import UserOverrideStore
from gatekeeper.infrastructure.permission.permission_cache import EffectivePermissionCache
from gatekeeper.infrastructure.permission.permission_checker import GatekeeperAccessChecker
from gatekeeper.infrastructure.permission.resolver import PermissionResolver, compute_effective
from gatekeeper.infrastructure.permission.role_defaults import RoleDefaultTable

__all__ = [
    "EffectivePermissionCache",
    "GatekeeperAccessChecker",
    "PermissionCatalog",
    "PermissionResolver",
    "RoleDefaultTable",
    "UserOverrideStore",
    "build_fallback_descriptor",
    "compute_effective",
]
