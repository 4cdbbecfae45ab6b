"""Application ports - interfaces for external adapters."""

from gatekeeper.application.ports.override_store import OverrideStore
from gatekeeper.application.ports.permission_catalog import PermissionCatalog
from gatekeeper.application.ports.permission_checker import AccessChecker
from gatekeeper.application.ports.role_defaults import RoleDefaults
from gatekeeper.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "AccessChecker",
    "OverrideStore",
    "PermissionCatalog",
    "RoleDefaults",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
