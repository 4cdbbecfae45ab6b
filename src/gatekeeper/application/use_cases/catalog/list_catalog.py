"""Catalog and role default read use cases for administrative screens."""

import logging

from gatekeeper.application.ports import PermissionCatalog, RoleDefaults
from gatekeeper.domain.entities import PermissionDescriptor
from gatekeeper.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class ListCatalogUseCase:
    """List cataloged permissions, optionally for one category."""

    def __init__(self, catalog: PermissionCatalog) -> None:
        self._catalog = catalog

    def execute(self, category: str | None = None) -> list[PermissionDescriptor]:
        items = self._catalog.list_all()
        if category:
            wanted = category.strip().lower()
            items = [d for d in items if d.category.lower() == wanted]
        return items


class GetRoleDefaultsUseCase:
    """Default codes of a named role."""

    def __init__(self, role_defaults: RoleDefaults) -> None:
        self._role_defaults = role_defaults

    def roles(self) -> list[str]:
        return self._role_defaults.roles()

    def execute(self, role: str) -> list[str]:
        """Sorted default codes. Raises NotFound for a role with no preset."""
        if not self._role_defaults.is_known(role):
            logger.warning("Role defaults requested for unknown role %r", role)
            raise NotFound("Role", role)
        return sorted(self._role_defaults.defaults_for(role))
