"""Get user permissions use case."""

from gatekeeper.application.dto.user_permissions_dto import UserPermissionsView
from gatekeeper.application.ports import (
    AccessChecker,
    OverrideStore,
    PermissionCatalog,
    RoleDefaults,
)
from gatekeeper.application.use_cases.permission._authorization import ensure_can_view_user
from gatekeeper.domain.value_objects import Principal


class GetUserPermissionsUseCase:
    """Effective permissions of a user for display."""

    def __init__(
        self,
        access_checker: AccessChecker,
        override_store: OverrideStore,
        catalog: PermissionCatalog,
        role_defaults: RoleDefaults,
    ) -> None:
        self._access_checker = access_checker
        self._store = override_store
        self._catalog = catalog
        self._role_defaults = role_defaults

    async def execute(self, actor: Principal, user_id: int, role: str) -> UserPermissionsView:
        """Users may always view their own permissions; others need users.view."""
        await ensure_can_view_user(self._access_checker, actor, user_id)

        effective = sorted(await self._access_checker.get_effective_permissions(user_id, role))
        overrides = await self._store.list_overrides(user_id)
        return UserPermissionsView(
            user_id=user_id,
            role=role,
            effective=effective,
            role_defaults=sorted(self._role_defaults.defaults_for(role)),
            overrides=overrides,
            descriptors=self._catalog.describe_many(effective),
        )
