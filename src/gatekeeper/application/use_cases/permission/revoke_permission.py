"""Revoke permission override use case."""

from gatekeeper.application.ports import AccessChecker, OverrideStore
from gatekeeper.application.use_cases.permission._authorization import ensure_can_manage
from gatekeeper.domain.exceptions import NotFound
from gatekeeper.domain.value_objects import Principal


class RevokePermissionUseCase:
    """Remove a user's override so the role default applies again."""

    def __init__(
        self,
        override_store: OverrideStore,
        access_checker: AccessChecker,
    ) -> None:
        self._store = override_store
        self._access_checker = access_checker

    async def execute(self, actor: Principal, user_id: int, code: str) -> None:
        """Revoke override for user. Actor must have permissions.manage."""
        await ensure_can_manage(self._access_checker, actor)

        existed = await self._store.revoke(user_id, code)
        if not existed:
            raise NotFound("Permission override", f"{user_id}/{code}")
