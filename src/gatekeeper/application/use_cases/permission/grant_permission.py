"""Grant or deny permission use case."""

from gatekeeper.application.ports import AccessChecker, OverrideStore
from gatekeeper.application.use_cases.permission._authorization import ensure_can_manage
from gatekeeper.domain.exceptions import ValidationError
from gatekeeper.domain.value_objects import Principal, SystemPermission


class GrantPermissionUseCase:
    """Set an explicit grant or deny override for a user."""

    def __init__(
        self,
        override_store: OverrideStore,
        access_checker: AccessChecker,
    ) -> None:
        self._store = override_store
        self._access_checker = access_checker

    async def execute(
        self,
        actor: Principal,
        user_id: int,
        code: str,
        denied: bool = False,
    ) -> None:
        """Upsert override. Actor must have permissions.manage."""
        await ensure_can_manage(self._access_checker, actor)

        if (
            denied
            and user_id == actor.user_id
            and isinstance(code, str)
            and code.strip() == SystemPermission.PERMISSIONS_MANAGE
        ):
            raise ValidationError("Cannot deny permissions.manage to yourself")

        if denied:
            await self._store.deny(user_id, code, granted_by=actor.user_id)
        else:
            await self._store.grant(user_id, code, granted_by=actor.user_id)
