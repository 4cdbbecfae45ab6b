"""Update user permissions use case - replace a user's grant overrides."""

import logging
from collections.abc import Iterable

from gatekeeper.application.ports import AccessChecker, OverrideStore, PermissionCatalog
from gatekeeper.application.use_cases.permission._authorization import ensure_can_manage
from gatekeeper.domain.exceptions import InvalidOverrideInput
from gatekeeper.domain.value_objects import Principal
from gatekeeper.domain.value_objects.permission_code import is_well_formed

logger = logging.getLogger(__name__)


class UpdateUserPermissionsUseCase:
    """Make a user's explicit grants exactly the given codes."""

    def __init__(
        self,
        override_store: OverrideStore,
        access_checker: AccessChecker,
        catalog: PermissionCatalog,
    ) -> None:
        self._store = override_store
        self._access_checker = access_checker
        self._catalog = catalog

    async def execute(
        self,
        actor: Principal,
        user_id: int,
        codes: Iterable[str],
    ) -> list[str]:
        """Replace grants for user; returns the sorted codes now granted."""
        await ensure_can_manage(self._access_checker, actor)

        if isinstance(codes, str):
            raise InvalidOverrideInput("codes must be a collection of permission codes")
        codes = list(codes)
        await self._store.replace_all(user_id, codes, updated_by=actor.user_id)

        granted = sorted({c.strip() for c in codes})
        malformed = [c for c in granted if not is_well_formed(c)]
        if malformed:
            logger.warning(
                "Permission update for user %s by %s names malformed codes: %s",
                user_id,
                actor.user_id,
                ", ".join(malformed),
            )
        uncataloged = [c for c in granted if self._catalog.lookup(c) is None]
        if uncataloged:
            logger.warning(
                "Permission update for user %s by %s names uncataloged codes: %s",
                user_id,
                actor.user_id,
                ", ".join(uncataloged),
            )
        return granted
