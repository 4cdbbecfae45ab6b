"""Permission resolver - merges role defaults with user overrides."""

import logging
from collections.abc import Iterable

from gatekeeper.infrastructure.permission.override_store import UserOverrideStore
from gatekeeper.infrastructure.permission.role_defaults import RoleDefaultTable

logger = logging.getLogger(__name__)


def compute_effective(
    base: Iterable[str],
    overrides: Iterable[tuple[str, bool]],
) -> frozenset[str]:
    """(base | grants) - denies. The deny subtraction is applied last."""
    grants: set[str] = set()
    denies: set[str] = set()
    for code, is_denied in overrides:
        (denies if is_denied else grants).add(code)
    return frozenset((set(base) | grants) - denies)


class PermissionResolver:
    """Computes a user's effective permission set.

    Catalog membership is not consulted: uncataloged and malformed codes
    are ordinary members of the result.
    """

    def __init__(self, role_defaults: RoleDefaultTable, override_store: UserOverrideStore) -> None:
        self._role_defaults = role_defaults
        self._overrides = override_store

    async def resolve(self, user_id: int, role: str | None) -> frozenset[str]:
        base = self._role_defaults.defaults_for(role)
        overrides = await self._overrides.overrides_for(user_id)
        effective = compute_effective(base, overrides)
        logger.debug(
            "Resolved %d permission(s) for user %s (%d from role %r, %d override(s))",
            len(effective),
            user_id,
            len(base),
            role,
            len(overrides),
        )
        return effective
