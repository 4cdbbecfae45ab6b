"""Access checker - cached decision primitive over the permission resolver."""

import logging
from collections.abc import Iterable

from gatekeeper.domain.exceptions import InvalidOverrideInput, PersistenceFailure
from gatekeeper.domain.value_objects import AccessDecision
from gatekeeper.infrastructure.permission.override_store import validate_user_id
from gatekeeper.infrastructure.permission.permission_cache import EffectivePermissionCache
from gatekeeper.infrastructure.permission.resolver import PermissionResolver
from gatekeeper.infrastructure.permission.role_defaults import normalize_role

logger = logging.getLogger(__name__)


def _valid_code(code: object) -> bool:
    return isinstance(code, str) and bool(code.strip())


class GatekeeperAccessChecker:
    """Answers access questions for (user_id, role).

    Checks fail closed: invalid input, or storage that cannot be read,
    yields "no access". Storage errors are never turned into an allow.
    """

    def __init__(
        self,
        resolver: PermissionResolver,
        cache: EffectivePermissionCache | None = None,
    ) -> None:
        self._resolver = resolver
        self._cache = cache

    async def get_effective_permissions(self, user_id: int, role: str | None) -> frozenset[str]:
        """Effective set for user_id under role. Propagates PersistenceFailure."""
        user_id = validate_user_id(user_id)
        role_key = normalize_role(role)
        if self._cache is None:
            return await self._resolver.resolve(user_id, role_key)

        cached = self._cache.get(user_id, role_key)
        if cached is not None:
            logger.debug("Permission cache hit for user %s role %r", user_id, role_key)
            return cached
        token = self._cache.generation()
        effective = await self._resolver.resolve(user_id, role_key)
        self._cache.set(user_id, role_key, effective, generation=token)
        return effective

    async def has_permission(self, user_id: int, role: str | None, code: str) -> bool:
        return (await self.require_permission(user_id, role, code)).allowed

    async def has_any_permission(self, user_id: int, role: str | None, codes: Iterable[str]) -> bool:
        """True if at least one of codes is effective. Empty codes is False."""
        wanted = [c.strip() for c in codes if _valid_code(c)]
        if not wanted:
            logger.warning("No valid permissions given for has_any_permission (user %s)", user_id)
            return False
        effective = await self._safe_effective(user_id, role, ", ".join(wanted))
        if effective is None:
            return False
        return any(c in effective for c in wanted)

    async def has_all_permissions(self, user_id: int, role: str | None, codes: Iterable[str]) -> bool:
        """True if every code is effective. Empty codes is False."""
        wanted = list(codes)
        if not wanted or not all(_valid_code(c) for c in wanted):
            logger.warning("No valid permissions given for has_all_permissions (user %s)", user_id)
            return False
        effective = await self._safe_effective(user_id, role, ", ".join(wanted))
        if effective is None:
            return False
        return all(c.strip() in effective for c in wanted)

    async def require_permission(self, user_id: int, role: str | None, code: str) -> AccessDecision:
        if not _valid_code(code):
            logger.warning("Invalid permission code in check for user %s: %r", user_id, code)
            return AccessDecision.deny(str(code), "invalid permission code")
        code = code.strip()
        try:
            effective = await self.get_effective_permissions(user_id, role)
        except InvalidOverrideInput as e:
            logger.warning("Invalid user id in permission check: %r", user_id)
            return AccessDecision.deny(code, str(e))
        except PersistenceFailure as e:
            logger.exception("Permission check for user %s on %s could not read storage", user_id, code)
            return AccessDecision.undetermined(code, str(e))
        if code in effective:
            return AccessDecision.allow(code)
        return AccessDecision.deny(code, f"requires {code}")

    def invalidate(self, user_id: int) -> None:
        if self._cache is not None:
            self._cache.invalidate_user(user_id)

    async def _safe_effective(self, user_id: int, role: str | None, what: str) -> frozenset[str] | None:
        try:
            return await self.get_effective_permissions(user_id, role)
        except InvalidOverrideInput:
            logger.warning("Invalid user id in permission check: %r", user_id)
            return None
        except PersistenceFailure:
            logger.exception("Permission check for user %s on [%s] could not read storage", user_id, what)
            return None
