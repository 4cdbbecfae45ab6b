"""User override store - per-user grant/deny rows on top of role presets."""

import logging
from collections.abc import Callable, Iterable
from datetime import UTC, datetime

from gatekeeper.domain.entities import UserPermissionOverride
from gatekeeper.domain.exceptions import InvalidOverrideInput
from gatekeeper.domain.value_objects.permission_code import MAX_CODE_LENGTH, normalize_code
from gatekeeper.infrastructure.permission.permission_cache import EffectivePermissionCache

logger = logging.getLogger(__name__)


def validate_user_id(user_id: object) -> int:
    """Return user_id if it is a positive integer, else raise InvalidOverrideInput."""
    if isinstance(user_id, bool) or not isinstance(user_id, int) or user_id <= 0:
        raise InvalidOverrideInput(f"Invalid user id: {user_id!r} (must be a positive integer)")
    return user_id


def validate_code(code: object) -> str:
    """Return the normalized code, or raise InvalidOverrideInput if empty."""
    if not isinstance(code, str) or not normalize_code(code):
        raise InvalidOverrideInput("Permission code must be a non-empty string")
    code = normalize_code(code)
    if len(code) > MAX_CODE_LENGTH:
        raise InvalidOverrideInput(f"Permission code longer than {MAX_CODE_LENGTH} characters")
    return code


class UserOverrideStore:
    """Writes and reads override rows through the unit of work.

    Every mutation drops the affected user's cached effective sets before
    returning, so the caller's next check sees the change.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        cache: EffectivePermissionCache | None = None,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._cache = cache
        self._clock = clock

    async def grant(self, user_id: int, code: str, granted_by: int | None = None) -> None:
        """Upsert an override with is_denied=False."""
        await self._set(user_id, code, is_denied=False, actor=granted_by)

    async def deny(self, user_id: int, code: str, granted_by: int | None = None) -> None:
        """Upsert an override with is_denied=True."""
        await self._set(user_id, code, is_denied=True, actor=granted_by)

    async def revoke(self, user_id: int, code: str) -> bool:
        """Delete the override row. Returns whether one existed."""
        user_id = validate_user_id(user_id)
        code = validate_code(code)
        try:
            async with self._uow_factory() as uow:
                existed = await uow.user_permissions.delete(user_id, code)
        finally:
            self._invalidate(user_id)
        if existed:
            logger.info("Revoked override %s for user %s", code, user_id)
        return existed

    async def list_overrides(self, user_id: int) -> list[UserPermissionOverride]:
        user_id = validate_user_id(user_id)
        async with self._uow_factory() as uow:
            return await uow.user_permissions.list_for_user(user_id)

    async def overrides_for(self, user_id: int) -> frozenset[tuple[str, bool]]:
        """Set of (code, is_denied) pairs for user_id."""
        overrides = await self.list_overrides(user_id)
        return frozenset((o.permission_code, o.is_denied) for o in overrides)

    async def replace_all(
        self,
        user_id: int,
        codes: Iterable[str],
        updated_by: int | None = None,
    ) -> bool:
        """Make the user's grant overrides exactly ``codes``.

        Only the difference is written: missing grants are upserted (turning
        a deny on the same code into a grant), grants outside ``codes`` are
        deleted. Denials for codes outside ``codes`` are left alone.
        """
        user_id = validate_user_id(user_id)
        if isinstance(codes, str):
            raise InvalidOverrideInput("codes must be a collection of permission codes")
        desired = {validate_code(c) for c in codes}
        now = self._clock()
        try:
            async with self._uow_factory() as uow:
                current = await uow.user_permissions.list_for_user(user_id)
                granted = {o.permission_code for o in current if not o.is_denied}
                to_grant = desired - granted
                to_revoke = granted - desired
                for code in sorted(to_grant):
                    await uow.user_permissions.upsert(
                        UserPermissionOverride(
                            user_id=user_id,
                            permission_code=code,
                            is_denied=False,
                            granted_at=now,
                            granted_by=updated_by,
                        )
                    )
                for code in sorted(to_revoke):
                    await uow.user_permissions.delete(user_id, code)
        finally:
            self._invalidate(user_id)
        logger.info(
            "Replaced grants for user %s by %s: %d granted, %d revoked",
            user_id,
            updated_by,
            len(to_grant),
            len(to_revoke),
        )
        return True

    async def _set(self, user_id: int, code: str, *, is_denied: bool, actor: int | None) -> None:
        user_id = validate_user_id(user_id)
        code = validate_code(code)
        override = UserPermissionOverride(
            user_id=user_id,
            permission_code=code,
            is_denied=is_denied,
            granted_at=self._clock(),
            granted_by=actor,
        )
        try:
            async with self._uow_factory() as uow:
                await uow.user_permissions.upsert(override)
        finally:
            self._invalidate(user_id)
        logger.info(
            "%s %s for user %s by %s",
            "Denied" if is_denied else "Granted",
            code,
            user_id,
            actor,
        )

    def _invalidate(self, user_id: int) -> None:
        if self._cache is not None:
            self._cache.invalidate_user(user_id)
