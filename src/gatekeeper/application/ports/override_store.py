"""User override store port."""

from collections.abc import Iterable
from typing import Protocol

from gatekeeper.domain.entities import UserPermissionOverride


class OverrideStore(Protocol):
    """Port for per-user grant/deny overrides."""

    async def grant(self, user_id: int, code: str, granted_by: int | None = None) -> None: ...

    async def deny(self, user_id: int, code: str, granted_by: int | None = None) -> None: ...

    async def revoke(self, user_id: int, code: str) -> bool: ...

    async def list_overrides(self, user_id: int) -> list[UserPermissionOverride]: ...

    async def overrides_for(self, user_id: int) -> frozenset[tuple[str, bool]]: ...

    async def replace_all(
        self, user_id: int, codes: Iterable[str], updated_by: int | None = None
    ) -> bool: ...
