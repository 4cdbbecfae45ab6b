"""User permission override repository port."""

from typing import Protocol

from gatekeeper.domain.entities import UserPermissionOverride


class UserPermissionRepository(Protocol):
    """Port for override persistence, unique per (user_id, permission_code)."""

    async def list_for_user(self, user_id: int) -> list[UserPermissionOverride]: ...

    async def upsert(self, override: UserPermissionOverride) -> None: ...

    async def delete(self, user_id: int, permission_code: str) -> bool: ...
