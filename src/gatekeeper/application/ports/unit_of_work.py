"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from gatekeeper.application.ports.repositories.permission_repository import (
    PermissionRepository,
)
from gatekeeper.application.ports.repositories.user_permission_repository import (
    UserPermissionRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def permissions(self) -> PermissionRepository: ...

    @property
    def user_permissions(self) -> UserPermissionRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
