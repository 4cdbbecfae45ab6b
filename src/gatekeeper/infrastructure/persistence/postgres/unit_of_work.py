"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import psycopg
from psycopg_pool import AsyncConnectionPool

from gatekeeper.domain.exceptions import PersistenceFailure
from gatekeeper.infrastructure.persistence.postgres.permission_repository import (
    PostgresPermissionRepository,
)
from gatekeeper.infrastructure.persistence.postgres.user_permission_repository import (
    PostgresUserPermissionRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._permissions = PostgresPermissionRepository(self._conn)
        self._user_permissions = PostgresUserPermissionRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def permissions(self) -> PostgresPermissionRepository:
        return self._permissions

    @property
    def user_permissions(self) -> PostgresUserPermissionRepository:
        return self._user_permissions

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager).

    Driver and pool errors leave the factory as PersistenceFailure with the
    original exception chained.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        try:
            uow = PostgresUnitOfWork(pool)
            async with uow:
                try:
                    yield uow
                    await uow.commit()
                except BaseException:
                    await uow.rollback()
                    raise
        except psycopg.Error as e:
            raise PersistenceFailure(f"Permission storage unavailable: {e}") from e

    return factory
