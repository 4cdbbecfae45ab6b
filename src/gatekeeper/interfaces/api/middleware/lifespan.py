"""Lifespan middleware - opens the pool and seeds the catalog on startup."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool

from gatekeeper.application.use_cases.catalog.seed_permissions import (
    SeedDefaultPermissionsUseCase,
)

logger = logging.getLogger(__name__)


class PoolLifespanMiddleware:
    """Middleware that opens the connection pool on startup and closes on shutdown."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Open pool when ASGI server starts."""
        await self._pool.open()

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Close pool when ASGI server shuts down."""
        await self._pool.close()


class CatalogSeedMiddleware:
    """Runs catalog seeding once at startup. Must come after PoolLifespanMiddleware."""

    def __init__(self, seed_permissions: SeedDefaultPermissionsUseCase) -> None:
        self._seed = seed_permissions

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Seed permissions; a failure aborts startup."""
        try:
            await self._seed.execute()
        except Exception:
            logger.exception("Seeding default permissions failed")
            raise
