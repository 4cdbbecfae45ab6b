"""Pytest fixtures for Gatekeeper tests."""

from __future__ import annotations

from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime

import pytest

from gatekeeper.domain.entities import PermissionDescriptor, UserPermissionOverride
from gatekeeper.domain.exceptions import PersistenceFailure
from gatekeeper.domain.permissions import DEFAULT_PERMISSION_DESCRIPTORS
from gatekeeper.infrastructure.permission import (
    EffectivePermissionCache,
    GatekeeperAccessChecker,
    PermissionCatalog,
    PermissionResolver,
    RoleDefaultTable,
    UserOverrideStore,
)


# --- Fake repositories ---


class FakePermissionRepository:
    """In-memory permission descriptor repository."""

    def __init__(self) -> None:
        self._by_code: dict[str, PermissionDescriptor] = {}

    async def list_all(self) -> list[PermissionDescriptor]:
        return sorted(self._by_code.values(), key=lambda d: (d.category, d.code))

    async def upsert_many(self, descriptors: Sequence[PermissionDescriptor]) -> int:
        written = 0
        for d in descriptors:
            if self._by_code.get(d.code) != d:
                self._by_code[d.code] = d
                written += 1
        return written


class FakeUserPermissionRepository:
    """In-memory override repository keyed by (user_id, permission_code)."""

    def __init__(self) -> None:
        self._rows: dict[tuple[int, str], UserPermissionOverride] = {}
        self.upserts = 0
        self.deletes = 0

    async def list_for_user(self, user_id: int) -> list[UserPermissionOverride]:
        rows = [o for (uid, _), o in self._rows.items() if uid == user_id]
        return sorted((replace(o) for o in rows), key=lambda o: o.permission_code)

    async def upsert(self, override: UserPermissionOverride) -> None:
        self.upserts += 1
        self._rows[(override.user_id, override.permission_code)] = replace(override)

    async def delete(self, user_id: int, permission_code: str) -> bool:
        self.deletes += 1
        return self._rows.pop((user_id, permission_code), None) is not None

    def add(self, user_id: int, code: str, is_denied: bool = False) -> None:
        """Helper to add an override row for tests."""
        self._rows[(user_id, code)] = UserPermissionOverride(
            user_id=user_id,
            permission_code=code,
            is_denied=is_denied,
            granted_at=datetime(2026, 1, 1, tzinfo=UTC),
        )


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.permissions = FakePermissionRepository()
        self.user_permissions = FakeUserPermissionRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


class ManualClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Shared in-memory UnitOfWork; state survives across factory calls."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow):
    """Factory returning async context manager that yields fake_uow."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield fake_uow

    return _factory


@pytest.fixture
def failing_uow_factory():
    """Factory whose storage is unreachable."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        raise PersistenceFailure("Permission storage unavailable: connection refused")
        yield  # pragma: no cover

    return _factory


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def cache(clock) -> EffectivePermissionCache:
    return EffectivePermissionCache(ttl_seconds=300, max_size=100, clock=clock)


@pytest.fixture
def catalog() -> PermissionCatalog:
    return PermissionCatalog(DEFAULT_PERMISSION_DESCRIPTORS)


@pytest.fixture
def role_defaults() -> RoleDefaultTable:
    return RoleDefaultTable()


@pytest.fixture
def override_store(uow_factory, cache) -> UserOverrideStore:
    return UserOverrideStore(uow_factory, cache=cache)


@pytest.fixture
def access_checker(role_defaults, override_store, cache) -> GatekeeperAccessChecker:
    resolver = PermissionResolver(role_defaults, override_store)
    return GatekeeperAccessChecker(resolver, cache=cache)
