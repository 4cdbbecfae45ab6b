"""Unit tests for the user override store."""

from datetime import UTC, datetime

import pytest

from gatekeeper.domain.exceptions import InvalidOverrideInput, PersistenceFailure
from gatekeeper.infrastructure.permission import UserOverrideStore


@pytest.mark.asyncio
async def test_grant_creates_override(override_store, fake_uow) -> None:
    await override_store.grant(7, "customers.export", granted_by=1)
    rows = await fake_uow.user_permissions.list_for_user(7)
    assert len(rows) == 1
    assert rows[0].permission_code == "customers.export"
    assert rows[0].is_denied is False
    assert rows[0].granted_by == 1


@pytest.mark.asyncio
async def test_grant_then_deny_keeps_single_row(override_store) -> None:
    await override_store.grant(7, "users.view")
    await override_store.deny(7, "users.view")
    assert await override_store.overrides_for(7) == frozenset({("users.view", True)})


@pytest.mark.asyncio
async def test_deny_then_grant_flips_back(override_store) -> None:
    await override_store.deny(7, "users.view")
    await override_store.grant(7, "users.view")
    assert await override_store.overrides_for(7) == frozenset({("users.view", False)})


@pytest.mark.asyncio
async def test_codes_are_stripped(override_store) -> None:
    await override_store.grant(7, "  users.view  ")
    assert await override_store.overrides_for(7) == frozenset({("users.view", False)})


@pytest.mark.asyncio
async def test_revoke_reports_whether_row_existed(override_store) -> None:
    await override_store.grant(7, "users.view")
    assert await override_store.revoke(7, "users.view") is True
    assert await override_store.revoke(7, "users.view") is False
    assert await override_store.overrides_for(7) == frozenset()


@pytest.mark.asyncio
async def test_overrides_for_unknown_user_is_empty(override_store) -> None:
    assert await override_store.overrides_for(999) == frozenset()


@pytest.mark.asyncio
@pytest.mark.parametrize("user_id", [0, -1, True, "7", None])
async def test_invalid_user_id_rejected_before_storage(override_store, fake_uow, user_id) -> None:
    with pytest.raises(InvalidOverrideInput):
        await override_store.grant(user_id, "users.view")
    assert fake_uow.user_permissions.upserts == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("code", ["", "   ", None, "x" * 101])
async def test_invalid_code_rejected_before_storage(override_store, fake_uow, code) -> None:
    with pytest.raises(InvalidOverrideInput):
        await override_store.deny(7, code)
    with pytest.raises(InvalidOverrideInput):
        await override_store.revoke(7, code)
    assert fake_uow.user_permissions.upserts == 0
    assert fake_uow.user_permissions.deletes == 0


@pytest.mark.asyncio
async def test_mutation_invalidates_cache(override_store, cache) -> None:
    cache.set(7, "admin", frozenset({"users.view"}))
    cache.set(7, "user", frozenset())
    await override_store.grant(7, "customers.export")
    assert cache.get(7, "admin") is None
    assert cache.get(7, "user") is None


@pytest.mark.asyncio
async def test_failed_mutation_still_invalidates_cache(failing_uow_factory, cache) -> None:
    store = UserOverrideStore(failing_uow_factory, cache=cache)
    cache.set(7, "admin", frozenset({"users.view"}))
    with pytest.raises(PersistenceFailure):
        await store.deny(7, "users.view")
    assert cache.get(7, "admin") is None


@pytest.mark.asyncio
async def test_read_failure_propagates(failing_uow_factory) -> None:
    store = UserOverrideStore(failing_uow_factory)
    with pytest.raises(PersistenceFailure):
        await store.overrides_for(7)


@pytest.mark.asyncio
async def test_granted_at_comes_from_clock(uow_factory, fake_uow) -> None:
    at = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)
    store = UserOverrideStore(uow_factory, clock=lambda: at)
    await store.grant(7, "users.view")
    rows = await fake_uow.user_permissions.list_for_user(7)
    assert rows[0].granted_at == at


class TestReplaceAll:
    @pytest.mark.asyncio
    async def test_round_trip(self, override_store) -> None:
        await override_store.grant(7, "old.grant")
        assert await override_store.replace_all(7, ["a.b", "c.d"]) is True
        assert await override_store.overrides_for(7) == frozenset({("a.b", False), ("c.d", False)})

    @pytest.mark.asyncio
    async def test_empty_removes_all_grants(self, override_store) -> None:
        await override_store.grant(7, "a.b")
        await override_store.replace_all(7, [])
        assert await override_store.overrides_for(7) == frozenset()

    @pytest.mark.asyncio
    async def test_denials_outside_set_are_kept(self, override_store) -> None:
        await override_store.deny(7, "users.delete")
        await override_store.replace_all(7, ["a.b"])
        assert await override_store.overrides_for(7) == frozenset(
            {("a.b", False), ("users.delete", True)}
        )

    @pytest.mark.asyncio
    async def test_deny_inside_set_becomes_grant(self, override_store) -> None:
        await override_store.deny(7, "users.view")
        await override_store.replace_all(7, ["users.view"])
        assert await override_store.overrides_for(7) == frozenset({("users.view", False)})

    @pytest.mark.asyncio
    async def test_only_difference_is_written(self, override_store, fake_uow) -> None:
        await override_store.replace_all(7, ["a.b", "c.d"])
        upserts = fake_uow.user_permissions.upserts
        await override_store.replace_all(7, ["a.b", "c.d", " a.b "])
        assert fake_uow.user_permissions.upserts == upserts
        assert fake_uow.user_permissions.deletes == 0

    @pytest.mark.asyncio
    async def test_invalid_code_writes_nothing(self, override_store, fake_uow) -> None:
        with pytest.raises(InvalidOverrideInput):
            await override_store.replace_all(7, ["a.b", ""])
        assert fake_uow.user_permissions.upserts == 0

    @pytest.mark.asyncio
    async def test_string_is_not_a_collection(self, override_store) -> None:
        with pytest.raises(InvalidOverrideInput):
            await override_store.replace_all(7, "users.view")

    @pytest.mark.asyncio
    async def test_invalidates_cache(self, override_store, cache) -> None:
        cache.set(7, "user", frozenset())
        await override_store.replace_all(7, ["a.b"])
        assert cache.get(7, "user") is None
