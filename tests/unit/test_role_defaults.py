"""Unit tests for the role default table."""

import pytest

from gatekeeper.domain.entities import PermissionDescriptor
from gatekeeper.domain.permissions import ROLE_PRESETS
from gatekeeper.domain.value_objects import SystemPermission
from gatekeeper.infrastructure.permission import PermissionCatalog, RoleDefaultTable


def test_defaults_for_known_role(role_defaults) -> None:
    assert role_defaults.defaults_for("employee") == ROLE_PRESETS["employee"]


def test_role_lookup_is_case_insensitive(role_defaults) -> None:
    assert role_defaults.defaults_for("Admin") == role_defaults.defaults_for("admin")
    assert role_defaults.defaults_for("  MANAGER ") == ROLE_PRESETS["manager"]


@pytest.mark.parametrize("role", ["auditor", "", None])
def test_unknown_role_gets_empty_set(role_defaults, role) -> None:
    assert role_defaults.defaults_for(role) == frozenset()
    assert not role_defaults.is_known(role)


def test_defaults_are_plain_strings(role_defaults) -> None:
    codes = role_defaults.defaults_for("user")
    assert "profile.view" in codes
    assert all(type(c) is str for c in codes)


def test_roles_sorted(role_defaults) -> None:
    assert role_defaults.roles() == ["admin", "employee", "manager", "user"]


def test_bootstrap_role_must_grant_manage() -> None:
    presets = {"admin": {"users.view"}, "user": {"profile.view"}}
    with pytest.raises(ValueError, match="permissions.manage"):
        RoleDefaultTable(presets)


def test_custom_bootstrap_role() -> None:
    table = RoleDefaultTable(
        {"Owner": {SystemPermission.PERMISSIONS_MANAGE}, "guest": set()},
        bootstrap_role="owner",
    )
    assert table.bootstrap_role == "owner"
    assert table.defaults_for("OWNER") == frozenset({"permissions.manage"})


def test_uncataloged_codes(catalog) -> None:
    table = RoleDefaultTable(
        {"admin": {"permissions.manage", "reports.export"}, "user": {"profile.view"}}
    )
    assert table.uncataloged_codes(catalog) == {"admin": frozenset({"reports.export"})}


def test_shipped_presets_are_fully_cataloged(role_defaults, catalog) -> None:
    assert role_defaults.uncataloged_codes(catalog) == {}


def test_uncataloged_against_empty_catalog(role_defaults) -> None:
    missing = role_defaults.uncataloged_codes(PermissionCatalog([
        PermissionDescriptor("system.access", "System Access", "", "System", "access"),
    ]))
    assert "system.access" not in missing["user"]
    assert "profile.view" in missing["user"]
