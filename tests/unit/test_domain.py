"""Unit tests for permission codes, presets and decisions."""

import pytest

from gatekeeper.domain.permissions import (
    BOOTSTRAP_ROLE,
    DEFAULT_PERMISSION_DESCRIPTORS,
    ROLE_PRESETS,
)
from gatekeeper.domain.value_objects import (
    AccessDecision,
    DecisionOutcome,
    PermissionCategory,
    SystemPermission,
)
from gatekeeper.domain.value_objects.permission_code import (
    is_well_formed,
    normalize_code,
    split_code,
)


class TestPermissionCode:
    @pytest.mark.parametrize(
        "code, expected",
        [
            ("customers.export", ("customers", "export")),
            ("reports", ("reports", "")),
            ("a.b.c", ("a", "b")),
            ("", ("", "")),
        ],
    )
    def test_split_code(self, code, expected) -> None:
        assert split_code(code) == expected

    def test_normalize_strips_but_keeps_case(self) -> None:
        assert normalize_code("  Users.View ") == "Users.View"

    def test_is_well_formed(self) -> None:
        assert is_well_formed("users.view")
        assert is_well_formed("customers.hard_delete")
        assert not is_well_formed("users")
        assert not is_well_formed("Users.View")
        assert not is_well_formed("a.b.c")


class TestCompiledCatalog:
    def test_every_system_permission_has_a_descriptor(self) -> None:
        codes = [d.code for d in DEFAULT_PERMISSION_DESCRIPTORS]
        assert len(codes) == len(set(codes))
        assert set(codes) == {p.value for p in SystemPermission}

    def test_descriptor_categories_are_known(self) -> None:
        categories = {c.value for c in PermissionCategory}
        assert all(d.category in categories for d in DEFAULT_PERMISSION_DESCRIPTORS)

    def test_descriptor_action_matches_code(self) -> None:
        for d in DEFAULT_PERMISSION_DESCRIPTORS:
            assert d.code.split(".")[1] == d.action


class TestRolePresets:
    def test_bootstrap_role_can_manage_permissions(self) -> None:
        assert SystemPermission.PERMISSIONS_MANAGE in ROLE_PRESETS[BOOTSTRAP_ROLE]

    def test_only_admin_can_manage_permissions(self) -> None:
        holders = [r for r, codes in ROLE_PRESETS.items() if SystemPermission.PERMISSIONS_MANAGE in codes]
        assert holders == ["admin"]

    def test_presets_are_flat(self) -> None:
        """No role implicitly includes another role's codes."""
        assert SystemPermission.USERS_VIEW not in ROLE_PRESETS["employee"]
        assert SystemPermission.USERS_VIEW in ROLE_PRESETS["manager"]

    def test_every_role_has_system_access(self) -> None:
        for codes in ROLE_PRESETS.values():
            assert SystemPermission.SYSTEM_ACCESS in codes


class TestAccessDecision:
    def test_allow(self) -> None:
        decision = AccessDecision.allow("users.view")
        assert decision.allowed
        assert decision.outcome is DecisionOutcome.ALLOWED
        assert decision.reason is None

    def test_deny_is_not_allowed(self) -> None:
        decision = AccessDecision.deny("users.view", "requires users.view")
        assert not decision.allowed
        assert decision.reason == "requires users.view"

    def test_undetermined_is_not_allowed(self) -> None:
        decision = AccessDecision.undetermined("users.view", "storage down")
        assert not decision.allowed
        assert decision.outcome is DecisionOutcome.UNDETERMINED
