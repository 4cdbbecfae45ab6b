"""Role default table - flat mapping from role name to default codes."""

from collections.abc import Iterable, Mapping

from gatekeeper.domain.permissions import BOOTSTRAP_ROLE, ROLE_PRESETS
from gatekeeper.domain.value_objects import SystemPermission
from gatekeeper.infrastructure.permission.catalog import PermissionCatalog


def normalize_role(role: str | None) -> str:
    """Lower-cased, stripped role name; empty string for None."""
    return (role or "").strip().lower()


class RoleDefaultTable:
    """Static per-deployment presets. Unknown roles get an empty set."""

    def __init__(
        self,
        presets: Mapping[str, Iterable[str]] = ROLE_PRESETS,
        bootstrap_role: str = BOOTSTRAP_ROLE,
    ) -> None:
        self._presets: dict[str, frozenset[str]] = {
            normalize_role(role): frozenset(str(code) for code in codes)
            for role, codes in presets.items()
        }
        self._bootstrap_role = normalize_role(bootstrap_role)
        manage = SystemPermission.PERMISSIONS_MANAGE.value
        if manage not in self._presets.get(self._bootstrap_role, frozenset()):
            raise ValueError(
                f"Role preset '{bootstrap_role}' must grant {manage}; "
                "without it nobody could ever change permissions"
            )

    @property
    def bootstrap_role(self) -> str:
        return self._bootstrap_role

    def defaults_for(self, role: str | None) -> frozenset[str]:
        """Default codes for role (case-insensitive)."""
        return self._presets.get(normalize_role(role), frozenset())

    def is_known(self, role: str | None) -> bool:
        return normalize_role(role) in self._presets

    def roles(self) -> list[str]:
        return sorted(self._presets)

    def uncataloged_codes(self, catalog: PermissionCatalog) -> dict[str, frozenset[str]]:
        """Per role, the preset codes the catalog does not describe."""
        known = catalog.codes()
        missing = {role: codes - known for role, codes in self._presets.items()}
        return {role: codes for role, codes in missing.items() if codes}
