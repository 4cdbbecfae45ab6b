"""Role default table port."""

from typing import Protocol


class RoleDefaults(Protocol):
    """Port for static role presets."""

    def defaults_for(self, role: str | None) -> frozenset[str]: ...

    def is_known(self, role: str | None) -> bool: ...

    def roles(self) -> list[str]: ...
