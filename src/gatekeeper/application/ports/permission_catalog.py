"""Permission catalog port."""

from collections.abc import Iterable
from typing import Protocol

from gatekeeper.domain.entities import PermissionDescriptor


class PermissionCatalog(Protocol):
    """Port for the in-process descriptor registry."""

    def lookup(self, code: str) -> PermissionDescriptor | None: ...

    def list_all(self) -> list[PermissionDescriptor]: ...

    def describe_many(self, codes: Iterable[str]) -> list[PermissionDescriptor]: ...

    def seed(self, entries: Iterable[PermissionDescriptor]) -> int: ...
