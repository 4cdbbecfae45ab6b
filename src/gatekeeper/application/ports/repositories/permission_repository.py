"""Permission descriptor repository port."""

from collections.abc import Sequence
from typing import Protocol

from gatekeeper.domain.entities import PermissionDescriptor


class PermissionRepository(Protocol):
    """Port for catalog persistence, keyed by permission code."""

    async def list_all(self) -> list[PermissionDescriptor]: ...

    async def upsert_many(self, descriptors: Sequence[PermissionDescriptor]) -> int: ...
