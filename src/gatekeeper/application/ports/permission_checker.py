"""Access checker port - decision primitive consumed by middleware."""

from collections.abc import Iterable
from typing import Protocol

from gatekeeper.domain.value_objects import AccessDecision


class AccessChecker(Protocol):
    """Port for answering access questions for a (user, role) pair."""

    async def has_permission(self, user_id: int, role: str, code: str) -> bool: ...

    async def has_any_permission(self, user_id: int, role: str, codes: Iterable[str]) -> bool: ...

    async def has_all_permissions(self, user_id: int, role: str, codes: Iterable[str]) -> bool: ...

    async def require_permission(self, user_id: int, role: str, code: str) -> AccessDecision: ...

    async def get_effective_permissions(self, user_id: int, role: str) -> frozenset[str]: ...
