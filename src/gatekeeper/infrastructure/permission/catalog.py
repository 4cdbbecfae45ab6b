"""Permission catalog - in-process registry of permission descriptors."""

import logging
import threading
from collections.abc import Iterable

from gatekeeper.domain.entities import PermissionDescriptor
from gatekeeper.domain.value_objects.permission_code import normalize_code, split_code

logger = logging.getLogger(__name__)


def _capitalize(segment: str) -> str:
    return segment[:1].upper() + segment[1:]


def build_fallback_descriptor(code: str) -> PermissionDescriptor:
    """Synthesize display metadata for a code that is not cataloged.

    ``customers.export`` becomes "Export Customers" / "Can export customers".
    Missing segments fall back to category "Other" and action "access".
    """
    category, action = split_code(code)
    display_category = _capitalize(category) if category else "Other"
    display_action = _capitalize(action) if action else "Access"
    return PermissionDescriptor(
        code=code,
        name=f"{display_action} {display_category}",
        description=f"Can {action or 'access'} {category or 'system'}",
        category=display_category,
        action=action or "access",
    )


class PermissionCatalog:
    """Registry mapping permission codes to descriptors.

    Constructed once by the composition root and shared by reference. Reads
    and seeding are guarded by a lock so the catalog can be refreshed while
    requests are being served.
    """

    def __init__(self, descriptors: Iterable[PermissionDescriptor] = ()) -> None:
        self._lock = threading.Lock()
        self._by_code: dict[str, PermissionDescriptor] = {}
        self.seed(descriptors)

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_code)

    def __contains__(self, code: object) -> bool:
        if not isinstance(code, str):
            return False
        with self._lock:
            return normalize_code(code) in self._by_code

    def lookup(self, code: str) -> PermissionDescriptor | None:
        """Return the descriptor for code, or None if it is not cataloged."""
        if not isinstance(code, str):
            return None
        with self._lock:
            return self._by_code.get(normalize_code(code))

    def list_all(self) -> list[PermissionDescriptor]:
        """Snapshot of the catalog, ordered by category then code."""
        with self._lock:
            items = list(self._by_code.values())
        return sorted(items, key=lambda d: (d.category, d.code))

    def codes(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._by_code)

    def describe(self, code: str) -> PermissionDescriptor:
        """Cataloged descriptor or a synthesized fallback. Never fails."""
        return self.lookup(code) or build_fallback_descriptor(code)

    def describe_many(self, codes: Iterable[str]) -> list[PermissionDescriptor]:
        """Describe each distinct code, preserving first-seen order."""
        seen: set[str] = set()
        result = []
        for code in codes:
            if code in seen:
                continue
            seen.add(code)
            result.append(self.describe(code))
        return result

    def seed(self, entries: Iterable[PermissionDescriptor]) -> int:
        """Upsert descriptors by code. Returns how many were added or changed.

        Re-seeding identical entries changes nothing. An entry for an existing
        code replaces its text fields; the code itself is never rewritten.
        """
        changed = 0
        with self._lock:
            for entry in entries:
                code = normalize_code(entry.code)
                if not code:
                    raise ValueError("Permission code must not be empty")
                if code != entry.code:
                    entry = PermissionDescriptor(
                        code=code,
                        name=entry.name,
                        description=entry.description,
                        category=entry.category,
                        action=entry.action,
                    )
                if self._by_code.get(code) != entry:
                    self._by_code[code] = entry
                    changed += 1
        if changed:
            logger.debug("Catalog seeded: %d descriptor(s) added or updated", changed)
        return changed
