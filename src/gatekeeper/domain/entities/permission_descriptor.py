"""Permission descriptor entity - display metadata for a permission code."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PermissionDescriptor:
    """Cataloged permission. ``code`` is the identity and never changes."""

    code: str
    name: str
    description: str
    category: str
    action: str
