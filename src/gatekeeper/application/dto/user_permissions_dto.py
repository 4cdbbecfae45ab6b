"""User permissions view DTO."""

from dataclasses import dataclass, field

from gatekeeper.domain.entities import PermissionDescriptor, UserPermissionOverride


@dataclass
class UserPermissionsView:
    """Effective permissions of a user, with the overrides that shaped them."""

    user_id: int
    role: str
    effective: list[str]
    role_defaults: list[str]
    overrides: list[UserPermissionOverride] = field(default_factory=list)
    descriptors: list[PermissionDescriptor] = field(default_factory=list)
