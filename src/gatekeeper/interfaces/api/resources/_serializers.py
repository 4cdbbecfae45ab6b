"""JSON shapes shared by the permission resources."""

from gatekeeper.domain.entities import PermissionDescriptor, UserPermissionOverride


def descriptor_to_dict(d: PermissionDescriptor) -> dict:
    return {
        "code": d.code,
        "name": d.name,
        "description": d.description,
        "category": d.category,
        "action": d.action,
    }


def override_to_dict(o: UserPermissionOverride) -> dict:
    return {
        "permission": o.permission_code,
        "denied": o.is_denied,
        "granted_at": o.granted_at.isoformat(),
        "granted_by": o.granted_by,
    }
