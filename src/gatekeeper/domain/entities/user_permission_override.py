"""User permission override entity - per-user grant or deny of one code."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class UserPermissionOverride:
    """Override row, unique per (user_id, permission_code)."""

    user_id: int
    permission_code: str
    is_denied: bool
    granted_at: datetime
    granted_by: int | None = None
