"""Permission categories and actions used to compose permission codes."""

from enum import StrEnum


class PermissionCategory(StrEnum):
    """Display categories for cataloged permissions."""

    SYSTEM = "System"
    DASHBOARD = "Dashboard"
    USERS = "Users"
    ROLES = "Roles"
    CUSTOMERS = "Customers"
    REQUESTS = "Requests"
    APPOINTMENTS = "Appointments"
    NOTIFICATIONS = "Notifications"
    SETTINGS = "Settings"
    PROFILE = "Profile"
    PERMISSIONS = "Permissions"


class PermissionAction(StrEnum):
    """Actions that can appear as the second segment of a permission code."""

    VIEW = "view"
    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"
    HARD_DELETE = "hard_delete"
    MANAGE = "manage"
    ACCESS = "access"
    APPROVE = "approve"
    REJECT = "reject"
    ASSIGN = "assign"
    CONVERT = "convert"
    ADMIN = "admin"
    LOGS = "logs"
