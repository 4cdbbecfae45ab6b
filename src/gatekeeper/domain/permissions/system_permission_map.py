"""Compiled-in permission catalog used for seeding and display."""

from gatekeeper.domain.entities import PermissionDescriptor
from gatekeeper.domain.value_objects import (
    PermissionAction as A,
    PermissionCategory as C,
    SystemPermission as P,
)


def _d(code: P, name: str, description: str, category: C, action: A) -> PermissionDescriptor:
    return PermissionDescriptor(
        code=code.value,
        name=name,
        description=description,
        category=category.value,
        action=action.value,
    )


DEFAULT_PERMISSION_DESCRIPTORS: tuple[PermissionDescriptor, ...] = (
    # System
    _d(P.SYSTEM_ACCESS, "System Access", "Can access the system", C.SYSTEM, A.ACCESS),
    _d(P.SYSTEM_ADMIN, "System Administration", "Has full administrative access to the system", C.SYSTEM, A.ADMIN),
    _d(P.SYSTEM_LOGS, "View System Logs", "Can view system and activity logs", C.SYSTEM, A.LOGS),
    _d(P.DASHBOARD_VIEW, "View Dashboard", "Can view the dashboard", C.DASHBOARD, A.VIEW),
    # Users
    _d(P.USERS_VIEW, "View Users", "Can view user list and details", C.USERS, A.VIEW),
    _d(P.USERS_CREATE, "Create Users", "Can create new users", C.USERS, A.CREATE),
    _d(P.USERS_EDIT, "Edit Users", "Can edit existing users", C.USERS, A.EDIT),
    _d(P.USERS_DELETE, "Delete Users", "Can delete users", C.USERS, A.DELETE),
    _d(P.USERS_MANAGE, "Manage Users", "Has full management access to users", C.USERS, A.MANAGE),
    # Roles
    _d(P.ROLES_VIEW, "View Roles", "Can view roles and permissions", C.ROLES, A.VIEW),
    _d(P.ROLES_CREATE, "Create Roles", "Can create new roles", C.ROLES, A.CREATE),
    _d(P.ROLES_EDIT, "Edit Roles", "Can edit existing roles", C.ROLES, A.EDIT),
    _d(P.ROLES_DELETE, "Delete Roles", "Can delete roles", C.ROLES, A.DELETE),
    # Customers
    _d(P.CUSTOMERS_VIEW, "View Customers", "Can view customer list and details", C.CUSTOMERS, A.VIEW),
    _d(P.CUSTOMERS_CREATE, "Create Customers", "Can create new customers", C.CUSTOMERS, A.CREATE),
    _d(P.CUSTOMERS_EDIT, "Edit Customers", "Can edit existing customers", C.CUSTOMERS, A.EDIT),
    _d(P.CUSTOMERS_DELETE, "Delete Customers", "Can delete customers", C.CUSTOMERS, A.DELETE),
    _d(
        P.CUSTOMERS_HARD_DELETE,
        "Permanently Delete Customers",
        "Can permanently remove customers and their history",
        C.CUSTOMERS,
        A.HARD_DELETE,
    ),
    # Requests
    _d(P.REQUESTS_VIEW, "View Requests", "Can view request list and details", C.REQUESTS, A.VIEW),
    _d(P.REQUESTS_CREATE, "Create Requests", "Can create new requests", C.REQUESTS, A.CREATE),
    _d(P.REQUESTS_EDIT, "Edit Requests", "Can edit existing requests", C.REQUESTS, A.EDIT),
    _d(P.REQUESTS_DELETE, "Delete Requests", "Can delete requests", C.REQUESTS, A.DELETE),
    _d(P.REQUESTS_APPROVE, "Approve Requests", "Can approve requests", C.REQUESTS, A.APPROVE),
    _d(P.REQUESTS_REJECT, "Reject Requests", "Can reject requests", C.REQUESTS, A.REJECT),
    _d(P.REQUESTS_ASSIGN, "Assign Requests", "Can assign requests to users", C.REQUESTS, A.ASSIGN),
    _d(P.REQUESTS_MANAGE, "Manage Requests", "Has full management access to requests", C.REQUESTS, A.MANAGE),
    _d(P.REQUESTS_CONVERT, "Convert Requests", "Can convert requests into customers", C.REQUESTS, A.CONVERT),
    # Appointments
    _d(P.APPOINTMENTS_VIEW, "View Appointments", "Can view appointment list and details", C.APPOINTMENTS, A.VIEW),
    _d(P.APPOINTMENTS_CREATE, "Create Appointments", "Can create new appointments", C.APPOINTMENTS, A.CREATE),
    _d(P.APPOINTMENTS_EDIT, "Edit Appointments", "Can edit existing appointments", C.APPOINTMENTS, A.EDIT),
    _d(P.APPOINTMENTS_DELETE, "Delete Appointments", "Can delete appointments", C.APPOINTMENTS, A.DELETE),
    # Notifications
    _d(P.NOTIFICATIONS_VIEW, "View Notifications", "Can view notifications", C.NOTIFICATIONS, A.VIEW),
    _d(P.NOTIFICATIONS_CREATE, "Create Notifications", "Can create notifications", C.NOTIFICATIONS, A.CREATE),
    _d(P.NOTIFICATIONS_EDIT, "Edit Notifications", "Can edit notifications", C.NOTIFICATIONS, A.EDIT),
    _d(P.NOTIFICATIONS_DELETE, "Delete Notifications", "Can delete notifications", C.NOTIFICATIONS, A.DELETE),
    _d(
        P.NOTIFICATIONS_MANAGE,
        "Manage Notifications",
        "Has full management access to notifications",
        C.NOTIFICATIONS,
        A.MANAGE,
    ),
    # Settings
    _d(P.SETTINGS_VIEW, "View Settings", "Can view system settings", C.SETTINGS, A.VIEW),
    _d(P.SETTINGS_EDIT, "Edit Settings", "Can edit system settings", C.SETTINGS, A.EDIT),
    # Profile
    _d(P.PROFILE_VIEW, "View Profile", "Can view own profile", C.PROFILE, A.VIEW),
    _d(P.PROFILE_EDIT, "Edit Profile", "Can edit own profile", C.PROFILE, A.EDIT),
    # Permission management
    _d(P.PERMISSIONS_VIEW, "View Permissions", "Can view permissions and role defaults", C.PERMISSIONS, A.VIEW),
    _d(
        P.PERMISSIONS_MANAGE,
        "Manage Permissions",
        "Can grant, deny and revoke user permissions",
        C.PERMISSIONS,
        A.MANAGE,
    ),
)
