"""Role presets - default permission codes per role.

Each role lists its codes explicitly; there is no inheritance between roles.
"""

from gatekeeper.domain.value_objects import SystemPermission as P

#: Role whose preset must always include ``permissions.manage``.
BOOTSTRAP_ROLE = "admin"

ROLE_PRESETS: dict[str, frozenset[str]] = {
    "admin": frozenset({
        P.SYSTEM_ACCESS,
        P.SYSTEM_ADMIN,
        P.USERS_VIEW,
        P.USERS_CREATE,
        P.USERS_EDIT,
        P.USERS_DELETE,
        P.USERS_MANAGE,
        P.ROLES_VIEW,
        P.ROLES_CREATE,
        P.ROLES_EDIT,
        P.ROLES_DELETE,
        P.CUSTOMERS_VIEW,
        P.CUSTOMERS_CREATE,
        P.CUSTOMERS_EDIT,
        P.CUSTOMERS_DELETE,
        P.CUSTOMERS_HARD_DELETE,
        P.REQUESTS_VIEW,
        P.REQUESTS_CREATE,
        P.REQUESTS_EDIT,
        P.REQUESTS_DELETE,
        P.REQUESTS_APPROVE,
        P.REQUESTS_REJECT,
        P.REQUESTS_ASSIGN,
        P.REQUESTS_MANAGE,
        P.APPOINTMENTS_VIEW,
        P.APPOINTMENTS_CREATE,
        P.APPOINTMENTS_EDIT,
        P.APPOINTMENTS_DELETE,
        P.SETTINGS_VIEW,
        P.SETTINGS_EDIT,
        P.PERMISSIONS_VIEW,
        P.PERMISSIONS_MANAGE,
        P.PROFILE_VIEW,
        P.PROFILE_EDIT,
    }),
    "manager": frozenset({
        P.SYSTEM_ACCESS,
        P.USERS_VIEW,
        P.USERS_MANAGE,
        P.CUSTOMERS_VIEW,
        P.CUSTOMERS_CREATE,
        P.CUSTOMERS_EDIT,
        P.REQUESTS_VIEW,
        P.REQUESTS_CREATE,
        P.REQUESTS_EDIT,
        P.REQUESTS_DELETE,
        P.REQUESTS_APPROVE,
        P.REQUESTS_REJECT,
        P.REQUESTS_ASSIGN,
        P.APPOINTMENTS_VIEW,
        P.APPOINTMENTS_CREATE,
        P.APPOINTMENTS_EDIT,
        P.APPOINTMENTS_DELETE,
        P.SETTINGS_VIEW,
        P.PERMISSIONS_VIEW,
        P.PROFILE_VIEW,
        P.PROFILE_EDIT,
    }),
    "employee": frozenset({
        P.SYSTEM_ACCESS,
        P.CUSTOMERS_VIEW,
        P.CUSTOMERS_CREATE,
        P.REQUESTS_VIEW,
        P.REQUESTS_CREATE,
        P.APPOINTMENTS_VIEW,
        P.APPOINTMENTS_CREATE,
        P.APPOINTMENTS_EDIT,
        P.PROFILE_VIEW,
        P.PROFILE_EDIT,
    }),
    "user": frozenset({
        P.SYSTEM_ACCESS,
        P.PROFILE_VIEW,
        P.PROFILE_EDIT,
        P.APPOINTMENTS_VIEW,
        P.APPOINTMENTS_CREATE,
    }),
}
