"""Fixtures for API tests."""

import pytest

from gatekeeper.application.use_cases.catalog.list_catalog import (
    GetRoleDefaultsUseCase,
    ListCatalogUseCase,
)
from gatekeeper.application.use_cases.permission.get_user_permissions import (
    GetUserPermissionsUseCase,
)
from gatekeeper.application.use_cases.permission.grant_permission import GrantPermissionUseCase
from gatekeeper.application.use_cases.permission.revoke_permission import RevokePermissionUseCase
from gatekeeper.application.use_cases.permission.update_user_permissions import (
    UpdateUserPermissionsUseCase,
)
from gatekeeper.interfaces.api.app import create_app
from gatekeeper.interfaces.api.middleware.auth import AuthMiddleware
from gatekeeper.interfaces.api.middleware.permission_gate import PermissionGateMiddleware
from gatekeeper.interfaces.api.resources.catalog import CatalogResource
from gatekeeper.interfaces.api.resources.health import HealthResource
from gatekeeper.interfaces.api.resources.roles import RoleDefaultsResource, RolesResource
from gatekeeper.interfaces.api.resources.user_permissions import (
    PermissionCheckResource,
    UserPermissionResource,
    UserPermissionsResource,
)


def build_app(access_checker, override_store, catalog, role_defaults):
    """Wire the API the way the composition root does, with gateway-header auth."""
    get_role_defaults = GetRoleDefaultsUseCase(role_defaults)
    return create_app(
        health_resource=HealthResource(catalog),
        catalog_resource=CatalogResource(ListCatalogUseCase(catalog)),
        roles_resource=RolesResource(get_role_defaults),
        role_defaults_resource=RoleDefaultsResource(get_role_defaults),
        user_permissions_resource=UserPermissionsResource(
            GetUserPermissionsUseCase(access_checker, override_store, catalog, role_defaults),
            UpdateUserPermissionsUseCase(override_store, access_checker, catalog),
        ),
        user_permission_resource=UserPermissionResource(
            GrantPermissionUseCase(override_store, access_checker),
            RevokePermissionUseCase(override_store, access_checker),
        ),
        permission_check_resource=PermissionCheckResource(access_checker),
        middleware=[
            AuthMiddleware(trust_gateway_headers=True),
            PermissionGateMiddleware(access_checker),
        ],
    )


@pytest.fixture
def app(access_checker, override_store, catalog, role_defaults):
    """Falcon ASGI app wired to the in-memory permission engine."""
    return build_app(access_checker, override_store, catalog, role_defaults)


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)
