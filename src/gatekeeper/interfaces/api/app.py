"""Falcon ASGI application."""

import falcon.asgi
from falcon.asgi import App

from gatekeeper.interfaces.api.resources.catalog import CatalogResource
from gatekeeper.interfaces.api.resources.health import HealthResource
from gatekeeper.interfaces.api.resources.roles import RoleDefaultsResource, RolesResource
from gatekeeper.interfaces.api.resources.user_permissions import (
    PermissionCheckResource,
    UserPermissionResource,
    UserPermissionsResource,
)


def create_app(
    health_resource: HealthResource,
    catalog_resource: CatalogResource,
    roles_resource: RolesResource,
    role_defaults_resource: RoleDefaultsResource,
    user_permissions_resource: UserPermissionsResource,
    user_permission_resource: UserPermissionResource,
    permission_check_resource: PermissionCheckResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/permissions", catalog_resource)
    app.add_route("/v1/roles", roles_resource)
    app.add_route("/v1/roles/{role}/permissions", role_defaults_resource)
    app.add_route("/v1/users/{user_id:int}/permissions", user_permissions_resource)
    app.add_route("/v1/users/{user_id:int}/permissions/{code}", user_permission_resource)
    app.add_route("/v1/users/{user_id:int}/permissions/{code}/check", permission_check_resource)
    return app
