"""Role default API resources."""

import falcon.asgi

from gatekeeper.application.use_cases.catalog.list_catalog import GetRoleDefaultsUseCase
from gatekeeper.domain.exceptions import NotFound
from gatekeeper.domain.value_objects import SystemPermission


class RolesResource:
    """GET /v1/roles - roles with a default permission preset."""

    required_permissions = {"GET": SystemPermission.PERMISSIONS_VIEW}

    def __init__(self, get_role_defaults: GetRoleDefaultsUseCase) -> None:
        self._get_role_defaults = get_role_defaults

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.media = {"items": self._get_role_defaults.roles()}
        resp.status = falcon.HTTP_200


class RoleDefaultsResource:
    """GET /v1/roles/{role}/permissions - default codes of a role."""

    required_permissions = {"GET": SystemPermission.PERMISSIONS_VIEW}

    def __init__(self, get_role_defaults: GetRoleDefaultsUseCase) -> None:
        self._get_role_defaults = get_role_defaults

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role: str,
    ) -> None:
        try:
            permissions = self._get_role_defaults.execute(role)
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return
        resp.media = {"role": role.strip().lower(), "permissions": permissions}
        resp.status = falcon.HTTP_200
