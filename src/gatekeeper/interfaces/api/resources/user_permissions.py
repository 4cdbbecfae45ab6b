"""User permission override API resources."""

import falcon.asgi

from gatekeeper.application.ports import AccessChecker
from gatekeeper.application.use_cases.permission._authorization import ensure_can_view_user
from gatekeeper.application.use_cases.permission.get_user_permissions import (
    GetUserPermissionsUseCase,
)
from gatekeeper.application.use_cases.permission.grant_permission import GrantPermissionUseCase
from gatekeeper.application.use_cases.permission.revoke_permission import RevokePermissionUseCase
from gatekeeper.application.use_cases.permission.update_user_permissions import (
    UpdateUserPermissionsUseCase,
)
from gatekeeper.domain.exceptions import (
    NotFound,
    PermissionDenied,
    PersistenceFailure,
    ValidationError,
)
from gatekeeper.interfaces.api.resources._serializers import (
    descriptor_to_dict,
    override_to_dict,
)


def _role_param(req: falcon.asgi.Request, user, user_id: int) -> str | None:
    """?role= wins; a user looking at themselves defaults to their own role."""
    role = req.get_param("role")
    if role is None and user.user_id == user_id:
        return user.role
    return role


class UserPermissionsResource:
    """GET/PUT /v1/users/{user_id}/permissions - view and replace grants."""

    def __init__(
        self,
        get_user_permissions: GetUserPermissionsUseCase,
        update_user_permissions: UpdateUserPermissionsUseCase,
    ) -> None:
        self._get = get_user_permissions
        self._update = update_user_permissions

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: int,
    ) -> None:
        """Effective permissions, role defaults and overrides of a user."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        role = _role_param(req, user, user_id)
        if role is None:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Missing required parameter: role"}
            return

        try:
            view = await self._get.execute(user, user_id, role)
        except PermissionDenied as e:
            resp.status = falcon.HTTP_403
            resp.media = {"error": str(e)}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except PersistenceFailure:
            resp.status = falcon.HTTP_503
            resp.media = {"error": "Permission storage unavailable"}
            return

        resp.media = {
            "user_id": view.user_id,
            "role": view.role,
            "permissions": view.effective,
            "role_defaults": view.role_defaults,
            "overrides": [override_to_dict(o) for o in view.overrides],
            "descriptors": [descriptor_to_dict(d) for d in view.descriptors],
        }
        resp.status = falcon.HTTP_200

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: int,
    ) -> None:
        """Replace the user's grants with body["permissions"]."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            body = await req.get_media()
            codes = body["permissions"]
        except (KeyError, TypeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        if not isinstance(codes, list):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "permissions must be a list of permission codes"}
            return

        try:
            granted = await self._update.execute(user, user_id, codes)
        except PermissionDenied as e:
            resp.status = falcon.HTTP_403
            resp.media = {"error": str(e)}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except PersistenceFailure:
            resp.status = falcon.HTTP_503
            resp.media = {"error": "Permission storage unavailable"}
            return

        resp.media = {"user_id": user_id, "permissions": granted}
        resp.status = falcon.HTTP_200


class UserPermissionResource:
    """PUT/DELETE /v1/users/{user_id}/permissions/{code} - one override."""

    def __init__(
        self,
        grant_permission: GrantPermissionUseCase,
        revoke_permission: RevokePermissionUseCase,
    ) -> None:
        self._grant = grant_permission
        self._revoke = revoke_permission

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: int,
        code: str,
    ) -> None:
        """Grant code, or deny it when body["denied"] is true."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        body = await req.get_media(default_when_empty={})
        denied = body.get("denied", False) if isinstance(body, dict) else False
        if not isinstance(denied, bool):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "denied must be a boolean"}
            return

        try:
            await self._grant.execute(user, user_id, code, denied=denied)
        except PermissionDenied as e:
            resp.status = falcon.HTTP_403
            resp.media = {"error": str(e)}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except PersistenceFailure:
            resp.status = falcon.HTTP_503
            resp.media = {"error": "Permission storage unavailable"}
            return

        resp.media = {"user_id": user_id, "permission": code.strip(), "denied": denied}
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: int,
        code: str,
    ) -> None:
        """Remove the override so the role default applies again."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            await self._revoke.execute(user, user_id, code)
            resp.status = falcon.HTTP_204
        except PermissionDenied as e:
            resp.status = falcon.HTTP_403
            resp.media = {"error": str(e)}
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Permission override not found"}
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
        except PersistenceFailure:
            resp.status = falcon.HTTP_503
            resp.media = {"error": "Permission storage unavailable"}


class PermissionCheckResource:
    """GET /v1/users/{user_id}/permissions/{code}/check - one access decision."""

    def __init__(self, access_checker: AccessChecker) -> None:
        self._access_checker = access_checker

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: int,
        code: str,
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            await ensure_can_view_user(self._access_checker, user, user_id)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except PersistenceFailure:
            resp.status = falcon.HTTP_503
            resp.media = {"error": "Permission storage unavailable"}
            return

        role = _role_param(req, user, user_id)
        if role is None:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Missing required parameter: role"}
            return

        decision = await self._access_checker.require_permission(user_id, role, code)
        resp.media = {
            "user_id": user_id,
            "role": role,
            "permission": decision.permission,
            "outcome": str(decision.outcome),
            "allowed": decision.allowed,
            "reason": decision.reason,
        }
        resp.status = falcon.HTTP_200
