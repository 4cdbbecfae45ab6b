"""Permission gate middleware - enforces per-resource required permissions."""

import falcon
import falcon.asgi

from gatekeeper.application.ports import AccessChecker
from gatekeeper.domain.value_objects import DecisionOutcome


class PermissionGateMiddleware:
    """Checks ``resource.required_permissions[req.method]`` before the responder runs.

    Resources without the attribute, or methods without an entry, are not
    gated here.
    """

    def __init__(self, access_checker: AccessChecker) -> None:
        self._access_checker = access_checker

    async def process_resource(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource,
        params,
    ) -> None:
        required = getattr(resource, "required_permissions", {}).get(req.method)
        if not required:
            return

        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            resp.complete = True
            return

        decision = await self._access_checker.require_permission(user.user_id, user.role, required)
        if decision.outcome is DecisionOutcome.UNDETERMINED:
            resp.status = falcon.HTTP_503
            resp.media = {"error": "Permission check unavailable", "permission": required}
            resp.complete = True
        elif decision.outcome is DecisionOutcome.DENIED:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied", "permission": required}
            resp.complete = True
