"""Health check endpoints."""

import falcon.asgi

from gatekeeper.application.ports import PermissionCatalog


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, catalog: PermissionCatalog | None = None) -> None:
        self._catalog = catalog

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - ready once the permission catalog is loaded."""
        if self._catalog is None:
            resp.media = {"status": "ready"}
            resp.status = falcon.HTTP_200
            return
        count = len(self._catalog.list_all())
        if count == 0:
            resp.media = {"status": "starting", "permissions": 0}
            resp.status = falcon.HTTP_503
            return
        resp.media = {"status": "ready", "permissions": count}
        resp.status = falcon.HTTP_200
