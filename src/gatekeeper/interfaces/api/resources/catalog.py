"""Permission catalog API resource."""

import falcon.asgi

from gatekeeper.application.use_cases.catalog.list_catalog import ListCatalogUseCase
from gatekeeper.domain.value_objects import SystemPermission
from gatekeeper.interfaces.api.resources._serializers import descriptor_to_dict


class CatalogResource:
    """GET /v1/permissions - list cataloged permissions."""

    required_permissions = {"GET": SystemPermission.PERMISSIONS_VIEW}

    def __init__(self, list_catalog: ListCatalogUseCase) -> None:
        self._list_catalog = list_catalog

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List descriptors, optionally filtered by ?category=."""
        items = self._list_catalog.execute(req.get_param("category"))
        resp.media = {"items": [descriptor_to_dict(d) for d in items]}
        resp.status = falcon.HTTP_200
