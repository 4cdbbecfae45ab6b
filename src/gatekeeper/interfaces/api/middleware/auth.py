"""Auth middleware - derives the request principal from a token or gateway headers."""

import logging

import falcon.asgi

from gatekeeper.domain.value_objects import Principal

logger = logging.getLogger(__name__)


class AuthMiddleware:
    """Sets req.context.user to a Principal, or None when unauthenticated.

    Authentication happens elsewhere: either Keycloak introspects the bearer
    token, or a trusted gateway has already put the identity in headers.
    """

    def __init__(self, keycloak_provider=None, trust_gateway_headers: bool = False) -> None:
        self._keycloak = keycloak_provider
        self._trust_headers = trust_gateway_headers

    async def process_request(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Extract user from Authorization header or gateway headers."""
        req.context.user = None
        if self._keycloak:
            auth = req.get_header("Authorization")
            if auth and auth.startswith("Bearer "):
                user = await self._keycloak.decode_token(auth[7:])
                if user:
                    req.context.user = Principal(user_id=user.user_id, role=user.role)
            return

        if self._trust_headers:
            raw_id = req.get_header("X-User-Id")
            if not raw_id:
                return
            try:
                user_id = int(raw_id)
            except ValueError:
                logger.warning("Ignoring non-numeric X-User-Id header: %r", raw_id)
                return
            role = (req.get_header("X-User-Role") or "").strip().lower()
            req.context.user = Principal(user_id=user_id, role=role)
