"""Keycloak OIDC provider - token introspection yielding (user id, role)."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

logger = logging.getLogger(__name__)


@dataclass
class OIDCUser:
    """Authenticated user from OIDC token."""

    user_id: int
    role: str
    username: str | None
    realm_roles: list[str]


def pick_role(realm_roles: Iterable[str], known_roles: Iterable[str], explicit: str | None = None) -> str:
    """Explicit ``role`` claim wins; otherwise the first realm role with a preset."""
    if explicit:
        return explicit.strip().lower()
    known = {r.lower() for r in known_roles}
    for role in realm_roles:
        if role.lower() in known:
            return role.lower()
    return ""


class KeycloakProvider:
    """Keycloak OIDC - validates tokens and maps them to an application principal.

    The numeric application user id is read from a custom claim
    (``user_id`` by default); Keycloak's ``sub`` is not used.
    """

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        known_roles: Iterable[str],
        client_secret: str = "",
        user_id_claim: str = "user_id",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )
        self._known_roles = list(known_roles)
        self._user_id_claim = user_id_claim

    async def decode_token(self, token: str) -> OIDCUser | None:
        """Introspect token, return user info or None if inactive or unusable."""
        try:
            token_info = await self._keycloak.a_introspect(token)
        except KeycloakError:
            logger.warning("Token introspection failed", exc_info=True)
            return None
        if not token_info.get("active"):
            return None
        try:
            user_id = int(token_info.get(self._user_id_claim))
        except (TypeError, ValueError):
            logger.warning("Token has no usable %r claim", self._user_id_claim)
            return None
        realm_roles = token_info.get("realm_access", {}).get("roles", [])
        return OIDCUser(
            user_id=user_id,
            role=pick_role(realm_roles, self._known_roles, token_info.get("role")),
            username=token_info.get("preferred_username"),
            realm_roles=realm_roles,
        )
