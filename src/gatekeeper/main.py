"""Application entry point and composition root."""

import logging

import falcon
import falcon.asgi

from gatekeeper import __version__
from gatekeeper.application.use_cases.catalog.list_catalog import (
    GetRoleDefaultsUseCase,
    ListCatalogUseCase,
)
from gatekeeper.application.use_cases.catalog.seed_permissions import (
    SeedDefaultPermissionsUseCase,
)
from gatekeeper.application.use_cases.permission.get_user_permissions import (
    GetUserPermissionsUseCase,
)
from gatekeeper.application.use_cases.permission.grant_permission import GrantPermissionUseCase
from gatekeeper.application.use_cases.permission.revoke_permission import RevokePermissionUseCase
from gatekeeper.application.use_cases.permission.update_user_permissions import (
    UpdateUserPermissionsUseCase,
)
from gatekeeper.config import get_settings
from gatekeeper.domain.permissions import DEFAULT_PERMISSION_DESCRIPTORS
from gatekeeper.infrastructure.auth.keycloak_provider import KeycloakProvider
from gatekeeper.infrastructure.permission import (
    EffectivePermissionCache,
    GatekeeperAccessChecker,
    PermissionCatalog,
    PermissionResolver,
    RoleDefaultTable,
    UserOverrideStore,
)
from gatekeeper.infrastructure.persistence.postgres.connection import create_pool
from gatekeeper.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from gatekeeper.interfaces.api.app import create_app
from gatekeeper.interfaces.api.middleware.auth import AuthMiddleware
from gatekeeper.interfaces.api.middleware.lifespan import (
    CatalogSeedMiddleware,
    PoolLifespanMiddleware,
)
from gatekeeper.interfaces.api.middleware.permission_gate import PermissionGateMiddleware
from gatekeeper.interfaces.api.resources.catalog import CatalogResource
from gatekeeper.interfaces.api.resources.health import HealthResource
from gatekeeper.interfaces.api.resources.roles import RoleDefaultsResource, RolesResource
from gatekeeper.interfaces.api.resources.user_permissions import (
    PermissionCheckResource,
    UserPermissionResource,
    UserPermissionsResource,
)

logger = logging.getLogger(__name__)


def main() -> None:
    """CLI entry point."""
    print(f"Gatekeeper v{__version__}")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_gatekeeper_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings.log_level)

    pool = create_pool(
        settings.database_url,
        min_size=settings.database_pool_min_size,
        max_size=settings.database_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    catalog = PermissionCatalog(DEFAULT_PERMISSION_DESCRIPTORS)
    role_defaults = RoleDefaultTable()
    for role, codes in role_defaults.uncataloged_codes(catalog).items():
        logger.warning("Role %r defaults name uncataloged codes: %s", role, ", ".join(sorted(codes)))

    cache = (
        EffectivePermissionCache(
            ttl_seconds=settings.permission_cache_ttl_seconds,
            max_size=settings.permission_cache_max_size,
        )
        if settings.permission_cache_enabled
        else None
    )
    override_store = UserOverrideStore(uow_factory, cache=cache)
    resolver = PermissionResolver(role_defaults, override_store)
    access_checker = GatekeeperAccessChecker(resolver, cache=cache)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            known_roles=role_defaults.roles(),
            client_secret=settings.keycloak_client_secret,
            user_id_claim=settings.keycloak_user_id_claim,
        )
        if settings.keycloak_client_secret
        else None
    )

    seed_permissions = SeedDefaultPermissionsUseCase(
        unit_of_work_factory=uow_factory,
        catalog=catalog,
    )
    list_catalog = ListCatalogUseCase(catalog)
    get_role_defaults = GetRoleDefaultsUseCase(role_defaults)
    get_user_permissions = GetUserPermissionsUseCase(
        access_checker=access_checker,
        override_store=override_store,
        catalog=catalog,
        role_defaults=role_defaults,
    )
    update_user_permissions = UpdateUserPermissionsUseCase(
        override_store=override_store,
        access_checker=access_checker,
        catalog=catalog,
    )
    grant_permission = GrantPermissionUseCase(
        override_store=override_store,
        access_checker=access_checker,
    )
    revoke_permission = RevokePermissionUseCase(
        override_store=override_store,
        access_checker=access_checker,
    )

    middleware = [PoolLifespanMiddleware(pool)]
    if settings.seed_permissions_on_startup:
        middleware.append(CatalogSeedMiddleware(seed_permissions))
    middleware += [
        AuthMiddleware(keycloak, trust_gateway_headers=settings.trust_gateway_headers),
        PermissionGateMiddleware(access_checker),
    ]
    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    if cors_origins:
        middleware.insert(
            0,
            falcon.CORSMiddleware(
                allow_origins=cors_origins,
                allow_credentials=cors_origins,
                expose_headers=["Content-Type"],
            ),
        )

    app = create_app(
        health_resource=HealthResource(catalog),
        catalog_resource=CatalogResource(list_catalog),
        roles_resource=RolesResource(get_role_defaults),
        role_defaults_resource=RoleDefaultsResource(get_role_defaults),
        user_permissions_resource=UserPermissionsResource(
            get_user_permissions, update_user_permissions
        ),
        user_permission_resource=UserPermissionResource(grant_permission, revoke_permission),
        permission_check_resource=PermissionCheckResource(access_checker),
        middleware=middleware,
    )

    async def log_exception(req, resp, ex, params):
        logger.exception("Unhandled error on %s %s", req.method, req.path)
        resp.status = falcon.HTTP_500
        resp.media = {"title": "500 Internal Server Error"}

    app.add_error_handler(Exception, log_exception)
    return app


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    app = create_gatekeeper_app()
    uvicorn.run(app, host="0.0.0.0", port=8000)
