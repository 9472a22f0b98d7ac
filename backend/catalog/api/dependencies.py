"""Route Dependencies - identity, permission gates and per-request services.

Invariants:
    - No bearer token, or an unknown one → AuthenticationError (401)
    - require_permission() runs before the route body; a denied caller never
      reaches a service or the router catalog
    - Services are built per request from the request's DB session and the
      process-wide platform config

Design Decisions:
    - HTTPBearer(auto_error=False): missing credentials surface as our own
      AuthenticationError envelope instead of FastAPI's default 403
    - require_permission is a dependency factory so each route declares its
      scope next to its path
"""

import logging

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.domain_types import CallerIdentity, PermissionScope
from catalog.core.errors import AuthenticationError, PermissionDeniedError
from catalog.core.permissions import has_permission
from catalog.infrastructure.database import get_db
from catalog.infrastructure.platform_config import PlatformConfig, get_platform_config
from catalog.services.identity import resolve_identity
from catalog.services.plan_service import PlanService
from catalog.services.plan_store import SqlPlanStore
from catalog.services.router_catalog import RouterCatalogService
from catalog.services.router_registry import RouterRegistry

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


async def get_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> CallerIdentity:
    if credentials is None or not credentials.credentials:
        raise AuthenticationError()
    identity = await resolve_identity(db, credentials.credentials)
    if identity is None:
        raise AuthenticationError("Invalid or expired token")
    return identity


def require_permission(scope: PermissionScope):
    """Build a dependency that admits only callers holding `scope`."""

    async def _check(
        identity: CallerIdentity = Depends(get_identity),
    ) -> CallerIdentity:
        if not has_permission(identity, scope):
            logger.warning(
                f"Permission {scope.value} denied for {identity.email}",
                extra={"user_email": identity.email, "scope": scope.value},
            )
            raise PermissionDeniedError(scope.value)
        return identity

    return _check


def get_plan_service(
    db: AsyncSession = Depends(get_db),
    config: PlatformConfig = Depends(get_platform_config),
) -> PlanService:
    return PlanService(SqlPlanStore(db), config)


def get_router_catalog(
    config: PlatformConfig = Depends(get_platform_config),
) -> RouterCatalogService:
    return RouterCatalogService(RouterRegistry(config))
