"""Router Catalog Routes - GET /routers and GET /plans/routers.

Invariants:
    - Both views require the app.create scope, checked before the catalog is built
    - /routers always answers 200 with the full catalog (built-ins included)
    - /plans/routers answers 204 with no body when no router is configured
    - 200 responses are application/json with keys Name, Type, Default

Design Decisions:
    - Two explicit routes over one route with a flag: each view keeps its own
      emptiness rule
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from catalog.api.dependencies import get_router_catalog, require_permission
from catalog.core.domain_types import CallerIdentity, PermissionScope
from catalog.schemas.router import serialize_routers
from catalog.services.router_catalog import RouterCatalogService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["routers"])


@router.get("/routers")
async def list_routers(
    identity: CallerIdentity = Depends(require_permission(PermissionScope.APP_CREATE)),
    catalog: RouterCatalogService = Depends(get_router_catalog),
):
    """Full router catalog: built-in backends plus configured instances."""
    routers = catalog.full_catalog()
    logger.debug(
        "Router catalog listed",
        extra={"user_email": identity.email, "router_count": len(routers)},
    )
    return JSONResponse(content=serialize_routers(routers))


@router.get("/plans/routers")
async def list_plan_routers(
    identity: CallerIdentity = Depends(require_permission(PermissionScope.APP_CREATE)),
    catalog: RouterCatalogService = Depends(get_router_catalog),
):
    """Routers selectable for a plan; 204 when none are configured."""
    routers = catalog.plan_selectable_catalog()
    if not routers:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return JSONResponse(content=serialize_routers(routers))
