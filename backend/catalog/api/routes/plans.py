"""Plan Routes - create, list and remove resource plans.

Invariants:
    - Routes never validate plans themselves (PlanService does)
    - Plan errors propagate to the global CatalogError handler (400/404/409)
"""

import logging

from fastapi import APIRouter, Depends, status

from catalog.api.dependencies import (
    get_identity, get_plan_service, require_permission,
)
from catalog.core.domain_types import CallerIdentity, PermissionScope
from catalog.schemas.plan import PlanCreate, PlanResponse
from catalog.services.plan_service import PlanService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/plans", tags=["plans"])


@router.get("", response_model=list[PlanResponse], response_model_by_alias=True)
async def list_plans(
    identity: CallerIdentity = Depends(get_identity),
    service: PlanService = Depends(get_plan_service),
):
    plans = await service.list()
    return [PlanResponse.from_plan(p) for p in plans]


@router.post(
    "", response_model=PlanResponse, response_model_by_alias=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_plan(
    body: PlanCreate,
    identity: CallerIdentity = Depends(require_permission(PermissionScope.PLAN_CREATE)),
    service: PlanService = Depends(get_plan_service),
):
    plan = body.to_plan()
    await service.save(plan)
    return PlanResponse.from_plan(plan)


@router.delete("/{name}")
async def remove_plan(
    name: str,
    identity: CallerIdentity = Depends(require_permission(PermissionScope.PLAN_DELETE)),
    service: PlanService = Depends(get_plan_service),
):
    await service.remove(name)
    return {"message": f"Plan {name} removed"}
