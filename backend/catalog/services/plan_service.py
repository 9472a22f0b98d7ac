"""Plan Service - validated plan lifecycle and default-plan resolution.

Invariants:
    - save() validates before touching the store; invalid plans never reach it
    - Name conflicts are detected by the store's atomic insert, not here
    - default_plan() never writes: a derived plan exists only for the call
    - Store failures propagate unchanged

Design Decisions:
    - resolve_default_plan() returns a tagged DefaultPlanResolution so the
      explicit and derived branches can be asserted independently
    - Pure rules live in core/plan_rules.py; this class only orchestrates IO
"""

import logging

from catalog.core.domain_types import (
    DefaultPlanResolution, DefaultPlanSource, Plan,
)
from catalog.core.errors import PlanNotFoundError
from catalog.core.plan_rules import derive_default_plan, validate_plan
from catalog.core.repository_protocols import ConfigSource, PlanStore

logger = logging.getLogger(__name__)


class PlanService:
    """Public plan API over a PlanStore and the platform configuration."""

    def __init__(self, store: PlanStore, config: ConfigSource):
        self._store = store
        self._config = config

    async def save(self, plan: Plan) -> None:
        validate_plan(plan)
        await self._store.insert(plan)
        logger.info(f"Plan {plan.name} created", extra={"plan_name": plan.name})

    async def list(self) -> list[Plan]:
        return await self._store.list_all()

    async def remove(self, name: str) -> None:
        if not await self._store.delete_by_name(name):
            raise PlanNotFoundError(name)
        logger.info(f"Plan {name} removed", extra={"plan_name": name})

    async def find_by_name(self, name: str) -> Plan:
        plan = await self._store.find_by_name(name)
        if plan is None:
            raise PlanNotFoundError(name)
        return plan

    async def resolve_default_plan(self) -> DefaultPlanResolution:
        """Explicit default from the store, else one derived from docker limits."""
        plan = await self._store.find_default()
        if plan is not None:
            return DefaultPlanResolution(DefaultPlanSource.EXPLICIT, plan)
        derived = derive_default_plan(self._config)
        logger.debug(
            "No default plan stored, using autogenerated plan",
            extra={"plan_name": derived.name},
        )
        return DefaultPlanResolution(DefaultPlanSource.DERIVED, derived)

    async def default_plan(self) -> Plan:
        resolution = await self.resolve_default_plan()
        return resolution.plan
