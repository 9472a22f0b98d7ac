"""SQL Plan Store - PlanStore implementation over an AsyncSession.

Invariants:
    - insert() is a single INSERT; uniqueness is decided by the primary key,
      never by a prior SELECT
    - Every write commits (or rolls back) before returning
    - Rows leave the store as frozen Plan values, never as ORM instances

Design Decisions:
    - Core insert()/delete() statements instead of session.add()/delete():
      bypasses the identity map so a duplicate name always reaches the database
    - After an IntegrityError the loser is classified with one follow-up read
      (name taken → PlanAlreadyExistsError, else → PlanDefaultConflictError)
"""

import logging

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.domain_types import Plan
from catalog.core.errors import PlanAlreadyExistsError, PlanDefaultConflictError
from catalog.models.plan import PlanModel

logger = logging.getLogger(__name__)


def _to_plan(row: PlanModel) -> Plan:
    return Plan(
        name=row.name,
        memory=row.memory,
        swap=row.swap,
        cpu_share=row.cpu_share,
        default=row.is_default,
    )


class SqlPlanStore:
    """Durable plan persistence keyed by name."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def insert(self, plan: Plan) -> None:
        stmt = insert(PlanModel).values(
            name=plan.name,
            memory=plan.memory,
            swap=plan.swap,
            cpu_share=plan.cpu_share,
            is_default=plan.default,
        )
        try:
            await self._db.execute(stmt)
            await self._db.commit()
        except IntegrityError:
            await self._db.rollback()
            if await self._name_taken(plan.name):
                raise PlanAlreadyExistsError(plan.name)
            if plan.default:
                raise PlanDefaultConflictError(plan.name)
            raise

    async def _name_taken(self, name: str) -> bool:
        result = await self._db.execute(
            select(PlanModel.name).where(PlanModel.name == name),
        )
        return result.scalar_one_or_none() is not None

    async def find_by_name(self, name: str) -> Plan | None:
        result = await self._db.execute(
            select(PlanModel)
            .where(PlanModel.name == name)
            .execution_options(populate_existing=True),
        )
        row = result.scalar_one_or_none()
        return _to_plan(row) if row else None

    async def find_default(self) -> Plan | None:
        result = await self._db.execute(
            select(PlanModel)
            .where(PlanModel.is_default.is_(True))
            .execution_options(populate_existing=True),
        )
        row = result.scalars().first()
        return _to_plan(row) if row else None

    async def delete_by_name(self, name: str) -> bool:
        result = await self._db.execute(
            delete(PlanModel).where(PlanModel.name == name),
        )
        await self._db.commit()
        return result.rowcount > 0

    async def list_all(self) -> list[Plan]:
        result = await self._db.execute(
            select(PlanModel).execution_options(populate_existing=True),
        )
        return [_to_plan(row) for row in result.scalars().all()]
