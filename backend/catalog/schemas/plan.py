"""Plan Schemas - request/response shapes for the /plans endpoints.

Invariants:
    - Wire field names are name, memory, swap, cpushare, default
    - Missing numeric fields default to 0 so the service reports them as
      invalid plan fields (PlanValidationError) instead of a generic 422/400

Design Decisions:
    - Range checks stay in core/plan_rules.py: one source of truth for plan validity
"""

from pydantic import BaseModel, ConfigDict, Field

from catalog.core.domain_types import Plan


class PlanCreate(BaseModel):
    """Plan creation body."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    memory: int = 0
    swap: int = 0
    cpu_share: int = Field(0, alias="cpushare")
    default: bool = False

    def to_plan(self) -> Plan:
        return Plan(
            name=self.name,
            memory=self.memory,
            swap=self.swap,
            cpu_share=self.cpu_share,
            default=self.default,
        )


class PlanResponse(BaseModel):
    """Plan as returned by the API."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    memory: int
    swap: int
    cpu_share: int = Field(alias="cpushare")
    default: bool = False

    @classmethod
    def from_plan(cls, plan: Plan) -> "PlanResponse":
        return cls(
            name=plan.name,
            memory=plan.memory,
            swap=plan.swap,
            cpu_share=plan.cpu_share,
            default=plan.default,
        )
