"""Router Schemas - catalog entries as exposed over HTTP.

Invariants:
    - JSON keys are exactly Name, Type, Default (client compatibility contract)
"""

from pydantic import BaseModel, Field

from catalog.core.domain_types import PlanRouter


class PlanRouterResponse(BaseModel):
    name: str = Field(serialization_alias="Name")
    type: str = Field(serialization_alias="Type")
    default: bool = Field(False, serialization_alias="Default")

    @classmethod
    def from_router(cls, router: PlanRouter) -> "PlanRouterResponse":
        return cls(name=router.name, type=router.type, default=router.default)


def serialize_routers(routers: list[PlanRouter]) -> list[dict]:
    return [
        PlanRouterResponse.from_router(r).model_dump(by_alias=True)
        for r in routers
    ]
