"""Plan & Router Schemas - wire field names and conversion to domain values."""

from catalog.core.domain_types import Plan, PlanRouter
from catalog.schemas.plan import PlanCreate, PlanResponse
from catalog.schemas.router import serialize_routers


def test_plan_create_reads_cpushare_alias():
    body = PlanCreate.model_validate(
        {"name": "small", "memory": 10, "swap": 0, "cpushare": 3},
    )
    assert body.to_plan() == Plan(name="small", memory=10, swap=0, cpu_share=3)


def test_plan_create_keeps_name_as_sent():
    body = PlanCreate.model_validate(
        {"name": " small ", "memory": 10, "swap": 0, "cpushare": 3},
    )
    assert body.to_plan().name == " small "


def test_plan_create_missing_fields_default_to_invalid_values():
    plan = PlanCreate.model_validate({}).to_plan()
    assert plan == Plan(name="", memory=0, swap=0, cpu_share=0)


def test_plan_response_dumps_wire_names():
    plan = Plan(name="small", memory=10, swap=1, cpu_share=3, default=True)
    assert PlanResponse.from_plan(plan).model_dump(by_alias=True) == {
        "name": "small", "memory": 10, "swap": 1, "cpushare": 3, "default": True,
    }


def test_router_keys_are_capitalized():
    routers = [PlanRouter("fake", "fake", True), PlanRouter("edge", "hipache")]
    assert serialize_routers(routers) == [
        {"Name": "fake", "Type": "fake", "Default": True},
        {"Name": "edge", "Type": "hipache", "Default": False},
    ]
