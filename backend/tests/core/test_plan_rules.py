"""Plan Rules - validation and default-plan derivation.

Tests cover:
    - invalid_plan_fields reports every broken field in declaration order
    - validate_plan raises PlanValidationError, accepts zero swap
    - derive_default_plan subtracts memory from the docker:swap ceiling
    - partial, negative and malformed docker limits raise ConfigurationError
"""

import pytest

from catalog.core.domain_types import Plan
from catalog.core.errors import ConfigurationError, PlanValidationError
from catalog.core.plan_rules import (
    derive_default_plan, invalid_plan_fields, validate_plan,
)
from catalog.infrastructure.platform_config import PlatformConfig


def _plan(**overrides) -> Plan:
    fields = {"name": "plan1", "memory": 1024, "swap": 512, "cpu_share": 100}
    fields.update(overrides)
    return Plan(**fields)


# ─── validation ──────────────────────────────────────────────────

def test_valid_plan_has_no_invalid_fields():
    assert invalid_plan_fields(_plan()) == []


def test_zero_swap_is_valid():
    validate_plan(_plan(swap=0))


@pytest.mark.parametrize("overrides, field", [
    ({"name": ""}, "name"),
    ({"memory": 0}, "memory"),
    ({"memory": -1}, "memory"),
    ({"cpu_share": 0}, "cpu_share"),
    ({"swap": -5}, "swap"),
])
def test_single_invalid_field_is_named(overrides, field):
    with pytest.raises(PlanValidationError) as exc_info:
        validate_plan(_plan(**overrides))
    assert exc_info.value.fields == [field]


def test_all_invalid_fields_reported_together():
    plan = Plan(name="", memory=0, swap=0, cpu_share=0)
    assert invalid_plan_fields(plan) == ["name", "memory", "cpu_share"]


def test_validation_error_maps_to_400():
    with pytest.raises(PlanValidationError) as exc_info:
        validate_plan(_plan(name=""))
    assert exc_info.value.http_status == 400
    assert exc_info.value.to_response()["error"]["fields"] == ["name"]


# ─── default plan derivation ─────────────────────────────────────

def test_derive_default_plan_subtracts_memory_from_swap_ceiling():
    config = PlatformConfig({"docker": {"memory": 12, "swap": 32}})
    assert derive_default_plan(config) == Plan(
        name="autogenerated", memory=12, swap=20, cpu_share=100,
    )


def test_derive_default_plan_allows_zero_swap():
    config = PlatformConfig({"docker": {"memory": 64, "swap": 64}})
    assert derive_default_plan(config).swap == 0


def test_derive_default_plan_accepts_numeric_strings():
    config = PlatformConfig({"docker": {"memory": "12", "swap": "32"}})
    assert derive_default_plan(config).swap == 20


def test_negative_derived_swap_is_configuration_error():
    config = PlatformConfig({"docker": {"memory": 32, "swap": 12}})
    with pytest.raises(ConfigurationError) as exc_info:
        derive_default_plan(config)
    assert exc_info.value.key == "docker:swap"
    assert exc_info.value.http_status == 500


@pytest.mark.parametrize("docker, missing", [
    ({"swap": 32}, "docker:memory"),
    ({"memory": 12}, "docker:swap"),
    ({}, "docker:memory"),
])
def test_partial_docker_limits_are_configuration_errors(docker, missing):
    config = PlatformConfig({"docker": docker})
    with pytest.raises(ConfigurationError) as exc_info:
        derive_default_plan(config)
    assert exc_info.value.key == missing


@pytest.mark.parametrize("value", ["lots", True, 1.5])
def test_non_integer_memory_is_configuration_error(value):
    config = PlatformConfig({"docker": {"memory": value, "swap": 32}})
    with pytest.raises(ConfigurationError):
        derive_default_plan(config)


def test_non_positive_memory_is_configuration_error():
    config = PlatformConfig({"docker": {"memory": 0, "swap": 32}})
    with pytest.raises(ConfigurationError):
        derive_default_plan(config)
