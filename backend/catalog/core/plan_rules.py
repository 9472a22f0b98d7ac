"""Plan Rules - pure validation and default-plan derivation.

Invariants:
    - A plan is valid only if name != "", memory > 0, cpu_share > 0, swap >= 0
    - invalid_plan_fields() reports every invalid field, in declaration order
    - derive_default_plan() never touches the store and never clamps values

Design Decisions:
    - docker:swap is the combined memory+swap ceiling (container runtime
      semantics); the plan tracks swap as the additive remainder
    - Partially configured docker limits are a ConfigurationError, not a guess
"""

from catalog.core.domain_types import (
    AUTOGENERATED_PLAN_NAME, DEFAULT_CPU_SHARE, Plan,
)
from catalog.core.errors import ConfigurationError, PlanValidationError
from catalog.core.repository_protocols import ConfigSource

MEMORY_KEY = "docker:memory"
SWAP_KEY = "docker:swap"


def invalid_plan_fields(plan: Plan) -> list[str]:
    """Return the names of every field that breaks the plan invariants."""
    fields = []
    if not plan.name:
        fields.append("name")
    if plan.memory <= 0:
        fields.append("memory")
    if plan.swap < 0:
        fields.append("swap")
    if plan.cpu_share <= 0:
        fields.append("cpu_share")
    return fields


def validate_plan(plan: Plan) -> None:
    """Raise PlanValidationError if the plan is invalid."""
    fields = invalid_plan_fields(plan)
    if fields:
        raise PlanValidationError(fields)


def _read_int(config: ConfigSource, key: str) -> int | None:
    value, present = config.get(key)
    if not present:
        return None
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ConfigurationError(key, f"expected an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(key, f"expected an integer, got {value!r}")


def derive_default_plan(config: ConfigSource) -> Plan:
    """Build the autogenerated plan from docker:memory and docker:swap."""
    memory = _read_int(config, MEMORY_KEY)
    ceiling = _read_int(config, SWAP_KEY)
    if memory is None:
        raise ConfigurationError(MEMORY_KEY, "not set; cannot derive a default plan")
    if ceiling is None:
        raise ConfigurationError(SWAP_KEY, "not set; cannot derive a default plan")
    if memory <= 0:
        raise ConfigurationError(MEMORY_KEY, f"must be positive, got {memory}")
    swap = ceiling - memory
    if swap < 0:
        raise ConfigurationError(
            SWAP_KEY,
            f"memory+swap ceiling ({ceiling}) is lower than {MEMORY_KEY} ({memory})",
        )
    return Plan(
        name=AUTOGENERATED_PLAN_NAME,
        memory=memory,
        swap=swap,
        cpu_share=DEFAULT_CPU_SHARE,
    )
