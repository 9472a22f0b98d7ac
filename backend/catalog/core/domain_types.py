"""Domain Types - value objects shared by services, stores and routes.

Invariants:
    - Plan and PlanRouter are frozen: equality is structural, never identity
    - PlanRouter is derived on every read, never persisted
    - All permission scopes encoded as an Enum - no raw string matching in routes

Design Decisions:
    - Frozen dataclasses over ORM rows in the service layer: the store maps rows
      to Plan so round-trips compare with ==
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PlanName = NewType("PlanName", str)


# ─── Constants ───────────────────────────────────────────────────

AUTOGENERATED_PLAN_NAME = PlanName("autogenerated")
DEFAULT_CPU_SHARE = 100


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class Plan:
    """Named bundle of memory, swap and CPU-share quotas."""
    name: str
    memory: int
    swap: int
    cpu_share: int
    default: bool = False


@dataclass(frozen=True)
class PlanRouter:
    """Router catalog entry: instance name, backend type, platform-default flag."""
    name: str
    type: str
    default: bool = False


class DefaultPlanSource(str, Enum):
    """Where the resolved default plan came from."""
    EXPLICIT = "explicit"
    DERIVED = "derived"


@dataclass(frozen=True)
class DefaultPlanResolution:
    """Tagged outcome of default plan resolution."""
    source: DefaultPlanSource
    plan: Plan


# ─── Access Control ──────────────────────────────────────────────

class PermissionScope(str, Enum):
    """Dotted permission scopes checked by the HTTP layer."""
    ROOT = "*"
    APP_CREATE = "app.create"
    PLAN_CREATE = "plan.create"
    PLAN_DELETE = "plan.delete"


@dataclass(frozen=True)
class CallerIdentity:
    """Authenticated caller resolved from a bearer token."""
    email: str
    scopes: frozenset[str] = frozenset()
