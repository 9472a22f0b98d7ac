"""Boundary Protocols - contracts between core and shell.

Invariants:
    - Core NEVER imports from shell - dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - PlanStore is async because implementations do IO; ConfigSource is sync
      because configuration is an in-memory snapshot
"""

from typing import Any, Protocol

from catalog.core.domain_types import Plan


class PlanStore(Protocol):
    """Contract for plan persistence - implemented by shell.

    insert() must be an atomic compare-and-insert: it raises
    PlanAlreadyExistsError when the name is taken.
    """
    async def insert(self, plan: Plan) -> None: ...
    async def find_by_name(self, name: str) -> Plan | None: ...
    async def find_default(self) -> Plan | None: ...
    async def delete_by_name(self, name: str) -> bool: ...
    async def list_all(self) -> list[Plan]: ...


class ConfigSource(Protocol):
    """Contract for colon-keyed configuration lookup.

    children() returns None when the subtree is absent, [] when it is
    present but empty.
    """
    def get(self, key: str) -> tuple[Any, bool]: ...
    def children(self, prefix: str) -> list[str] | None: ...
