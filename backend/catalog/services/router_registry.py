"""Router Registry - built-in router backends plus operator-configured instances.

Invariants:
    - The built-in set is an immutable tuple, fixed at construction
    - Exactly one built-in is flagged default (checked at construction)
    - Configured routers are never the platform default
    - An absent "routers" subtree yields no configured routers

Design Decisions:
    - Built-ins injected into RouterRegistry instead of a module-level mutable
      registry: tests build registries with their own built-in sets
    - Configuration is read on every call: operator changes show up without restart
"""

import logging
from collections.abc import Iterable

from catalog.core.domain_types import PlanRouter
from catalog.core.errors import ConfigurationError
from catalog.core.repository_protocols import ConfigSource

logger = logging.getLogger(__name__)

ROUTERS_KEY = "routers"

BUILTIN_ROUTERS: tuple[PlanRouter, ...] = (
    PlanRouter(name="fake", type="fake", default=True),
    PlanRouter(name="fake-tls", type="fake-tls"),
)


def freeze_builtins(routers: Iterable[PlanRouter]) -> tuple[PlanRouter, ...]:
    """Sort and validate a built-in set. Raises ValueError on a bad set."""
    frozen = tuple(sorted(routers, key=lambda r: r.name))
    names = [r.name for r in frozen]
    if len(set(names)) != len(names):
        raise ValueError(f"duplicate built-in router names: {names}")
    defaults = [r.name for r in frozen if r.default]
    if len(defaults) != 1:
        raise ValueError(
            f"built-in routers must have exactly one default, got {defaults}",
        )
    return frozen


class RouterRegistry:
    """Read path over the built-in set and the routers configuration subtree."""

    def __init__(
        self,
        config: ConfigSource,
        builtins: Iterable[PlanRouter] = BUILTIN_ROUTERS,
    ):
        self._config = config
        self._builtins = freeze_builtins(builtins)

    def builtins(self) -> list[PlanRouter]:
        return list(self._builtins)

    def is_configured(self) -> bool:
        """True if the routers subtree exists, even when it is empty."""
        return self._config.children(ROUTERS_KEY) is not None

    def configured(self) -> list[PlanRouter]:
        names = self._config.children(ROUTERS_KEY)
        if names is None:
            return []
        routers = []
        for name in names:
            key = f"{ROUTERS_KEY}:{name}:type"
            router_type, present = self._config.get(key)
            if not present or router_type in (None, ""):
                raise ConfigurationError(key, f"router {name!r} has no type")
            routers.append(PlanRouter(name=name, type=str(router_type)))
        return routers
