"""Router Catalog - the two externally visible router listings.

Invariants:
    - full_catalog() is never empty and is sorted by name
    - full_catalog() keeps the built-in entry when a configured router reuses its name
    - plan_selectable_catalog() contains configured routers only
"""

import logging

from catalog.core.domain_types import PlanRouter
from catalog.services.router_registry import RouterRegistry

logger = logging.getLogger(__name__)


class RouterCatalogService:

    def __init__(self, registry: RouterRegistry):
        self._registry = registry

    def full_catalog(self) -> list[PlanRouter]:
        """Built-in and configured routers, sorted by name."""
        entries = {r.name: r for r in self._registry.builtins()}
        for router in self._registry.configured():
            if router.name in entries:
                logger.warning(
                    f"Configured router {router.name} shadows a built-in, ignoring it",
                )
                continue
            entries[router.name] = router
        return sorted(entries.values(), key=lambda r: r.name)

    def plan_selectable_catalog(self) -> list[PlanRouter]:
        """Routers an operator provisioned for plans."""
        if not self._registry.is_configured():
            logger.debug("No routers configured")
            return []
        return self._registry.configured()
