"""Router Registry & Catalog - built-ins, configured routers and the two views.

Invariants:
    - Full catalog = built-ins ∪ configured, sorted by name, exactly one default
    - Plan-selectable catalog = configured routers only
    - Built-in sets without exactly one default are rejected at construction
"""

import pytest

from catalog.core.domain_types import PlanRouter
from catalog.core.errors import ConfigurationError
from catalog.infrastructure.platform_config import PlatformConfig
from catalog.services.router_catalog import RouterCatalogService
from catalog.services.router_registry import (
    BUILTIN_ROUTERS, RouterRegistry, freeze_builtins,
)


def _catalog(config: PlatformConfig, **kwargs) -> RouterCatalogService:
    return RouterCatalogService(RouterRegistry(config, **kwargs))


# ─── registry ────────────────────────────────────────────────────

def test_builtins_are_sorted_and_have_one_default():
    builtins = RouterRegistry(PlatformConfig()).builtins()
    assert builtins == [
        PlanRouter(name="fake", type="fake", default=True),
        PlanRouter(name="fake-tls", type="fake-tls"),
    ]


def test_builtins_cannot_be_mutated_through_the_registry():
    registry = RouterRegistry(PlatformConfig())
    registry.builtins().clear()
    assert len(registry.builtins()) == len(BUILTIN_ROUTERS)


@pytest.mark.parametrize("routers", [
    [PlanRouter("a", "a"), PlanRouter("b", "b")],
    [PlanRouter("a", "a", True), PlanRouter("b", "b", True)],
    [PlanRouter("a", "a", True), PlanRouter("a", "b")],
])
def test_freeze_builtins_rejects_bad_sets(routers):
    with pytest.raises(ValueError):
        freeze_builtins(routers)


def test_configured_routers_are_never_default():
    config = PlatformConfig({"routers": {"edge": {"type": "hipache", "default": True}}})
    assert RouterRegistry(config).configured() == [
        PlanRouter(name="edge", type="hipache", default=False),
    ]


def test_configured_router_without_type_is_configuration_error():
    config = PlatformConfig({"routers": {"edge": {"domain": "example.com"}}})
    with pytest.raises(ConfigurationError) as exc_info:
        RouterRegistry(config).configured()
    assert exc_info.value.key == "routers:edge:type"


def test_is_configured_distinguishes_absent_from_empty():
    assert RouterRegistry(PlatformConfig()).is_configured() is False
    assert RouterRegistry(PlatformConfig({"routers": {}})).is_configured() is True


# ─── full catalog ────────────────────────────────────────────────

def test_full_catalog_without_configuration_is_builtins():
    assert _catalog(PlatformConfig()).full_catalog() == [
        PlanRouter(name="fake", type="fake", default=True),
        PlanRouter(name="fake-tls", type="fake-tls"),
    ]


def test_full_catalog_merges_and_sorts_by_name():
    config = PlatformConfig()
    config.set("routers:router2:type", "bar")
    config.set("routers:router1:type", "foo")
    config.set("routers:aaa:type", "galeb")
    assert _catalog(config).full_catalog() == [
        PlanRouter(name="aaa", type="galeb"),
        PlanRouter(name="fake", type="fake", default=True),
        PlanRouter(name="fake-tls", type="fake-tls"),
        PlanRouter(name="router1", type="foo"),
        PlanRouter(name="router2", type="bar"),
    ]


def test_full_catalog_keeps_builtin_when_names_collide():
    config = PlatformConfig({"routers": {"fake": {"type": "other"}}})
    catalog = _catalog(config).full_catalog()
    assert PlanRouter(name="fake", type="fake", default=True) in catalog
    assert [r.name for r in catalog].count("fake") == 1
    assert sum(r.default for r in catalog) == 1


def test_full_catalog_with_custom_builtins():
    builtins = [PlanRouter("zeta", "zeta", True)]
    config = PlatformConfig({"routers": {"alpha": {"type": "a"}}})
    assert _catalog(config, builtins=builtins).full_catalog() == [
        PlanRouter("alpha", "a"),
        PlanRouter("zeta", "zeta", True),
    ]


# ─── plan-selectable catalog ─────────────────────────────────────

def test_plan_selectable_catalog_absent_configuration_is_empty():
    assert _catalog(PlatformConfig()).plan_selectable_catalog() == []


def test_plan_selectable_catalog_empty_configuration_is_empty():
    assert _catalog(PlatformConfig({"routers": {}})).plan_selectable_catalog() == []


def test_plan_selectable_catalog_has_only_configured_routers():
    config = PlatformConfig()
    config.set("routers:router1:type", "foo")
    catalog = _catalog(config).plan_selectable_catalog()
    assert catalog == [PlanRouter(name="router1", type="foo")]


def test_configured_router_with_numeric_name_from_yaml(tmp_path):
    path = tmp_path / "platform.yml"
    path.write_text("routers:\n  2024:\n    type: hipache\n", encoding="utf-8")
    catalog = _catalog(PlatformConfig.from_yaml(path))
    assert catalog.plan_selectable_catalog() == [PlanRouter(name="2024", type="hipache")]
    assert [r.name for r in catalog.full_catalog()] == ["2024", "fake", "fake-tls"]
