"""Platform Configuration Tree - colon-keyed lookups over a YAML document.

Invariants:
    - Keys are colon-separated paths: "docker:memory", "routers:edge:type"
    - get() returns (value, present); absence is never confused with a falsy value
    - children() returns None for an absent subtree and [] for an empty one
    - Reads and writes share one RLock; no read ever blocks on IO
    - Mapping keys are stored as strings: YAML reads `123:` as an int key,
      and lookups always walk the tree with string path parts

Design Decisions:
    - Loaded once per process (get_platform_config is lru_cached); set()/unset()
      allow runtime overrides without reloading the file
    - Missing file → empty tree: an operator may run with no platform config
"""

import copy
import logging
import threading
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from catalog.config import get_settings
from catalog.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

_SEPARATOR = ":"


def _stringify_keys(node: Any) -> Any:
    if isinstance(node, dict):
        return {str(k): _stringify_keys(v) for k, v in node.items()}
    if isinstance(node, list):
        return [_stringify_keys(item) for item in node]
    return node


class PlatformConfig:
    """In-memory configuration tree implementing the ConfigSource protocol."""

    def __init__(self, data: dict | None = None):
        self._data: dict = _stringify_keys(data) if data else {}
        self._lock = threading.RLock()

    @classmethod
    def from_yaml(cls, path: str | Path) -> "PlatformConfig":
        """Load a tree from a YAML file. A missing file yields an empty tree."""
        path = Path(path)
        if not path.exists():
            logger.info(f"Platform config {path} not found, using empty tree")
            return cls()
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(str(path), f"invalid YAML: {e}")
        if not isinstance(data, dict):
            raise ConfigurationError(str(path), "top-level document must be a mapping")
        logger.info(f"Platform config loaded from {path}")
        return cls(data)

    def _lookup(self, key: str) -> tuple[Any, bool]:
        node: Any = self._data
        for part in key.split(_SEPARATOR):
            if not isinstance(node, dict) or part not in node:
                return None, False
            node = node[part]
        return node, True

    def get(self, key: str) -> tuple[Any, bool]:
        with self._lock:
            value, present = self._lookup(key)
            return copy.deepcopy(value), present

    def children(self, prefix: str) -> list[str] | None:
        with self._lock:
            node, present = self._lookup(prefix)
            if not present or not isinstance(node, dict):
                return None
            return list(node)

    def set(self, key: str, value: Any) -> None:
        parts = key.split(_SEPARATOR)
        with self._lock:
            node = self._data
            for part in parts[:-1]:
                child = node.get(part)
                if not isinstance(child, dict):
                    child = {}
                    node[part] = child
                node = child
            node[parts[-1]] = _stringify_keys(copy.deepcopy(value))

    def unset(self, key: str) -> None:
        """Remove a key and its whole subtree. Unsetting an absent key is a no-op."""
        parent_key, _, leaf = key.rpartition(_SEPARATOR)
        with self._lock:
            if parent_key:
                parent, present = self._lookup(parent_key)
            else:
                parent, present = self._data, True
            if present and isinstance(parent, dict):
                parent.pop(leaf, None)


@lru_cache
def get_platform_config() -> PlatformConfig:
    """FastAPI dependency - process-wide configuration snapshot."""
    return PlatformConfig.from_yaml(get_settings().platform_config_path)
