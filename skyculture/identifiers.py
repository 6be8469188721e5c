"""
Identifier registry.

Maps designations ("Alp Ori") to catalog keys ("HD 39801") and collects
per-catalog-key attributes such as display names. The catalog builders
only see the resolve/register pair, so tests can pass any object that
provides them.
"""

import logging
import os
from typing import Dict, List, Optional, Protocol, Tuple

import yaml

logger = logging.getLogger(__name__)

HD_PREFIX = "HD "


def hd_key(catalog_number: int) -> str:
    """Registry key for an HD catalog number."""
    return f"{HD_PREFIX}{catalog_number}"


class IdentifierResolver(Protocol):
    def resolve(self, key: str) -> Optional[str]:
        ...

    def register(self, key: str, kind: str, value: str) -> None:
        ...


class IdentifierRegistry:
    """In-memory identifier registry, optionally seeded from YAML."""

    def __init__(self, aliases: Optional[Dict[str, str]] = None):
        self._aliases: Dict[str, str] = {}
        self._entries: Dict[str, List[Tuple[str, str]]] = {}
        for alias, key in (aliases or {}).items():
            self.add_alias(alias, key)

    def add_alias(self, alias: str, key: str) -> None:
        self._aliases[alias.strip().lower()] = key

    def resolve(self, key: str) -> Optional[str]:
        """
        Resolve a designation to its catalog key.

        Catalog keys resolve to themselves. Anything else is looked up
        case-insensitively among the aliases and the registered values.
        """
        if key.startswith(HD_PREFIX) and key[len(HD_PREFIX):].strip().isdigit():
            return key

        norm = key.strip().lower()
        if norm in self._aliases:
            return self._aliases[norm]

        for cat_key, values in self._entries.items():
            if any(value.lower() == norm for _, value in values):
                return cat_key
        return None

    def register(self, key: str, kind: str, value: str) -> None:
        """Attach a (kind, value) attribute to a catalog key."""
        values = self._entries.setdefault(key, [])
        if (kind, value) not in values:
            values.append((kind, value))

    def values(self, key: str, kind: Optional[str] = None) -> List[str]:
        return [v for k, v in self._entries.get(key, []) if kind is None or k == kind]

    def __len__(self):
        return len(self._aliases)


def load_registry(path: str) -> IdentifierRegistry:
    """
    Load an identifier registry from a YAML file.

    The file holds an ``identifiers`` mapping of designation to catalog
    key. A missing file yields an empty registry; only numeric star
    references will resolve against it.

    Args:
        path: Path to identifiers.yaml

    Returns:
        Populated IdentifierRegistry
    """
    if not os.path.exists(path):
        logger.warning(f"Identifier registry file not found: {path}, starting empty")
        return IdentifierRegistry()

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    aliases = data.get("identifiers") or {}
    if not isinstance(aliases, dict):
        raise ValueError(f"'identifiers' in {path} must be a mapping")

    registry = IdentifierRegistry({str(k): str(v) for k, v in aliases.items()})
    logger.info(f"Loaded {len(registry)} identifiers from {path}")
    return registry
