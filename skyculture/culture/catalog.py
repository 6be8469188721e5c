"""
Sky culture catalog.

Builds the star-name table, constellation stick figures and boundaries
from the three culture resources and answers read-only queries on them.
"""

import logging
import time
from dataclasses import replace
from typing import Dict, List, Optional, Tuple

from .constellations import ConstellationRecord, parse_constellations
from .edges import index_constellations, parse_edges
from .names import StarName, parse_names, register_names
from ..assets import AssetProvider, skyculture_asset
from ..config import SkyCultureConfig
from ..errors import CatalogParseError
from ..identifiers import IdentifierResolver
from ..obs.logging import StructuredLogger, TimedOperation

logger = logging.getLogger(__name__)
business_logger = StructuredLogger(__name__)

NAMES_FILE = "names.txt"
CONSTELLATIONS_FILE = "constellations.txt"
EDGES_FILE = "edges.txt"


class Catalog:
    """
    Read-only view over a built sky culture.

    Constellation records are frozen, and their lines and edges are copied
    into tuples on construction.
    """

    def __init__(self, star_names: Dict[int, StarName],
                 constellations: List[ConstellationRecord], culture: str = ""):
        self.culture = culture
        self._star_names = dict(star_names)
        self._constellations = tuple(
            replace(c, lines=tuple(c.lines), edges=tuple(c.edges)) for c in constellations
        )
        self._index = index_constellations(list(self._constellations))

    def get_star_name(self, catalog_number: int) -> Optional[str]:
        star_name = self._star_names.get(catalog_number)
        return star_name.display_name if star_name else None

    def find_catalog_number_by_name(self, name: str) -> Optional[int]:
        """
        Case-insensitive name search.

        Returns the first match in table order, or None.
        """
        wanted = name.lower()
        for star_name in self._star_names.values():
            if star_name.display_name.lower() == wanted:
                return star_name.catalog_number
        return None

    def get_constellations(self) -> Tuple[Tuple[ConstellationRecord, ...], int]:
        return self._constellations, len(self._constellations)

    def get_constellation(self, constellation_id: str) -> Optional[ConstellationRecord]:
        return self._index.get(constellation_id.lower())

    @property
    def star_names(self) -> Tuple[StarName, ...]:
        return tuple(self._star_names.values())

    def get_stats(self) -> Dict[str, int]:
        return {
            "star_names": len(self._star_names),
            "constellations": len(self._constellations),
            "lines": sum(len(c.lines) for c in self._constellations),
            "edges": sum(len(c.edges) for c in self._constellations),
        }


def _read_text(assets: AssetProvider, path: str) -> str:
    data = assets.get_asset(path)
    business_logger.resource_loaded(path, len(data))
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise CatalogParseError(f"{path} is not valid UTF-8: {e}") from e


def create_skyculture(assets: AssetProvider, registry: IdentifierResolver,
                      config: Optional[SkyCultureConfig] = None) -> Catalog:
    """
    Load and cross-reference a sky culture.

    All three resources are fetched before any parsing, so a missing one
    fails the build without touching the registry.

    Args:
        assets: Provider for asset:// resources
        registry: Resolves bayer designations and receives star names
        config: Culture name and per-constellation capacities

    Returns:
        Built Catalog

    Raises:
        AssetNotFoundError: If a resource is missing
        CatalogParseError: If a resource is not UTF-8 or the constellation
            resource is malformed
    """
    config = config or SkyCultureConfig()
    start_time = time.perf_counter()

    with TimedOperation(business_logger, "skyculture_create", culture=config.name):
        names_path = skyculture_asset(config.name, NAMES_FILE)
        names_text = _read_text(assets, names_path)
        constellations_text = _read_text(assets, skyculture_asset(config.name, CONSTELLATIONS_FILE))
        edges_path = skyculture_asset(config.name, EDGES_FILE)
        edges_text = _read_text(assets, edges_path)

        star_names = parse_names(names_text, resource=names_path)
        constellations = parse_constellations(constellations_text, registry, config.max_lines)
        parse_edges(edges_text, constellations, config.max_edges, resource=edges_path)
        register_names(star_names, registry)

        catalog = Catalog(star_names, constellations, culture=config.name)

    stats = catalog.get_stats()
    business_logger.catalog_built(
        culture=config.name,
        star_names=stats["star_names"],
        constellations=stats["constellations"],
        lines=stats["lines"],
        edges=stats["edges"],
        duration_ms=(time.perf_counter() - start_time) * 1000
    )
    return catalog
