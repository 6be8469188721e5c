"""
Sky culture ingestion.

Parses star names, constellation stick figures and constellation
boundaries into a read-only Catalog.
"""

from .catalog import Catalog, create_skyculture
from .constellations import ConstellationRecord
from .names import StarName

__all__ = ["Catalog", "ConstellationRecord", "StarName", "create_skyculture"]
