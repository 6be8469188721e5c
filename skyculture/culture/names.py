"""
Star-name table parsing.

Each line of names.txt is ``<HD number> <display name>``; lines starting
with ``//`` are comments.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict

from ..identifiers import IdentifierResolver, hd_key
from ..obs.logging import StructuredLogger

logger = logging.getLogger(__name__)
business_logger = StructuredLogger(__name__)

COMMENT_PREFIX = "//"
NAME_KIND = "NAME"

_NAME_LINE_RE = re.compile(r"\s*(\S+)\s?(.*)")


@dataclass(frozen=True)
class StarName:
    catalog_number: int
    display_name: str


def parse_names(text: str, resource: str = "names.txt") -> Dict[int, StarName]:
    """
    Parse the star-name resource into a table keyed by HD number.

    The display name is everything after the single space or tab that ends
    the number, so it may itself contain spaces. A later entry for the same
    number replaces the earlier one.

    Args:
        text: Resource contents
        resource: Resource name used in log messages

    Returns:
        Dict of HD number to StarName, in file order
    """
    table: Dict[int, StarName] = {}

    for line_number, raw in enumerate(text.split("\n"), 1):
        line = raw.rstrip("\r")
        if not line.strip() or line.startswith(COMMENT_PREFIX):
            continue

        number, display_name = _NAME_LINE_RE.match(line).groups()
        try:
            catalog_number = int(number)
        except ValueError:
            business_logger.record_skipped(resource, line_number, "cannot parse star name", line)
            continue

        if not display_name.strip():
            business_logger.record_skipped(resource, line_number, "missing display name", line)
            continue

        if catalog_number in table:
            logger.debug(f"HD {catalog_number} renamed from '{table[catalog_number].display_name}' "
                         f"to '{display_name}' at line {line_number}")
        table[catalog_number] = StarName(catalog_number, display_name)

    return table


def register_names(table: Dict[int, StarName], registry: IdentifierResolver) -> None:
    """Publish every display name to the identifier registry."""
    for star_name in table.values():
        registry.register(hd_key(star_name.catalog_number), NAME_KIND, star_name.display_name)
