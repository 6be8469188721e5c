"""
Constellation table parsing.

Each line of constellations.txt is ``<id>|<name>|<stars>`` where <stars> is
a list of HD numbers or bayer designations separated by spaces or hyphens:

    Ori|Orion|Alp-Gam-Del 27366-Kap

A hyphen in front of a star draws a segment from the previous star to it;
a space starts a new, unconnected point.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from ..errors import CatalogParseError, IdentifierResolutionError
from ..identifiers import HD_PREFIX, IdentifierResolver
from ..obs.logging import StructuredLogger

logger = logging.getLogger(__name__)
business_logger = StructuredLogger(__name__)

FIELD_SEPARATOR = "|"
LINK_SEPARATOR = "-"

_TOKEN_RE = re.compile(r"[^ -]+")
_LEADING_INT_RE = re.compile(r"^\d+")

Point = Tuple[float, float]  # (ra, dec) radians
Edge = Tuple[Point, Point]
Segment = Tuple[int, int]  # (HD, HD)


@dataclass(frozen=True)
class ConstellationRecord:
    id: str
    name: str
    lines: Sequence[Segment] = field(default_factory=list)
    edges: Sequence[Edge] = field(default_factory=list)


@dataclass(frozen=True)
class StarToken:
    text: str
    linked: bool  # immediately preceded by a hyphen


def tokenize_stars(text: str) -> List[StarToken]:
    """Split a star list on spaces and hyphens, flagging hyphen-linked tokens."""
    return [
        StarToken(m.group(), m.start() > 0 and text[m.start() - 1] == LINK_SEPARATOR)
        for m in _TOKEN_RE.finditer(text)
    ]


def _parse_hd(text: str) -> Optional[int]:
    match = _LEADING_INT_RE.match(text)
    return int(match.group()) if match else None


def resolve_star(constellation_id: str, token: str, registry: IdentifierResolver,
                 line_number: Optional[int] = None) -> int:
    """
    Resolve a star token to its HD number.

    Tokens starting with a decimal digit are HD numbers. Anything else is a
    bayer designation within the constellation ("Alp" in "Ori" -> "Alp Ori").

    Raises:
        IdentifierResolutionError: If the designation has no HD number
    """
    hd = _parse_hd(token)
    if hd is not None:
        return hd

    key = f"{token} {constellation_id}"
    resolved = registry.resolve(key)
    if not resolved or not resolved.startswith(HD_PREFIX):
        raise IdentifierResolutionError(token, key, line_number)

    hd = _parse_hd(resolved[len(HD_PREFIX):])
    if hd is None:
        raise IdentifierResolutionError(token, key, line_number)
    return hd


def parse_constellation_line(line: str, registry: IdentifierResolver, max_lines: int,
                             line_number: Optional[int] = None) -> ConstellationRecord:
    """
    Parse one ``id|name|stars`` line into a ConstellationRecord.

    Raises:
        CatalogParseError: On missing fields or a dangling hyphen link
        IdentifierResolutionError: On an unknown bayer designation
    """
    parts = line.split(FIELD_SEPARATOR, 2)
    if len(parts) < 2 or not parts[0].strip() or not parts[1].strip():
        raise CatalogParseError(f"expected 'id|name|stars', got {line!r}", line_number)

    record = ConstellationRecord(id=parts[0].strip(), name=parts[1].rstrip(" "))
    stars = parts[2] if len(parts) > 2 else ""

    last_star = None
    for token in tokenize_stars(stars):
        if token.linked and last_star is None:
            raise CatalogParseError(
                f"'{token.text}' is linked to a previous star but is the first in {record.id}",
                line_number
            )
        star = resolve_star(record.id, token.text, registry, line_number)
        if token.linked:
            if len(record.lines) < max_lines:
                record.lines.append((last_star, star))
            else:
                business_logger.capacity_exceeded("lines", record.id, max_lines)
        last_star = star

    return record


def parse_constellations(text: str, registry: IdentifierResolver,
                         max_lines: int = 64) -> List[ConstellationRecord]:
    """
    Parse the constellation resource, one record per non-empty line.

    Args:
        text: Resource contents
        registry: Resolves bayer designations to "HD <n>" keys
        max_lines: Stick-figure segments kept per constellation

    Returns:
        Records in file order

    Raises:
        CatalogParseError: If the resource holds no constellation or a line is malformed
    """
    records = []
    for line_number, raw in enumerate(text.split("\n"), 1):
        line = raw.rstrip("\r")
        if not line.strip():
            continue
        records.append(parse_constellation_line(line, registry, max_lines, line_number))

    if not records:
        raise CatalogParseError("constellation resource is empty")

    logger.debug(f"Parsed {len(records)} constellations")
    return records
