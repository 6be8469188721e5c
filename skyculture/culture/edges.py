"""
Constellation boundary parsing.

Each line of edges.txt describes one boundary segment between two
adjacent constellations:

    001:002 M+ 22:52:00 +34:30:00 22:52:00 +52:30:00 AND LAC

The first two fields are labels and are ignored. The edge is attached to
both constellations.
"""

import logging
from typing import Dict, List, Optional

from .constellations import ConstellationRecord, Edge
from .coords import decode_declination, decode_right_ascension, parse_sexagesimal
from ..obs.logging import StructuredLogger

logger = logging.getLogger(__name__)
business_logger = StructuredLogger(__name__)

EDGE_FIELD_COUNT = 8


def index_constellations(constellations: List[ConstellationRecord]) -> Dict[str, ConstellationRecord]:
    """Case-insensitive id index; the first record with a given id wins."""
    index: Dict[str, ConstellationRecord] = {}
    for record in constellations:
        index.setdefault(record.id.lower(), record)
    return index


def parse_edge_line(line: str) -> Optional[tuple]:
    """
    Decode one boundary line into (edge, (id1, id2)).

    Returns None if the line does not have the expected fields.
    """
    fields = line.split()
    if len(fields) < EDGE_FIELD_COUNT:
        return None

    try:
        points = []
        for ra_text, dec_text in ((fields[2], fields[3]), (fields[4], fields[5])):
            _, h, m, s = parse_sexagesimal(ra_text)
            sign, d, dm, ds = parse_sexagesimal(dec_text)
            points.append((decode_right_ascension("+", h, m, s),
                           decode_declination(sign, d, dm, ds)))
    except ValueError:
        return None

    edge: Edge = (points[0], points[1])
    return edge, (fields[6], fields[7])


def parse_edges(text: str, constellations: List[ConstellationRecord],
                max_edges: int = 64, resource: str = "edges.txt") -> int:
    """
    Attach boundary edges to already-parsed constellations.

    Args:
        text: Resource contents
        constellations: Records to attach edges to, modified in place
        max_edges: Edges kept per constellation
        resource: Resource name used in log messages

    Returns:
        Number of edge attachments made
    """
    index = index_constellations(constellations)
    attached = 0

    for line_number, raw in enumerate(text.split("\n"), 1):
        line = raw.strip()
        if not line:
            continue

        parsed = parse_edge_line(line)
        if parsed is None:
            business_logger.record_skipped(resource, line_number, "malformed boundary", line)
            continue

        edge, ids = parsed
        for cst in ids:
            record = index.get(cst.lower())
            if record is None:
                logger.debug(f"Boundary at line {line_number} references unknown constellation {cst}")
                continue
            if len(record.edges) >= max_edges:
                business_logger.capacity_exceeded("bounds", record.id, max_edges)
                continue
            record.edges.append(edge)
            attached += 1

    return attached
