# skyculture/api.py
from fastapi import APIRouter, Query
import logging

from .schemas import (
    ConstellationOut, ConstellationsResponse, ErrorOut, HealthzResponse, StarNameOut
)
from .errors import not_found, service_unavailable
from .culture.catalog import Catalog

logger = logging.getLogger(__name__)

router = APIRouter()

# Injected in main.py once the catalog is built
CATALOG: Catalog = None


def get_catalog() -> Catalog:
    if CATALOG is None:
        service_unavailable()
    return CATALOG


@router.get("/healthz", response_model=HealthzResponse)
def healthz():
    """Report the loaded culture and its sizes."""
    catalog = get_catalog()
    return HealthzResponse(status="healthy", culture=catalog.culture, **catalog.get_stats())


@router.get(
    "/v1/stars/{catalog_number}",
    response_model=StarNameOut,
    responses={404: {"model": ErrorOut}, 503: {"model": ErrorOut}}
)
def star_name(catalog_number: int):
    """
    Display name for an HD catalog number.
    """
    name = get_catalog().get_star_name(catalog_number)
    if name is None:
        not_found(
            "STAR.NOT_FOUND",
            "No name for star",
            f"HD {catalog_number} has no name in this sky culture.",
            "Only named stars are listed; use the HD number directly."
        )
    return StarNameOut(catalog_number=catalog_number, name=name)


@router.get(
    "/v1/stars",
    response_model=StarNameOut,
    responses={404: {"model": ErrorOut}, 503: {"model": ErrorOut}}
)
def star_by_name(name: str = Query(..., min_length=1)):
    """
    HD catalog number for a display name (case-insensitive).
    """
    catalog = get_catalog()
    catalog_number = catalog.find_catalog_number_by_name(name)
    if catalog_number is None:
        not_found(
            "STAR.NOT_FOUND",
            "Unknown star name",
            f"No star named '{name}' in this sky culture.",
            "Names are matched exactly, ignoring case."
        )
    return StarNameOut(catalog_number=catalog_number, name=catalog.get_star_name(catalog_number))


@router.get(
    "/v1/constellations",
    response_model=ConstellationsResponse,
    responses={503: {"model": ErrorOut}}
)
def constellations():
    """
    All constellations with their stick figures and boundaries, in file order.
    """
    catalog = get_catalog()
    records, count = catalog.get_constellations()
    return ConstellationsResponse(
        culture=catalog.culture,
        count=count,
        constellations=[ConstellationOut.from_record(r) for r in records]
    )


@router.get(
    "/v1/constellations/{constellation_id}",
    response_model=ConstellationOut,
    responses={404: {"model": ErrorOut}, 503: {"model": ErrorOut}}
)
def constellation(constellation_id: str):
    record = get_catalog().get_constellation(constellation_id)
    if record is None:
        not_found(
            "CONSTELLATION.NOT_FOUND",
            "Unknown constellation",
            f"No constellation with id '{constellation_id}'.",
            "Use a short id such as 'Ori' (case-insensitive)."
        )
    return ConstellationOut.from_record(record)
