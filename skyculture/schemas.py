# skyculture/schemas.py
from typing import List, Tuple
from pydantic import BaseModel

from .culture.constellations import ConstellationRecord


class ErrorOut(BaseModel):
    code: str
    title: str
    detail: str = ""
    tip: str = ""


class StarNameOut(BaseModel):
    catalog_number: int
    name: str


class PointOut(BaseModel):
    ra_rad: float
    dec_rad: float


class ConstellationOut(BaseModel):
    id: str
    name: str
    lines: List[Tuple[int, int]]
    edges: List[Tuple[PointOut, PointOut]]

    @classmethod
    def from_record(cls, record: ConstellationRecord) -> "ConstellationOut":
        return cls(
            id=record.id,
            name=record.name,
            lines=[tuple(pair) for pair in record.lines],
            edges=[
                tuple(PointOut(ra_rad=ra, dec_rad=dec) for ra, dec in edge)
                for edge in record.edges
            ],
        )


class ConstellationsResponse(BaseModel):
    culture: str
    count: int
    constellations: List[ConstellationOut]


class HealthzResponse(BaseModel):
    status: str
    culture: str
    star_names: int
    constellations: int
    lines: int
    edges: int
