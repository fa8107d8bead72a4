from pydantic import BaseModel
from typing import List

from app.data.airports_repo import AirportRecord
from app.services.pagination import Page

class AirportOut(BaseModel):
    icao: str
    name: str


class PaginatedAirports(BaseModel):
    total: int
    has_more: bool
    remaining: int
    data: List[AirportOut]

    @classmethod
    def from_page(cls, page: Page[AirportRecord]) -> "PaginatedAirports":
        return cls(
            total=page.total,
            has_more=page.has_more,
            remaining=page.remaining,
            data=[AirportOut(icao=rec.icao, name=rec.name) for rec in page.data],
        )
