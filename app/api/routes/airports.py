from fastapi import APIRouter, Depends, Query
from typing import Optional, Sequence

from app.api.deps import get_airport_search, get_airports
from app.data.airports_repo import AirportRecord
from app.models.airports import PaginatedAirports
from app.services.airport_search import AirportSearch
from app.services.pagination import MAX_PAGE_LIMIT, paginate

router = APIRouter()

_OFFSET = Query(None, ge=0, description="Start index (default 0, clamped to total)")
_LIMIT = Query(None, ge=0, description=f"Page size (default: rest of results, capped at {MAX_PAGE_LIMIT})")


@router.get("/airports", response_model=PaginatedAirports)
async def list_airports(
    offset: Optional[int] = _OFFSET,
    limit: Optional[int] = _LIMIT,
    airports: Sequence[AirportRecord] = Depends(get_airports),
):
    return PaginatedAirports.from_page(paginate(airports, offset=offset, limit=limit))


# plain def: FastAPI runs the filter pass on its threadpool, off the event loop
@router.get("/airports/search", response_model=PaginatedAirports)
def search_airports(
    q: str = Query(..., description="Case-insensitive substring of ICAO code or name"),
    offset: Optional[int] = _OFFSET,
    limit: Optional[int] = _LIMIT,
    search: AirportSearch = Depends(get_airport_search),
):
    results = search.search(q)
    return PaginatedAirports.from_page(paginate(results, offset=offset, limit=limit))
