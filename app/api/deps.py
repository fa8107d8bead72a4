from typing import Sequence

from fastapi import Request

from app.data.airports_repo import AirportRecord, AirportsRepo
from app.services.airport_search import AirportSearch


def get_airports_repo(request: Request) -> AirportsRepo:
    return request.app.state.airports_repo

def get_airports(request: Request) -> Sequence[AirportRecord]:
    return get_airports_repo(request).all()

def get_airport_search(request: Request) -> AirportSearch:
    return request.app.state.airport_search
