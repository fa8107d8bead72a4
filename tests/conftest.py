"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from app.data.airports_repo import AirportRecord, AirportsRepo
from app.main import create_app


@pytest.fixture
def airports():
    """The three-airport dataset used across API scenarios."""
    return (
        AirportRecord(icao="KJFK", name="John F. Kennedy International Airport"),
        AirportRecord(icao="KLAX", name="Los Angeles International Airport"),
        AirportRecord(icao="EGLL", name="London Heathrow Airport"),
    )


@pytest.fixture
def client(airports):
    app = create_app(repo=AirportsRepo.from_records(airports))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_airports():
    """Build n synthetic records: A0000 'Airport 0', A0001 'Airport 1', ..."""
    def _make(n):
        return tuple(AirportRecord(icao=f"A{i:04d}", name=f"Airport {i}") for i in range(n))
    return _make


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text to a temp file and return its path."""
    def _write(text, name="airports.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
