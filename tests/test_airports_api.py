"""Tests for the /api/airports endpoints."""

import pytest
from fastapi.testclient import TestClient

from app.core.errors import DatasetLoadError
from app.data.airports_repo import AirportsRepo
from app.main import create_app


def _codes(body):
    return [a["icao"] for a in body["data"]]


def test_list_without_params(client):
    resp = client.get("/api/airports")
    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 3
    assert body["has_more"] is False
    assert body["remaining"] == 0
    assert _codes(body) == ["KJFK", "KLAX", "EGLL"]


def test_list_with_offset_and_limit(client):
    body = client.get("/api/airports", params={"offset": 1, "limit": 2}).json()
    assert body["total"] == 3
    assert _codes(body) == ["KLAX", "EGLL"]
    assert body["has_more"] is False
    assert body["remaining"] == 0


def test_list_first_page_has_more(client):
    body = client.get("/api/airports", params={"limit": 1}).json()
    assert _codes(body) == ["KJFK"]
    assert body["has_more"] is True
    assert body["remaining"] == 2


def test_list_offset_beyond_total(client):
    body = client.get("/api/airports", params={"offset": 99}).json()
    assert body == {"total": 3, "has_more": False, "remaining": 0, "data": []}


def test_records_serialize_display_fields_only(client):
    body = client.get("/api/airports", params={"limit": 1}).json()
    assert body["data"] == [{"icao": "KJFK", "name": "John F. Kennedy International Airport"}]


def test_search_exact_code(client):
    body = client.get("/api/airports/search", params={"q": "kjfk"}).json()
    assert body["total"] == 1
    assert _codes(body) == ["KJFK"]
    assert body["has_more"] is False
    assert body["remaining"] == 0


def test_search_is_case_insensitive(client):
    lower = client.get("/api/airports/search", params={"q": "kjfk"}).json()
    upper = client.get("/api/airports/search", params={"q": "KJFK"}).json()
    assert lower == upper


def test_search_no_match(client):
    body = client.get("/api/airports/search", params={"q": "XYZ"}).json()
    assert body == {"total": 0, "has_more": False, "remaining": 0, "data": []}


def test_search_paginates_results(client):
    body = client.get(
        "/api/airports/search", params={"q": "international", "offset": 1, "limit": 5}
    ).json()
    assert body["total"] == 2
    assert _codes(body) == ["KLAX"]


def test_search_empty_query_matches_all(client):
    body = client.get("/api/airports/search", params={"q": ""}).json()
    assert body["total"] == 3


def test_limit_capped_at_fifty(make_airports):
    app = create_app(repo=AirportsRepo.from_records(make_airports(120)))
    with TestClient(app) as c:
        body = c.get("/api/airports", params={"limit": 1000}).json()
        assert len(body["data"]) == 50
        assert body["has_more"] is True
        assert body["remaining"] == 70

        body = c.get("/api/airports/search", params={"q": "airport", "limit": 1000}).json()
        assert body["total"] == 120
        assert len(body["data"]) == 50


def test_search_requires_q(client):
    resp = client.get("/api/airports/search")
    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "Invalid request parameters"
    assert [d["param"] for d in body["detail"]] == ["q"]


@pytest.mark.parametrize("params", [{"offset": -1}, {"limit": -5}, {"offset": "abc"}, {"limit": "1.5"}])
def test_malformed_pagination_params_are_client_errors(client, params):
    resp = client.get("/api/airports", params=params)
    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "Invalid request parameters"
    assert body["detail"][0]["param"] in params
    assert "input" not in body["detail"][0]


def test_healthz(client):
    assert client.get("/healthz").json() == {"ok": True, "airports": 3}


def test_startup_aborts_when_dataset_missing(tmp_path):
    app = create_app(repo=AirportsRepo(tmp_path / "missing.csv"))
    with pytest.raises(DatasetLoadError):
        with TestClient(app):
            pass


def test_default_settings_keep_search_sequential():
    from app.core.config import Settings

    assert Settings.model_fields["search_workers"].default == 1
