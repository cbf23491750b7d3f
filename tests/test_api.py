"""Tests for the catalog REST endpoints."""

import pytest
from unittest.mock import patch
from sqlalchemy.exc import OperationalError

from exofinder.services import CatalogLoader


@pytest.fixture
def seeded(session_factory, make_row, kepler_22_row):
    session = session_factory()
    rows = [
        kepler_22_row,
        make_row(hostname="Kepler-22", pl_name="Kepler-22 c", pl_radj="0.3"),
    ]
    rows += [make_row(hostname=f"Star {i:02d}", pl_name=f"Star {i:02d} b") for i in range(55)]
    CatalogLoader(session).load_records(rows)
    session.close()


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "operational"


def test_list_stars_paginates(client, seeded):
    first = client.get("/api/v1/stars").json()
    second = client.get("/api/v1/stars", params={"page": 2}).json()

    assert len(first) == 50
    assert len(second) == 6
    assert first[0]["name"] == "Kepler-22"
    assert first[0]["distance_ly"] == 619.78


def test_list_stars_all(client, seeded):
    response = client.get("/api/v1/stars", params={"all": "true"})
    assert len(response.json()) == 56


def test_search_stars(client, seeded):
    response = client.get("/api/v1/stars", params={"search": "kepler"})
    assert [s["name"] for s in response.json()] == ["Kepler-22"]


def test_invalid_page(client, seeded):
    assert client.get("/api/v1/stars", params={"page": 0}).status_code == 422


def test_star_detail(client, seeded):
    star_id = client.get("/api/v1/stars", params={"search": "Kepler-22"}).json()[0]["id"]

    body = client.get(f"/api/v1/stars/{star_id}").json()
    assert body["star"]["spectral_type"] == "G5"
    assert [p["name"] for p in body["planets"]] == ["Kepler-22 b", "Kepler-22 c"]
    assert [p["is_habitable"] for p in body["planets"]] == [True, False]


def test_star_detail_not_found(client, seeded):
    assert client.get("/api/v1/stars/99999").status_code == 404


def test_list_planets(client, seeded):
    planets = client.get("/api/v1/planets").json()
    assert len(planets) == 57
    assert planets[0]["name"] == "Kepler-22 b"
    assert planets[0]["star_name"] == "Kepler-22"


def test_stats(client, seeded):
    assert client.get("/api/v1/stats").json() == {
        "total_stars": 56,
        "total_planets": 57,
        "habitable_planets": 1,
    }


def test_database_error_is_500(client):
    error = OperationalError("SELECT", {}, Exception("connection refused"))
    with patch("exofinder.services.catalog_service.CatalogService.list_planets", side_effect=error):
        response = client.get("/api/v1/planets")

    assert response.status_code == 500
    assert response.json()["detail"] == "Database Error"
