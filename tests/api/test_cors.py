"""
API tests for the origin policy middleware.
"""

import pytest
from fastapi.testclient import TestClient

from movies_api.api.main import create_app
from movies_api.database import MovieStore, load_seed

ALLOWED = "http://localhost:8080"


@pytest.fixture
def seed():
    return load_seed()


@pytest.fixture
def client(seed):
    app = create_app(store=MovieStore(seed), allow_origins=[ALLOWED, "https://movies.com"])
    return TestClient(app)


def test_no_origin_allowed(client, seed):
    r = client.get(f"/movies/{seed[0]['id']}")
    assert r.status_code == 200
    assert "access-control-allow-origin" not in r.headers


def test_allowed_origin_reflected(client, seed):
    r = client.get(f"/movies/{seed[0]['id']}", headers={"Origin": ALLOWED})
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == ALLOWED
    assert "Origin" in r.headers["vary"]


def test_allowed_origin_on_error_response(client):
    r = client.get("/movies/missing", headers={"Origin": ALLOWED})
    assert r.status_code == 404
    assert r.headers["access-control-allow-origin"] == ALLOWED


def test_list_keeps_wildcard(client):
    r = client.get("/movies", headers={"Origin": ALLOWED})
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"


@pytest.mark.parametrize("origin", ["http://localhost:3000", "https://movies.com.evil.io"])
def test_disallowed_origin_rejected(client, seed, origin):
    r = client.get("/movies", headers={"Origin": origin})
    assert r.status_code == 403
    assert r.text == "Not allowed by CORS"
    assert "access-control-allow-origin" not in r.headers


def test_disallowed_origin_never_reaches_handler(client, seed):
    movie_id = seed[0]["id"]
    r = client.delete(f"/movies/{movie_id}", headers={"Origin": "http://localhost:3000"})
    assert r.status_code == 403
    assert client.get(f"/movies/{movie_id}").status_code == 200


def test_preflight(client, seed):
    r = client.options(
        f"/movies/{seed[0]['id']}",
        headers={
            "Origin": ALLOWED,
            "Access-Control-Request-Method": "PATCH",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert r.status_code == 200
    methods = [m.strip() for m in r.headers["access-control-allow-methods"].split(",")]
    assert "PATCH" in methods
    assert "DELETE" in methods
    assert r.headers["access-control-allow-headers"] == "Content-Type"
    assert r.headers["access-control-allow-origin"] == ALLOWED


def test_preflight_disallowed_origin(client):
    r = client.options(
        "/movies",
        headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "POST"},
    )
    assert r.status_code == 403


def test_preflight_does_not_reach_routes(client, seed):
    r = client.options(
        "/movies",
        headers={"Origin": ALLOWED, "Access-Control-Request-Method": "POST"},
    )
    assert r.status_code == 200
    assert len(client.get("/movies").json()) == len(seed)


def test_empty_origin_treated_as_missing(client, seed):
    r = client.get(f"/movies/{seed[0]['id']}", headers={"Origin": ""})
    assert r.status_code == 200
    assert "access-control-allow-origin" not in r.headers
