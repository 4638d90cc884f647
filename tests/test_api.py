"""
Tests for the neologism cache API.
"""

import asyncio
import random

import pytest
from fakes import FakeEntityService
from fastapi import FastAPI
from fastapi.testclient import TestClient

from neologism_cache.api import dependencies
from neologism_cache.api.app import create_app
from neologism_cache.handlers import NeologismHandler
from neologism_cache.services import EntityCache


@pytest.fixture
def handler(seeded_service, sink):
    cache = EntityCache.create(service=seeded_service, notifier=sink, rng=random.Random(0))
    asyncio.run(cache.refresh_data())
    return NeologismHandler(cache=cache, notifications=sink)


@pytest.fixture
def client(handler):
    """Create a test client."""
    return TestClient(create_app(handler))


def login(client):
    response = client.post("/auth/login", json={"email": "ada@example.com", "password": "secret"})
    assert response.status_code == 200
    return response


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Neologism Cache API"


def test_health(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "ready",
        "authenticated": False,
        "neologism_count": 3,
        "category_count": 2,
    }


def test_list_neologisms_newest_first(client):
    response = client.get("/neologisms")
    assert response.status_code == 200
    assert [n["id"] for n in response.json()] == ["C", "B", "A"]


def test_list_neologisms_search_and_filters(client):
    assert [n["id"] for n in client.get("/neologisms", params={"q": "SNACK"}).json()] == ["C"]
    assert [n["id"] for n in client.get("/neologisms", params={"category_id": "c-art"}).json()] == ["C", "A"]
    assert [n["id"] for n in client.get("/neologisms", params={"category_id": "all"}).json()] == ["C", "B", "A"]
    assert [n["id"] for n in client.get("/neologisms", params={"status": "Draft"}).json()] == ["B"]


def test_latest_and_random(client):
    assert client.get("/neologisms/latest").json()["id"] == "C"
    assert client.get("/neologisms/random").json()["status"] == "Ready"


def test_get_unknown_neologism(client):
    assert client.get("/neologisms/nope").status_code == 404


def test_create_requires_login(client):
    response = client.post("/neologisms", json={"name": "Brunchfast", "definition": "A meal"})
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is False
    assert data["notifications"][0]["title"] == "Authentication Required"
    assert len(client.get("/neologisms").json()) == 3


def test_create_then_feature(client):
    login(client)

    response = client.post(
        "/neologisms",
        json={"name": "Brunchfast", "definition": "A meal", "root_words": ["brunch"], "status": "Ready"},
    )

    data = response.json()
    assert data["success"] is True
    created_id = data["data"]["id"]
    assert data["notifications"][0]["message"] == "Neologism created successfully"
    assert client.get("/neologisms").json()[0]["id"] == created_id
    assert client.get("/neologisms/random").json()["id"] == created_id


def test_update_status_and_content(client):
    login(client)

    response = client.patch("/neologisms/B/status", json={"status": "Archived"})
    assert response.json()["data"]["status"] == "Archived"

    response = client.put(
        "/neologisms/A",
        json={"name": "Glimmerance", "definition": "Edited", "category_id": "c-sci", "status": "Ready"},
    )
    data = response.json()
    assert data["success"] is True
    assert data["data"]["category"] == "Science"
    assert [n["id"] for n in client.get("/neologisms").json()] == ["C", "B", "A"]


def test_delete_and_categories(client):
    login(client)

    assert client.delete("/neologisms/B").json()["success"] is True
    assert [n["id"] for n in client.get("/neologisms").json()] == ["C", "A"]

    assert client.post("/categories", json={"name": "Food"}).json()["data"]["name"] == "Food"
    assert [c["name"] for c in client.get("/categories").json()] == ["Art", "Science", "Food"]


def test_login_rejected(client):
    response = client.post("/auth/login", json={"email": "ada@example.com", "password": "wrong"})
    assert response.status_code == 401


def test_logout(client):
    login(client)
    response = client.post("/auth/logout")
    assert response.status_code == 200
    assert client.get("/health").json()["authenticated"] is False


def test_lifespan_closes_service_when_app_fails(monkeypatch):
    service = FakeEntityService()
    monkeypatch.setattr(dependencies.SupabaseEntityService, "create", lambda: service)
    app = FastAPI()

    async def scenario():
        async with dependencies.lifespan(app):
            assert app.state.neologism_handler is not None
            raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        asyncio.run(scenario())

    assert service.closed
    assert getattr(app.state, "neologism_handler", None) is None
