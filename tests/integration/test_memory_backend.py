"""API tests with the in-memory storage backend."""

from unittest.mock import patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from travel_companion.core.config import Settings
from travel_companion.infrastructure.api.app import create_app


@pytest_asyncio.fixture
async def memory_client():
    """Client for an app built with the in-memory storage backend."""
    settings = Settings(storage_backend="memory")
    with patch("travel_companion.infrastructure.api.app.get_settings", return_value=settings):
        memory_app = create_app()

    async with AsyncClient(transport=ASGITransport(app=memory_app), base_url="http://test") as ac:
        yield ac


@pytest.mark.asyncio
async def test_memory_backend_round_trip(memory_client):
    group = (await memory_client.post("/api/groups", json={"name": "Road Trip"})).json()
    gid = group["id"]

    invited = await memory_client.post(f"/api/groups/{gid}/invite", json={"memberName": "Al"})
    posted = await memory_client.post(f"/api/groups/{gid}/messages", json={"message": "hi"})
    listed = await memory_client.get("/api/groups")

    assert invited.status_code == 201
    assert posted.json()["senderName"] == "Anonymous"
    assert listed.json()[0]["memberCount"] == 1

    deleted = await memory_client.delete(f"/api/groups/{gid}/messages/{posted.json()['id']}")
    assert deleted.status_code == 200
    assert (await memory_client.get(f"/api/groups/{gid}/messages")).json() == []


@pytest.mark.asyncio
async def test_memory_backend_unknown_trip(memory_client):
    response = await memory_client.post("/api/groups", json={"name": "Alps", "tripId": 8})

    assert response.status_code == 500
    assert response.json()["code"] == "INTERNAL_ERROR"


@pytest.mark.asyncio
async def test_memory_backend_opens_no_database_session(memory_client):
    with patch(
        "travel_companion.infrastructure.persistence.database.get_db_manager"
    ) as get_db_manager:
        created = await memory_client.post("/api/groups", json={"name": "Road Trip"})
        listed = await memory_client.get("/api/groups")

    assert created.status_code == 201
    assert [g["name"] for g in listed.json()] == ["Road Trip"]
    get_db_manager.assert_not_called()
