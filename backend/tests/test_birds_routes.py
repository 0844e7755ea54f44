"""
Aviary Backend — Endpoint Tests
=================================

What:  GET /birds, GET /birds/plain and GET /health through the full app.
How:   HTTPX AsyncClient over ASGITransport against a SQLite store. The
       render mode is switched with app.dependency_overrides.
"""

import pytest
from unittest.mock import AsyncMock, patch

from app.exceptions import DatabaseError
from app.routes.birds import get_render_mode

SEEDED_NAMES = ["Black-Capped Chickadee", "Grackle", "Common Starling", "Mourning Dove"]
MESSAGES = ["Hello birds", "Goodbye birds"]


def _use_mode(mode):
    from app.main import app
    app.dependency_overrides[get_render_mode] = lambda: mode


class TestListBirds:

    @pytest.mark.asyncio
    async def test_envelope_with_seeded_birds(self, test_client, seeded_store):
        response = await test_client.get("/birds")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        body = response.json()
        assert list(body) == ["birds", "messages"]
        assert [b["id"] for b in body["birds"]] == [1, 2, 3, 4]
        assert [b["name"] for b in body["birds"]] == SEEDED_NAMES
        assert body["messages"] == MESSAGES

    @pytest.mark.asyncio
    async def test_each_bird_has_five_fields(self, test_client, seeded_store):
        body = (await test_client.get("/birds")).json()

        for bird in body["birds"]:
            assert set(bird) == {"id", "name", "species", "created_at", "updated_at"}
            assert bird["created_at"].endswith("Z")

    @pytest.mark.asyncio
    async def test_flat_mode(self, test_client, seeded_store):
        _use_mode("flat")

        response = await test_client.get("/birds")

        assert response.status_code == 200
        body = response.json()
        assert isinstance(body, list)
        assert [b["name"] for b in body] == SEEDED_NAMES
        assert len({b["id"] for b in body}) == 4

    @pytest.mark.asyncio
    async def test_wrapped_envelope_mode(self, test_client, seeded_store):
        _use_mode("wrapped_envelope")

        body = (await test_client.get("/birds")).json()

        assert len(body) == 1
        assert [b["name"] for b in body[0]["birds"]] == SEEDED_NAMES
        assert body[0]["messages"] == MESSAGES

    @pytest.mark.asyncio
    async def test_empty_store_envelope(self, test_client, db_session):
        response = await test_client.get("/birds")

        assert response.status_code == 200
        assert response.json() == {"birds": [], "messages": MESSAGES}

    @pytest.mark.asyncio
    async def test_empty_store_flat(self, test_client, db_session):
        _use_mode("flat")

        response = await test_client.get("/birds")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_repeated_calls_are_identical(self, test_client, seeded_store):
        first = await test_client.get("/birds")
        second = await test_client.get("/birds")
        assert first.json() == second.json()

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client, db_session):
        response = await test_client.get("/birds", headers={"X-Request-ID": "bird-123"})
        assert response.headers["X-Request-ID"] == "bird-123"

    @pytest.mark.asyncio
    async def test_request_id_generated(self, test_client, db_session):
        response = await test_client.get("/birds")
        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_database_error_returns_500(self, test_client):
        with patch("app.routes.birds.bird_service") as mock_service:
            mock_service.list_birds = AsyncMock(side_effect=DatabaseError())

            response = await test_client.get("/birds", headers={"X-Request-ID": "err-1"})

        assert response.status_code == 500
        assert response.json() == {
            "error": "server_error",
            "message": "An internal error occurred. Please try again later.",
            "request_id": "err-1",
        }


class TestListBirdsPlain:

    @pytest.mark.asyncio
    async def test_plain_text(self, test_client, seeded_store):
        response = await test_client.get("/birds/plain")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text.split("\n") == [
            "Hello birds",
            "Goodbye birds",
            "1. Black-Capped Chickadee (Poecile Atricapillus)",
            "2. Grackle (Quiscalus Quiscula)",
            "3. Common Starling (Sturnus Vulgaris)",
            "4. Mourning Dove (Zenaida Macroura)",
        ]

    @pytest.mark.asyncio
    async def test_plain_text_ignores_render_mode(self, test_client, db_session):
        _use_mode("flat")

        response = await test_client.get("/birds/plain")

        assert response.text == "Hello birds\nGoodbye birds"


class TestHealth:

    @pytest.mark.asyncio
    async def test_healthy_with_count(self, test_client, seeded_store):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["bird_count"] == 4

    @pytest.mark.asyncio
    async def test_missing_table_still_connected(self, test_client):
        """Without migrations the database is reachable but has no birds table."""
        response = await test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["bird_count"] is None

    @pytest.mark.asyncio
    async def test_health_database_down_returns_503(self, test_client):
        with patch(
            "app.database.async_session_factory",
            side_effect=OSError("connection refused"),
        ):
            response = await test_client.get("/health")

        assert response.status_code == 503
        body = response.json()
        assert body["status"] == "unhealthy"
        assert body["database"] == "disconnected"
        assert body["bird_count"] is None
