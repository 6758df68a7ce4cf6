"""
Restaurant Ordering API: Application-Level Tests
===================================================

What:  Health probes, request ids, and the error envelope for failures that
       do not come from a specific router.
"""

from unittest.mock import AsyncMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

from app.exceptions import DatabaseError
from app.main import create_app
from app.services.menu_service import menu_service


class TestHealth:

    @pytest.mark.asyncio
    async def test_ping_reads_database_time(self, client):
        response = await client.get("/ping")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["time"]

    @pytest.mark.asyncio
    async def test_health(self, client):
        body = (await client.get("/health")).json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["version"]


class TestRequestId:

    @pytest.mark.asyncio
    async def test_generated(self, client):
        response = await client.get("/ping")
        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_propagated(self, client):
        response = await client.get("/ping", headers={"X-Request-ID": "trace-123"})
        assert response.headers["X-Request-ID"] == "trace-123"


class TestErrorEnvelope:

    @pytest.mark.asyncio
    async def test_unknown_route(self, client):
        response = await client.get("/api/nothing-here")
        assert response.status_code == 404
        assert response.json()["status"] == "not_found"

    @pytest.mark.asyncio
    async def test_malformed_json(self, client, auth_headers):
        response = await client.post(
            "/api/menus",
            content=b"{not json",
            headers={**auth_headers, "Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["status"] == "bad_request"

    @pytest.mark.asyncio
    async def test_database_error_hides_detail(self, client, auth_headers):
        failure = DatabaseError(context={"detail": "relation tbl_menus does not exist"})
        with patch.object(menu_service, "list", AsyncMock(side_effect=failure)):
            response = await client.get("/api/menus", headers=auth_headers)

        assert response.status_code == 500
        assert response.json() == {"status": "error", "message": "Database error"}

    @pytest.mark.asyncio
    async def test_database_error_detail_when_enabled(self, test_settings, session_factory, auth_headers):
        settings = test_settings.model_copy(update={"expose_error_detail": True})
        app = create_app(settings=settings, session_factory=session_factory)
        failure = DatabaseError(context={"detail": "relation tbl_menus does not exist"})

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
            with patch.object(menu_service, "list", AsyncMock(side_effect=failure)):
                response = await http.get("/api/menus", headers=auth_headers)

        assert response.status_code == 500
        assert response.json()["detail"] == "relation tbl_menus does not exist"
