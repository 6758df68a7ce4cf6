"""
Restaurant Ordering API: Auth Gate Tests
===========================================

What:  Every rejection path of require_principal, observed over HTTP, plus
       the /login, /logout and /profile routes.
Why:   All failures must look identical to the client (401 "Unauthorized")
       while the server log records which check failed.
"""

import logging
from datetime import datetime, timedelta, timezone

import jwt
import pytest

UNAUTHORIZED = {"status": "error", "message": "Unauthorized"}


class TestGateRejections:

    @pytest.mark.asyncio
    async def test_missing_header(self, client, caplog):
        with caplog.at_level(logging.WARNING, logger="app.middleware.auth"):
            response = await client.get("/api/menus")

        assert response.status_code == 401
        assert response.json() == UNAUTHORIZED
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert "missing_credentials" in caplog.text

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "header", ["Basic dXNlcjpwdw==", "Bearer", "Bearer ", "bearer abc", "Token abc"]
    )
    async def test_malformed_header(self, client, caplog, header):
        with caplog.at_level(logging.WARNING, logger="app.middleware.auth"):
            response = await client.get("/api/restaurants", headers={"Authorization": header})

        assert response.status_code == 401
        assert response.json() == UNAUTHORIZED
        assert "malformed_credentials" in caplog.text

    @pytest.mark.asyncio
    async def test_token_after_double_space(self, client, make_token, caplog):
        with caplog.at_level(logging.WARNING, logger="app.middleware.auth"):
            response = await client.get(
                "/api/menus", headers={"Authorization": f"Bearer  {make_token()}"}
            )

        assert response.status_code == 401
        assert response.json() == UNAUTHORIZED
        assert "malformed_credentials" in caplog.text

    @pytest.mark.asyncio
    async def test_foreign_signature(self, client, caplog):
        tampered = jwt.encode(
            {"id": 1, "username": "tester", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            "a-different-secret-that-is-long-enough-000",
            algorithm="HS256",
        )
        with caplog.at_level(logging.WARNING, logger="app.middleware.auth"):
            response = await client.get(
                "/api/orders", headers={"Authorization": f"Bearer {tampered}"}
            )

        assert response.status_code == 401
        assert response.json() == UNAUTHORIZED
        assert "invalid_token" in caplog.text

    @pytest.mark.asyncio
    async def test_expired_token(self, client, make_token):
        token = make_token(expires_delta=timedelta(seconds=-1))
        response = await client.get("/api/payments", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.json() == UNAUTHORIZED

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,path",
        [
            ("get", "/api/users"),
            ("get", "/api/users/1"),
            ("put", "/api/users/1"),
            ("delete", "/api/users/1"),
            ("post", "/api/shippings"),
            ("get", "/api/orders/summary"),
            ("post", "/logout"),
            ("get", "/profile"),
        ],
    )
    async def test_private_routes_require_token(self, client, method, path):
        kwargs = {"json": {}} if method in ("post", "put") else {}
        response = await getattr(client, method)(path, **kwargs)
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_gate_runs_before_id_validation(self, client):
        response = await client.get("/api/menus/not-a-number")
        assert response.status_code == 401


class TestAuthRoutes:

    @pytest.mark.asyncio
    async def test_profile_echoes_principal(self, client, make_token):
        token = make_token(customer_id=12, username="somchai")
        response = await client.get("/profile", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "data": {"id": 12, "username": "somchai"}}

    @pytest.mark.asyncio
    async def test_logout(self, client, auth_headers):
        response = await client.post("/logout", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "message": "Logout successful"}

    @pytest.mark.asyncio
    async def test_login_unknown_user(self, client):
        response = await client.post("/login", json={"username": "ghost", "password": "x"})
        assert response.status_code == 401
        assert response.json() == {"status": "error", "message": "Invalid username or password"}

    @pytest.mark.asyncio
    async def test_login_missing_fields(self, client):
        response = await client.post("/login", json={})
        assert response.status_code == 401
